"""Исключения слоя доступа к Docker."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class DockerAPIError(Exception):
    """Базовая ошибка обращения к среде выполнения контейнеров."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class QueryFailure(DockerAPIError):
    """Листинг контейнеров/сетей/томов не удался или вернул некорректные данные."""


class DispatchFailure(DockerAPIError):
    """Изменяющая команда (start/stop/...) завершилась ошибкой."""


class UnsupportedCommand(DockerAPIError):
    """Команда не входит в набор start/stop/restart/kill/rm."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Unexpected command {command}.", context={"command": command})


class PruneSubActionFailure(DockerAPIError):
    """Один из шагов очистки завершился ошибкой; остальные шаги продолжаются."""

    def __init__(self, action: str, reason: str) -> None:
        self.action = action
        self.reason = reason
        super().__init__(
            f"Prune step '{action}' failed: {reason}",
            context={"action": action, "reason": reason},
        )

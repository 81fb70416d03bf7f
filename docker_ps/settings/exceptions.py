"""Ошибки загрузки config.json."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class SettingsError(Exception):
    """Базовая ошибка настроек; сообщение и контекст сразу попадают в лог."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


def _setting_name(group: str, key: Optional[str]) -> str:
    return f"{group}.{key}" if key else group


class UnknownSettingError(SettingsError):
    """В config.json указана группа или ключ, которых программа не знает."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        self.group = group
        self.key = key
        kind = "key" if key else "group"
        super().__init__(
            f"Unknown settings {kind} '{_setting_name(group, key)}'",
            context={"group": group, "key": key},
        )


class SettingsValidationError(SettingsError):
    """Значение из config.json не прошло проверку."""

    def __init__(self, group: str, key: Optional[str], value: Any, reason: str) -> None:
        self.group = group
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid value for '{_setting_name(group, key)}': {reason} (got {value!r})",
            context={"group": group, "key": key, "value": value},
        )


class ConfigReadError(SettingsError):
    """config.json существует, но прочитать его как JSON-объект не удалось."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(
            f"Cannot read config file '{path}': {reason}",
            context={"path": str(path)},
        )

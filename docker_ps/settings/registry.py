"""Реестр настроек приложения, читаемый из config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from docker_ps.settings.exceptions import (
    ConfigReadError,
    SettingsValidationError,
    UnknownSettingError,
)
from docker_ps.settings.groups import (
    DockerSettings,
    LoggingSettings,
    MenuSettings,
    MinikubeSettings,
    SettingsGroup,
)


class SettingsRegistry:
    """Все группы настроек одного запуска.

    Файл конфигурации только читается: отсутствующий файл означает значения
    по умолчанию, и программа его не создаёт.
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._logger = logging.getLogger(__name__)
        self._file_path = config_path or Path.home() / ".docker-ps" / "config.json"
        self._settings: Dict[str, SettingsGroup] = {
            "logging": LoggingSettings(),
            "docker": DockerSettings(),
            "menu": MenuSettings(),
            "minikube": MinikubeSettings(),
        }

    def get_value(self, group: str, key: str) -> Any:
        return self.get_group(group).get(key)

    def get_group(self, group: str) -> SettingsGroup:
        try:
            return self._settings[group]
        except KeyError:
            raise UnknownSettingError(group) from None

    def load_from_disk(self) -> None:
        """Читает config.json и применяет каждую секцию к своей группе."""

        path = self._file_path
        if not path.exists():
            self._logger.debug("Config file %s not found, using defaults.", path)
            return
        try:
            content = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigReadError(path, str(exc)) from exc
        if not isinstance(content, dict):
            raise ConfigReadError(path, "top-level JSON value must be an object")

        for name, section in content.items():
            group = self.get_group(name)
            if not isinstance(section, dict):
                raise SettingsValidationError(name, None, section, "expected an object")
            group.from_dict(section)
        self._logger.debug("Loaded config from %s", path)

"""Группы настроек config.json со значениями по умолчанию и проверками."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from docker_ps.settings.exceptions import SettingsValidationError, UnknownSettingError
from docker_ps.settings.validators import (
    Check,
    CommandName,
    IntRange,
    IsBool,
    IsString,
    OneOf,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class SettingsGroup(ABC):
    """Одна секция config.json: ключи, умолчания и проверка каждого ключа."""

    group_name: str = ""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = dict(self.defaults())
        self._checks: Dict[str, Check] = self.checks()

    @abstractmethod
    def defaults(self) -> Dict[str, Any]:
        """Значения, которые действуют без config.json."""

    @abstractmethod
    def checks(self) -> Dict[str, Check]:
        """Проверка для каждого ключа группы."""

    def get(self, key: str) -> Any:
        if key not in self._values:
            raise UnknownSettingError(self.group_name, key)
        return self._values[key]

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Применяет секцию из файла; ключи, которых нет в файле, не меняются.

        Сначала проверяется вся секция, поэтому при ошибке группа остаётся
        в прежнем состоянии.
        """

        for key, value in data.items():
            if key not in self._values:
                raise UnknownSettingError(self.group_name, key)
            reason = self._checks[key](value)
            if reason is not None:
                raise SettingsValidationError(self.group_name, key, value, reason)
        self._values.update(data)


class LoggingSettings(SettingsGroup):
    group_name = "logging"

    def defaults(self) -> Dict[str, Any]:
        return {
            "enabled": True,
            "level": "INFO",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def checks(self) -> Dict[str, Check]:
        return {
            "enabled": IsBool(),
            "level": OneOf(LOG_LEVELS),
            "max_file_size_mb": IntRange(1, 1000),
            "max_archived_files": IntRange(1, 50),
        }


class DockerSettings(SettingsGroup):
    """Параметры доступа к Docker: бэкенд, путь к бинарнику, адрес демона."""

    group_name = "docker"

    def defaults(self) -> Dict[str, Any]:
        return {
            "backend": "cli",
            "binary": "docker",
            "host": "",
        }

    def checks(self) -> Dict[str, Check]:
        return {
            "backend": OneOf(("cli", "sdk")),
            "binary": CommandName(),
            "host": IsString(),
        }


class MenuSettings(SettingsGroup):
    """Какие разделы меню показывать."""

    group_name = "menu"

    def defaults(self) -> Dict[str, Any]:
        return {
            "show_networks": True,
            "show_volumes": True,
            "show_details": True,
            "show_global_actions": True,
        }

    def checks(self) -> Dict[str, Check]:
        return {key: IsBool() for key in self.defaults()}


class MinikubeSettings(SettingsGroup):
    group_name = "minikube"

    def defaults(self) -> Dict[str, Any]:
        return {
            "enabled": True,
            "binary": "minikube",
        }

    def checks(self) -> Dict[str, Check]:
        return {
            "enabled": IsBool(),
            "binary": CommandName(),
        }

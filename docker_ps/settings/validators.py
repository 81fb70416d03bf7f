"""Проверки значений config.json.

Проверка возвращает текст ошибки или None. Группу и ключ к тексту
добавляет SettingsGroup, когда собирает SettingsValidationError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Tuple


def _json_type(value: Any) -> str:
    # названия типов в терминах JSON: пользователь правит config.json, а не Python
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


class Check(ABC):
    """Проверка одного значения настройки."""

    @abstractmethod
    def __call__(self, value: Any) -> Optional[str]:
        """Возвращает None для корректного значения, иначе описание ошибки."""


class IsBool(Check):
    def __call__(self, value: Any) -> Optional[str]:
        if isinstance(value, bool):
            return None
        return f"expected true or false, got {_json_type(value)}"


class IsString(Check):
    def __call__(self, value: Any) -> Optional[str]:
        if isinstance(value, str):
            return None
        return f"expected a string, got {_json_type(value)}"


class IntRange(Check):
    """Целое число в границах [low, high]; true/false числом не считаются."""

    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high

    def __call__(self, value: Any) -> Optional[str]:
        if not isinstance(value, int) or isinstance(value, bool):
            return f"expected an integer, got {_json_type(value)}"
        if not self.low <= value <= self.high:
            return f"expected an integer from {self.low} to {self.high}"
        return None


class OneOf(Check):
    def __init__(self, choices: Iterable[str]) -> None:
        self.choices: Tuple[str, ...] = tuple(choices)

    def __call__(self, value: Any) -> Optional[str]:
        if value in self.choices:
            return None
        return f"expected one of {', '.join(self.choices)}"


class CommandName(Check):
    """Имя программы или путь к ней: непустая строка без пробелов.

    Значение передаётся в subprocess как первый элемент argv, поэтому
    аргументы через пробел здесь не допускаются.
    """

    def __call__(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return f"expected a command name, got {_json_type(value)}"
        if not value:
            return "command name must not be empty"
        if any(char.isspace() for char in value):
            return "command name must not contain whitespace"
        return None

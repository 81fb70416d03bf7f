"""Сериализация дерева меню в текстовый протокол xbar/BitBar."""

from __future__ import annotations

import json
from typing import Iterable, List

from docker_ps.ui.items import MenuItem

SEPARATOR = "---"
NESTING_PREFIX = "--"
QUOTED_PARAMS = frozenset({"bash"})


def format_params(item: MenuItem) -> str:
    parts = []
    for key, value in item.params.items():
        if key in QUOTED_PARAMS:
            value = json.dumps(value, ensure_ascii=False)
        parts.append(f"{key}={value}")
    return " ".join(parts)


def format_item(item: MenuItem, depth: int = 0) -> List[str]:
    prefix = NESTING_PREFIX * depth
    if item.separator:
        return [f"{prefix}{SEPARATOR}"]
    line = f"{prefix}{item.title}"
    params = format_params(item)
    if params:
        line = f"{line} | {params}"
    lines = [line]
    for child in item.children:
        lines.extend(format_item(child, depth + 1))
    return lines


def render(items: Iterable[MenuItem]) -> str:
    """Возвращает текст меню; каждая строка завершается переводом строки."""

    lines: List[str] = []
    for item in items:
        lines.extend(format_item(item))
    return "".join(f"{line}\n" for line in lines)

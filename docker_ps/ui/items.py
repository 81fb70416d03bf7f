"""Дерево пунктов меню, независимое от формата вывода."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(slots=True)
class MenuItem:
    """Пункт меню: заголовок, параметры действия и вложенные пункты."""

    title: str
    params: Dict[str, str] = field(default_factory=dict)
    children: List["MenuItem"] = field(default_factory=list)
    separator: bool = False


def separator() -> MenuItem:
    return MenuItem(title="", separator=True)


def action(title: str, executable: str, *args: str, **params: str) -> MenuItem:
    """Пункт, запускающий `executable args...` без терминала с обновлением меню."""

    item_params: Dict[str, str] = dict(params)
    item_params["bash"] = executable
    for index, arg in enumerate(args, start=1):
        item_params[f"param{index}"] = arg
    item_params["terminal"] = "false"
    item_params["refresh"] = "true"
    return MenuItem(title=title, params=item_params)

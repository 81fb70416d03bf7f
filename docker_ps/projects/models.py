"""Модели "проекта": к какой оркестрации относится контейнер."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ProjectType(IntEnum):
    """Тип проекта. Порядок значений задаёт порядок групп в меню."""

    SINGLE = 0
    GROUP = 1
    COMPOSE = 2
    KUBERNETES = 3
    MINIKUBE = 4
    TALOS = 5

    @property
    def supports_bulk_actions(self) -> bool:
        return self in (ProjectType.COMPOSE, ProjectType.TALOS)


@dataclass(frozen=True, order=True, slots=True)
class Project:
    """Пара (тип, имя); имя пустое только у одиночных контейнеров."""

    type: ProjectType = ProjectType.SINGLE
    name: str = ""

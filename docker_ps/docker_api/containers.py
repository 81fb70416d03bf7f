"""Функции для работы с контейнерами: листинг, сортировка, выбор целей команды."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from docker_ps.docker_api.backend import RuntimeBackend
from docker_ps.docker_api.exceptions import UnsupportedCommand
from docker_ps.docker_api.models import ContainerRecord
from docker_ps.projects.classifier import classify

LOGGER = logging.getLogger(__name__)

# команда -> каким должно быть состояние контейнера (None - любым)
COMMAND_REQUIRES_RUNNING = {
    "start": False,
    "rm": False,
    "restart": None,
    "stop": True,
    "kill": True,
}
SUPPORTED_COMMANDS = tuple(COMMAND_REQUIRES_RUNNING)
RM_EXTRA_ARGS = ("--force", "--volumes")


def sort_key(container: ContainerRecord) -> Tuple[int, str, str]:
    return container.project.type, container.project.name, container.name


def order_containers(items: Iterable[ContainerRecord]) -> List[ContainerRecord]:
    """Сортирует по (тип проекта, имя проекта, имя контейнера)."""

    return sorted(items, key=sort_key)


def list_containers(backend: RuntimeBackend) -> List[ContainerRecord]:
    """Возвращает все контейнеры, разобранные, классифицированные и упорядоченные."""

    rows = backend.list_containers()
    return order_containers(classify(ContainerRecord.from_dict(row)) for row in rows)


def ensure_supported(command: str) -> None:
    if command not in COMMAND_REQUIRES_RUNNING:
        raise UnsupportedCommand(command)


def is_eligible(container: ContainerRecord, command: str) -> bool:
    """Подходит ли контейнер для команды с учётом его текущего состояния."""

    ensure_supported(command)
    requires_running = COMMAND_REQUIRES_RUNNING[command]
    if requires_running is None:
        return True
    return container.running == requires_running


def select_targets(
    items: Iterable[ContainerRecord], command: str, project_name: Optional[str] = None
) -> List[str]:
    """Возвращает идентификаторы контейнеров, к которым применяется команда."""

    ensure_supported(command)
    identifiers = []
    for container in items:
        if project_name and project_name != container.project.name:
            continue
        if is_eligible(container, command):
            identifiers.append(container.identifier)
    return identifiers


def run_command(
    backend: RuntimeBackend, command: str, project_name: Optional[str] = None
) -> List[str]:
    """Применяет команду одним пакетным вызовом к подходящим контейнерам.

    Пустой набор целей - успешная операция без обращений к Docker.
    """

    ensure_supported(command)
    identifiers = select_targets(list_containers(backend), command, project_name)
    if not identifiers:
        LOGGER.info("Nothing to %s (project=%s)", command, project_name or "*")
        return []
    extra_args = RM_EXTRA_ARGS if command == "rm" else ()
    backend.run_container_command(command, identifiers, extra_args)
    return identifiers

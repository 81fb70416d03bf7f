"""Узкий интерфейс к среде выполнения контейнеров и выбор реализации."""

from __future__ import annotations

from typing import Any, Dict, List, Protocol, Sequence

from docker_ps.settings.registry import SettingsRegistry
from docker_ps.utils.helpers import normalize_socket_path


class RuntimeBackend(Protocol):
    """Одна операция на каждый логический запрос или действие.

    Листинги возвращают строки в форме `docker ... --format {{json .}}`.
    """

    def list_containers(self) -> List[Dict[str, Any]]:  # pragma: no cover - протокол
        ...

    def list_networks(self) -> List[Dict[str, Any]]:  # pragma: no cover - протокол
        ...

    def list_volumes(self) -> List[Dict[str, Any]]:  # pragma: no cover - протокол
        ...

    def run_container_command(
        self, command: str, identifiers: Sequence[str], extra_args: Sequence[str] = ()
    ) -> None:  # pragma: no cover - протокол
        ...

    def prune_build_cache(self) -> None:  # pragma: no cover - протокол
        ...

    def prune_system(self) -> None:  # pragma: no cover - протокол
        ...


def create_backend(settings: SettingsRegistry) -> RuntimeBackend:
    """Создаёт бэкенд, указанный в настройке docker.backend."""

    backend = settings.get_value("docker", "backend")
    host = normalize_socket_path(settings.get_value("docker", "host"))
    if backend == "sdk":
        from docker_ps.docker_api.client import DockerClientWrapper

        return DockerClientWrapper(base_url=host or None)

    from docker_ps.docker_api.cli import DockerCLI

    return DockerCLI(settings.get_value("docker", "binary"), host=host or None)

"""Менеджер доступа к данным Docker для меню и команд.

Снимок состояния собирается из трёх независимых листингов, которые
выполняются параллельно; любая ошибка листинга прерывает весь запуск.
Команды выполняются строго последовательно.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from docker_ps.docker_api import containers, networks, system, volumes
from docker_ps.docker_api.backend import RuntimeBackend
from docker_ps.docker_api.exceptions import PruneSubActionFailure
from docker_ps.docker_api.models import ContainerRecord, NetworkRecord, VolumeRecord
from docker_ps.orchestrators.minikube import MinikubeClient, MinikubeStatus

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RuntimeSnapshot:
    """Состояние среды выполнения на момент запуска."""

    containers: List[ContainerRecord] = field(default_factory=list)
    networks: List[NetworkRecord] = field(default_factory=list)
    volumes: List[VolumeRecord] = field(default_factory=list)
    minikube: Optional[MinikubeStatus] = None

    @property
    def running_count(self) -> int:
        return sum(1 for container in self.containers if container.running)


class DockerDataProvider:
    """Предоставляет высокоуровневый API над бэкендом Docker."""

    def __init__(self, backend: RuntimeBackend, minikube: Optional[MinikubeClient] = None) -> None:
        self._backend = backend
        self._minikube = minikube

    # ------------------------------------------------------------------- fetches
    def fetch_snapshot(self) -> RuntimeSnapshot:
        """Параллельно получает контейнеры, сети, тома и статус minikube."""

        with ThreadPoolExecutor(max_workers=4) as executor:
            container_future = executor.submit(containers.list_containers, self._backend)
            network_future = executor.submit(networks.list_networks, self._backend)
            volume_future = executor.submit(volumes.list_volumes, self._backend)
            minikube_future: Optional[Future[Optional[MinikubeStatus]]] = None
            if self._minikube is not None:
                minikube_future = executor.submit(_minikube_status, self._minikube)

            snapshot = RuntimeSnapshot(
                containers=container_future.result(),
                networks=network_future.result(),
                volumes=volume_future.result(),
            )
            if minikube_future is not None:
                snapshot.minikube = minikube_future.result()
        LOGGER.debug(
            "Snapshot: %s containers (%s running), %s networks, %s volumes",
            len(snapshot.containers),
            snapshot.running_count,
            len(snapshot.networks),
            len(snapshot.volumes),
        )
        return snapshot

    # ---------------------------------------------------------------- operations
    def run_commands(
        self, commands: Sequence[str], project_name: Optional[str] = None
    ) -> Dict[str, List[str]]:
        """Выполняет команды по очереди; первая ошибка прерывает остальные."""

        for command in commands:
            containers.ensure_supported(command)

        affected: Dict[str, List[str]] = {}
        for command in commands:
            affected[command] = containers.run_command(self._backend, command, project_name)
            LOGGER.info(
                "%s: %s container(s) affected (project=%s)",
                command,
                len(affected[command]),
                project_name or "*",
            )
        return affected

    def prune(self) -> List[PruneSubActionFailure]:
        """Выполняет очистку; ошибки отдельных шагов не прерывают следующие."""

        return system.prune(self._backend)


def _minikube_status(client: MinikubeClient) -> Optional[MinikubeStatus]:
    if not client.available():
        return None
    return client.status()

"""Общие фикстуры: поддельный бэкенд Docker вместо реальной среды выполнения."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from docker_ps.docker_api.exceptions import PruneSubActionFailure, QueryFailure


def container_row(
    identifier: str,
    name: str,
    *,
    labels: str = "",
    status: str = "Exited (0) 3 days ago",
    state: str = "",
    image: str = "alpine:3",
    created: str = "2024-01-02 15:04:05 +0000 UTC",
) -> Dict[str, Any]:
    return {
        "ID": identifier,
        "Names": name,
        "Image": image,
        "Labels": labels,
        "Status": status,
        "State": state,
        "CreatedAt": created,
    }


class FakeBackend:
    """Бэкенд с заранее заданными ответами, записывающий изменяющие вызовы."""

    def __init__(
        self,
        containers: Optional[List[Dict[str, Any]]] = None,
        networks: Optional[List[Dict[str, Any]]] = None,
        volumes: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.containers = containers or []
        self.networks = networks or []
        self.volumes = volumes or []
        self.calls: List[Tuple[str, Tuple[str, ...], Tuple[str, ...]]] = []
        self.prune_calls: List[str] = []
        self.list_calls = 0
        self.fail_listing: Optional[str] = None
        self.fail_prune: set[str] = set()

    def list_containers(self) -> List[Dict[str, Any]]:
        self.list_calls += 1
        if self.fail_listing == "containers":
            raise QueryFailure("containers listing failed")
        return list(self.containers)

    def list_networks(self) -> List[Dict[str, Any]]:
        if self.fail_listing == "networks":
            raise QueryFailure("networks listing failed")
        return list(self.networks)

    def list_volumes(self) -> List[Dict[str, Any]]:
        if self.fail_listing == "volumes":
            raise QueryFailure("volumes listing failed")
        return list(self.volumes)

    def run_container_command(
        self, command: str, identifiers: Sequence[str], extra_args: Sequence[str] = ()
    ) -> None:
        self.calls.append((command, tuple(identifiers), tuple(extra_args)))

    def prune_build_cache(self) -> None:
        self.prune_calls.append("build cache")
        if "build cache" in self.fail_prune:
            raise PruneSubActionFailure("buildx prune --force", "boom")

    def prune_system(self) -> None:
        self.prune_calls.append("system")
        if "system" in self.fail_prune:
            raise PruneSubActionFailure("system prune --force --volumes", "boom")


@pytest.fixture
def compose_backend() -> FakeBackend:
    """Два контейнера: запущенный compose-сервис "web" и остановленный одиночный."""

    return FakeBackend(
        containers=[
            container_row(
                "a1",
                "web-app-1",
                labels="com.docker.compose.project=web",
                status="Up 2 hours",
            ),
            container_row("a2", "lonely", labels="", status="Exited (0) 3 days ago"),
        ],
        networks=[
            {"Driver": "bridge", "Name": "web_default"},
            {"Driver": "bridge", "Name": "bridge"},
            {"Driver": "host", "Name": "host"},
        ],
        volumes=[
            {"Driver": "local", "Name": "3f9a" + "0" * 60},
            {"Driver": "local", "Name": "pgdata"},
        ],
    )

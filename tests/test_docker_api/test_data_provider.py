"""Тесты высокоуровневого поставщика Docker-данных."""

from __future__ import annotations

from typing import Optional

import pytest

from docker_ps.docker_api.data_provider import DockerDataProvider
from docker_ps.docker_api.exceptions import QueryFailure, UnsupportedCommand
from docker_ps.orchestrators.minikube import MinikubeStatus

from conftest import FakeBackend


class FakeMinikube:
    def __init__(self, status: Optional[MinikubeStatus], available: bool = True) -> None:
        self._status = status
        self._available = available

    def available(self) -> bool:
        return self._available

    def status(self) -> Optional[MinikubeStatus]:
        return self._status


def test_fetch_snapshot_collects_everything(compose_backend: FakeBackend) -> None:
    provider = DockerDataProvider(compose_backend)
    snapshot = provider.fetch_snapshot()
    assert [c.identifier for c in snapshot.containers] == ["a2", "a1"]
    assert len(snapshot.networks) == 3
    assert len(snapshot.volumes) == 2
    assert snapshot.running_count == 1
    assert snapshot.minikube is None


@pytest.mark.parametrize("failing", ["containers", "networks", "volumes"])
def test_fetch_snapshot_fails_fast(compose_backend: FakeBackend, failing: str) -> None:
    compose_backend.fail_listing = failing
    with pytest.raises(QueryFailure):
        DockerDataProvider(compose_backend).fetch_snapshot()


def test_fetch_snapshot_with_minikube(compose_backend: FakeBackend) -> None:
    minikube = FakeMinikube(MinikubeStatus(host="running"))
    snapshot = DockerDataProvider(compose_backend, minikube).fetch_snapshot()  # type: ignore[arg-type]
    assert snapshot.minikube == MinikubeStatus(host="running")


def test_fetch_snapshot_skips_missing_minikube(compose_backend: FakeBackend) -> None:
    minikube = FakeMinikube(MinikubeStatus(host="running"), available=False)
    snapshot = DockerDataProvider(compose_backend, minikube).fetch_snapshot()  # type: ignore[arg-type]
    assert snapshot.minikube is None


def test_run_commands_in_order(compose_backend: FakeBackend) -> None:
    provider = DockerDataProvider(compose_backend)
    affected = provider.run_commands(["kill", "rm"], "web")
    assert affected == {"kill": ["a1"], "rm": []}
    assert compose_backend.calls == [("kill", ("a1",), ())]
    assert compose_backend.list_calls == 2


def test_run_commands_validates_before_querying(compose_backend: FakeBackend) -> None:
    provider = DockerDataProvider(compose_backend)
    with pytest.raises(UnsupportedCommand):
        provider.run_commands(["stop", "explode"])
    assert compose_backend.list_calls == 0
    assert compose_backend.calls == []


def test_prune_continues_after_failure(compose_backend: FakeBackend) -> None:
    compose_backend.fail_prune = {"build cache"}
    failures = DockerDataProvider(compose_backend).prune()
    assert compose_backend.prune_calls == ["build cache", "system"]
    assert [failure.action for failure in failures] == ["buildx prune --force"]


def test_prune_without_failures(compose_backend: FakeBackend) -> None:
    assert DockerDataProvider(compose_backend).prune() == []
    assert compose_backend.prune_calls == ["build cache", "system"]

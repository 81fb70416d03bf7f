"""Тесты листинга, сортировки и выбора контейнеров для команд."""

from __future__ import annotations

import random

import pytest

from docker_ps.docker_api import containers
from docker_ps.docker_api.containers import (
    list_containers,
    order_containers,
    run_command,
    select_targets,
)
from docker_ps.docker_api.exceptions import UnsupportedCommand
from docker_ps.docker_api.models import ContainerRecord
from docker_ps.projects.models import Project, ProjectType

from conftest import FakeBackend, container_row


def make(name: str, project: Project, running: bool = False) -> ContainerRecord:
    return ContainerRecord(
        identifier=f"id-{name}",
        name=name,
        status="Up 1 minute" if running else "Exited (0) 1 minute ago",
        project=project,
    )


MIXED = [
    make("z", Project(ProjectType.TALOS, "c1")),
    make("b", Project(ProjectType.COMPOSE, "web")),
    make("a", Project(ProjectType.COMPOSE, "web")),
    make("solo", Project()),
    make("k", Project(ProjectType.KUBERNETES, "default")),
    make("c", Project(ProjectType.COMPOSE, "api")),
    make("g", Project(ProjectType.GROUP, "tools")),
    make("alpha", Project()),
]


def test_order_by_type_project_and_name() -> None:
    ordered = order_containers(MIXED)
    assert [container.name for container in ordered] == [
        "alpha",
        "solo",
        "g",
        "c",
        "a",
        "b",
        "k",
        "z",
    ]


def test_order_is_idempotent_and_groups_are_contiguous() -> None:
    shuffled = list(MIXED)
    random.Random(7).shuffle(shuffled)
    ordered = order_containers(shuffled)
    assert order_containers(ordered) == ordered

    seen = []
    for container in ordered:
        if not seen or seen[-1] != container.project:
            assert container.project not in seen
            seen.append(container.project)


def test_list_containers_classifies_and_orders(compose_backend: FakeBackend) -> None:
    result = list_containers(compose_backend)
    assert [(c.identifier, c.project) for c in result] == [
        ("a2", Project(ProjectType.SINGLE, "")),
        ("a1", Project(ProjectType.COMPOSE, "web")),
    ]


def test_select_start_and_rm_skip_running() -> None:
    items = [make("up", Project(), running=True), make("down", Project())]
    assert select_targets(items, "start") == ["id-down"]
    assert select_targets(items, "rm") == ["id-down"]


def test_select_stop_and_kill_skip_stopped() -> None:
    items = [make("up", Project(), running=True), make("down", Project())]
    assert select_targets(items, "stop") == ["id-up"]
    assert select_targets(items, "kill") == ["id-up"]


def test_select_restart_takes_everything() -> None:
    items = [make("up", Project(), running=True), make("down", Project())]
    assert select_targets(items, "restart") == ["id-up", "id-down"]


def test_select_with_project_filter() -> None:
    items = [
        make("a", Project(ProjectType.COMPOSE, "web"), running=True),
        make("b", Project(ProjectType.COMPOSE, "api"), running=True),
    ]
    assert select_targets(items, "stop", "web") == ["id-a"]
    assert select_targets(items, "stop", "") == ["id-a", "id-b"]


def test_select_unsupported_command() -> None:
    with pytest.raises(UnsupportedCommand):
        select_targets([], "pause")


def test_run_command_start_selects_stopped_only(compose_backend: FakeBackend) -> None:
    assert run_command(compose_backend, "start") == ["a2"]
    assert compose_backend.calls == [("start", ("a2",), ())]


def test_run_command_stop_with_project(compose_backend: FakeBackend) -> None:
    assert run_command(compose_backend, "stop", "web") == ["a1"]
    assert compose_backend.calls == [("stop", ("a1",), ())]


def test_run_command_rm_forces_volume_removal(compose_backend: FakeBackend) -> None:
    run_command(compose_backend, "rm")
    assert compose_backend.calls == [("rm", ("a2",), ("--force", "--volumes"))]


def test_run_command_empty_selection_is_noop(compose_backend: FakeBackend) -> None:
    assert run_command(compose_backend, "stop", "missing") == []
    assert compose_backend.calls == []


def test_run_command_unsupported_makes_no_calls(compose_backend: FakeBackend) -> None:
    with pytest.raises(UnsupportedCommand):
        run_command(compose_backend, "pause")
    assert compose_backend.list_calls == 0
    assert compose_backend.calls == []


def test_supported_commands() -> None:
    assert set(containers.SUPPORTED_COMMANDS) == {"start", "stop", "restart", "kill", "rm"}

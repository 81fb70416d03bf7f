"""Тесты моделей записей Docker."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from docker_ps.docker_api.exceptions import QueryFailure
from docker_ps.docker_api.models import ZERO_TIME, ContainerRecord, VolumeRecord

from conftest import container_row


def test_from_dict_reads_cli_fields() -> None:
    record = ContainerRecord.from_dict(
        container_row("abc", "demo", labels="a=b", status="Up 1 second", state="running")
    )
    assert record.identifier == "abc"
    assert record.name == "demo"
    assert record.labels == "a=b"
    assert record.running


def test_from_dict_without_id_is_query_failure() -> None:
    with pytest.raises(QueryFailure):
        ContainerRecord.from_dict({"Names": "demo"})


@pytest.mark.parametrize(
    ("state", "status", "running"),
    [
        ("running", "", True),
        ("", "Up 2 hours", True),
        ("", "Up 5 seconds (Paused)", True),
        ("exited", "Exited (0) 3 days ago", False),
        ("", "Upgrading", False),
        ("", "Created", False),
    ],
)
def test_running(state: str, status: str, running: bool) -> None:
    record = ContainerRecord(identifier="x", name="x", state=state, status=status)
    assert record.running is running


def test_created_at_parses_zone_offset() -> None:
    record = ContainerRecord(identifier="x", name="x", created="2024-01-02 15:04:05 +0300 MSK")
    assert record.created_at == datetime(
        2024, 1, 2, 15, 4, 5, tzinfo=timezone(timedelta(hours=3))
    )


def test_created_at_falls_back_to_zero_time() -> None:
    record = ContainerRecord(identifier="x", name="x", created="yesterday")
    assert record.created_at == ZERO_TIME


def test_short_id() -> None:
    assert ContainerRecord(identifier="0123456789abcdef", name="x").short_id == "0123456789ab"


def test_anonymous_volume() -> None:
    name = "3f9a" + "b" * 60
    assert VolumeRecord(driver="local", name=name).anonymous


@pytest.mark.parametrize(
    ("driver", "name"),
    [
        ("local", "a" * 63),
        ("local", "g" * 64),
        ("local", "A" * 64),
        ("local", "3F9A" + "B" * 60),
        ("local", "pgdata"),
        ("nfs", "a" * 64),
    ],
)
def test_not_anonymous_volume(driver: str, name: str) -> None:
    assert not VolumeRecord(driver=driver, name=name).anonymous

"""Структуры данных для описания объектов Docker."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from docker_ps.docker_api.exceptions import QueryFailure
from docker_ps.projects.models import Project
from docker_ps.utils.helpers import is_hex

CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S %z"
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
ANONYMOUS_VOLUME_DRIVER = "local"
ANONYMOUS_VOLUME_NAME_LENGTH = 64


@dataclass(slots=True)
class ContainerRecord:
    """Одна строка `docker container ls` и проект, к которому она относится."""

    identifier: str  # полный ID контейнера
    name: str
    image: str = ""
    labels: str = ""  # "k=v,k=v" как в выводе docker ps
    status: str = ""  # человекочитаемый статус: "Up 2 hours", "Exited (0) ..."
    state: str = ""  # нормализованное состояние, если есть: "running", "exited"
    created: str = ""  # "2024-01-02 15:04:05 +0000 UTC"
    project: Project = field(default_factory=Project)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContainerRecord":
        identifier = data.get("ID")
        if not isinstance(identifier, str) or not identifier:
            raise QueryFailure(
                "Container record without ID",
                context={"data": str(data)[:200]},
            )
        return cls(
            identifier=identifier,
            name=str(data.get("Names", "")),
            image=str(data.get("Image", "")),
            labels=str(data.get("Labels", "")),
            status=str(data.get("Status", "")),
            state=str(data.get("State", "")),
            created=str(data.get("CreatedAt", "")),
        )

    @property
    def running(self) -> bool:
        """Контейнер запущен: по полю State либо по префиксу "Up " в Status."""

        return self.state == "running" or self.status.startswith("Up ")

    @property
    def created_at(self) -> datetime:
        """Момент создания; нераспознанная строка даёт нулевое время."""

        head = " ".join(self.created.split()[:3])
        try:
            return datetime.strptime(head, CREATED_AT_FORMAT)
        except ValueError:
            return ZERO_TIME

    @property
    def short_id(self) -> str:
        return self.identifier[:12]


@dataclass(slots=True)
class NetworkRecord:
    """Одна строка `docker network ls`."""

    driver: str
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NetworkRecord":
        return cls(driver=str(data.get("Driver", "")), name=str(data.get("Name", "")))


@dataclass(slots=True)
class VolumeRecord:
    """Одна строка `docker volume ls`."""

    driver: str
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VolumeRecord":
        return cls(driver=str(data.get("Driver", "")), name=str(data.get("Name", "")))

    @property
    def anonymous(self) -> bool:
        """Безымянный том: локальный драйвер и 64-символьное hex-имя."""

        if self.driver != ANONYMOUS_VOLUME_DRIVER:
            return False
        if len(self.name) != ANONYMOUS_VOLUME_NAME_LENGTH:
            return False
        return is_hex(self.name)

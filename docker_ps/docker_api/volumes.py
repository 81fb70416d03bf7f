"""Функции для работы с томами Docker."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from docker_ps.docker_api.backend import RuntimeBackend
from docker_ps.docker_api.models import VolumeRecord


def list_volumes(backend: RuntimeBackend) -> List[VolumeRecord]:
    """Возвращает тома, упорядоченные по (драйвер, имя)."""

    volumes = [VolumeRecord.from_dict(row) for row in backend.list_volumes()]
    return sorted(volumes, key=lambda volume: (volume.driver, volume.name))


def split_anonymous(volumes: Sequence[VolumeRecord]) -> Tuple[List[VolumeRecord], int]:
    """Делит тома на именованные и число анонимных."""

    named = [volume for volume in volumes if not volume.anonymous]
    return named, len(volumes) - len(named)

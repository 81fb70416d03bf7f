"""Функции для работы с сетями Docker."""

from __future__ import annotations

from typing import List

from docker_ps.docker_api.backend import RuntimeBackend
from docker_ps.docker_api.models import NetworkRecord


def list_networks(backend: RuntimeBackend) -> List[NetworkRecord]:
    """Возвращает сети, упорядоченные по (драйвер, имя)."""

    networks = [NetworkRecord.from_dict(row) for row in backend.list_networks()]
    return sorted(networks, key=lambda network: (network.driver, network.name))

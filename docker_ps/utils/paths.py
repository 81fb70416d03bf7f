"""Централизованное описание путей приложения."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_base_dir() -> Path:
    """Возвращает базовую директорию (~/.docker-ps или $DOCKER_PS_HOME/.docker-ps)."""

    home_dir = Path(os.environ.get("DOCKER_PS_HOME", Path.home()))
    return home_dir / ".docker-ps"

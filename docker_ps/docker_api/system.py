"""Очистка неиспользуемых данных Docker."""

from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from docker_ps.docker_api.backend import RuntimeBackend
from docker_ps.docker_api.exceptions import PruneSubActionFailure

LOGGER = logging.getLogger(__name__)


def prune(backend: RuntimeBackend) -> List[PruneSubActionFailure]:
    """Очищает кэш сборки, затем остановленные контейнеры, сети и тома.

    Каждый шаг выполняется независимо; ошибки собираются и возвращаются.
    """

    steps: List[Tuple[str, Callable[[], None]]] = [
        ("build cache", backend.prune_build_cache),
        ("system", backend.prune_system),
    ]
    failures: List[PruneSubActionFailure] = []
    for name, step in steps:
        try:
            step()
        except PruneSubActionFailure as exc:
            failures.append(exc)
            continue
        LOGGER.info("Pruned %s", name)
    return failures

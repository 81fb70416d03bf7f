"""Статус и управление кластером minikube через его CLI."""

from __future__ import annotations

import json
import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional

LOGGER = logging.getLogger(__name__)

MINIKUBE_ACTIONS = ("stop", "delete")


class MinikubeError(Exception):
    """Команда minikube stop/delete завершилась ошибкой."""


@dataclass(frozen=True, slots=True)
class MinikubeStatus:
    """Состояние хоста minikube в нижнем регистре ("running", "stopped", ...)."""

    host: str

    @property
    def running(self) -> bool:
        return self.host != "stopped"


class MinikubeClient:
    """Обёртка над `minikube status/stop/delete`."""

    def __init__(self, binary: str = "minikube") -> None:
        self.binary = binary

    def available(self) -> bool:
        return shutil.which(self.binary) is not None

    def status(self) -> Optional[MinikubeStatus]:
        """Возвращает статус или None, если вывод не удалось разобрать.

        `minikube status` завершается ненулевым кодом для остановленного
        кластера, поэтому код возврата не проверяется.
        """

        try:
            result = subprocess.run(
                [self.binary, "status", "--output=json"],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as exc:
            LOGGER.debug("minikube status unavailable: %s", exc)
            return None
        try:
            payload = json.loads(result.stdout)
        except json.JSONDecodeError:
            LOGGER.debug("minikube status returned non-JSON output (code %s)", result.returncode)
            return None
        if not isinstance(payload, dict):
            return None
        host = payload.get("Host", payload.get("host"))
        if not isinstance(host, str) or not host:
            LOGGER.debug("minikube status has no host state: %s", payload)
            return None
        return MinikubeStatus(host=host.lower())

    def stop(self) -> None:
        self._run(["stop"])

    def delete(self) -> None:
        self._run(["delete"])

    def run_action(self, action: str) -> None:
        if action not in MINIKUBE_ACTIONS:
            raise MinikubeError(f"Unexpected minikube action {action}.")
        getattr(self, action)()

    def _run(self, args: List[str]) -> None:
        command = [self.binary, *args]
        LOGGER.info("%s", shlex.join(command))
        try:
            subprocess.run(command, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise MinikubeError(f"{shlex.join(command)} failed: {exc}") from exc

"""Бэкенд, вызывающий docker CLI и разбирающий построчный JSON."""

from __future__ import annotations

import json
import logging
import os
import shlex
import subprocess
from typing import Any, Dict, List, Optional, Sequence

from docker_ps.docker_api.exceptions import DispatchFailure, PruneSubActionFailure, QueryFailure

LOGGER = logging.getLogger(__name__)

JSON_FORMAT = "--format={{json .}}"


class DockerCLI:
    """Выполняет команды docker CLI по явно заданному пути к бинарнику."""

    def __init__(self, binary: str = "docker", *, host: Optional[str] = None) -> None:
        self.binary = binary
        self.host = host

    # ------------------------------------------------------------------- queries
    def list_containers(self) -> List[Dict[str, Any]]:
        return self._query(["container", "ls", "--all", "--no-trunc", JSON_FORMAT])

    def list_networks(self) -> List[Dict[str, Any]]:
        return self._query(["network", "ls", "--no-trunc", JSON_FORMAT])

    def list_volumes(self) -> List[Dict[str, Any]]:
        return self._query(["volume", "ls", JSON_FORMAT])

    # ---------------------------------------------------------------- mutations
    def run_container_command(
        self, command: str, identifiers: Sequence[str], extra_args: Sequence[str] = ()
    ) -> None:
        args = [command, *extra_args, *identifiers]
        try:
            self._run(args)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise DispatchFailure(
                f"docker {command} failed: {exc}",
                context={"command": command, "identifiers": list(identifiers)},
            ) from exc

    def prune_build_cache(self) -> None:
        self._prune(["buildx", "prune", "--force"])

    def prune_system(self) -> None:
        self._prune(["system", "prune", "--force", "--volumes"])

    # ------------------------------------------------------------------ helpers
    def _prune(self, args: List[str]) -> None:
        try:
            self._run(args)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise PruneSubActionFailure(" ".join(args), str(exc)) from exc

    def _run(self, args: List[str]) -> None:
        command = [self.binary, *args]
        LOGGER.info("%s", shlex.join(command))
        subprocess.run(command, check=True, env=self._build_environment())

    def _query(self, args: List[str]) -> List[Dict[str, Any]]:
        command = [self.binary, *args]
        LOGGER.debug("%s", shlex.join(command))
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                text=True,
                check=True,
                env=self._build_environment(),
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise QueryFailure(
                f"{shlex.join(command)} failed: {exc}", context={"args": args}
            ) from exc
        return parse_json_lines(result.stdout)

    def _build_environment(self) -> Dict[str, str]:
        env = os.environ.copy()
        if self.host:
            env["DOCKER_HOST"] = self.host
        return env


def parse_json_lines(output: str) -> List[Dict[str, Any]]:
    """Разбирает вывод `--format {{json .}}`: один JSON-объект на строку."""

    entries: List[Dict[str, Any]] = []
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            parsed = json.loads(line)
        except json.JSONDecodeError as exc:
            raise QueryFailure(f"Malformed JSON row: {exc}", context={"line": line[:200]}) from exc
        if not isinstance(parsed, dict):
            raise QueryFailure("JSON row is not an object", context={"line": line[:200]})
        entries.append(parsed)
    return entries

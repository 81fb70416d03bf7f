"""Бэкенд на docker SDK (docker-py), отдающий строки в форме docker CLI."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

import docker
from docker.errors import DockerException

from docker_ps.docker_api.exceptions import (
    DispatchFailure,
    DockerAPIError,
    PruneSubActionFailure,
    QueryFailure,
)

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Управляет созданием и использованием docker API client."""

    def __init__(self, base_url: Optional[str] = None, raw_client: Any | None = None) -> None:
        self.base_url = base_url
        self._client = raw_client or self._create_client()

    def _create_client(self) -> Any:
        try:
            if self.base_url:
                return docker.DockerClient(base_url=self.base_url)
            return docker.from_env()
        except DockerException as exc:
            LOGGER.error("Docker client init error via %s: %s", self.base_url or "env", exc)
            raise DockerAPIError(str(exc), context={"base_url": self.base_url}) from exc

    # ------------------------------------------------------------------- queries
    def list_containers(self) -> List[Dict[str, Any]]:
        try:
            items = self._client.containers.list(all=True)
            return [_container_row(container) for container in items]
        except DockerException as exc:
            raise QueryFailure(f"Cannot list containers: {exc}") from exc

    def list_networks(self) -> List[Dict[str, Any]]:
        try:
            items = self._client.networks.list()
            return [
                {"Driver": network.attrs.get("Driver", ""), "Name": network.name}
                for network in items
            ]
        except DockerException as exc:
            raise QueryFailure(f"Cannot list networks: {exc}") from exc

    def list_volumes(self) -> List[Dict[str, Any]]:
        try:
            items = self._client.volumes.list()
            return [
                {"Driver": volume.attrs.get("Driver", ""), "Name": volume.name}
                for volume in items
            ]
        except DockerException as exc:
            raise QueryFailure(f"Cannot list volumes: {exc}") from exc

    # ---------------------------------------------------------------- mutations
    def run_container_command(
        self, command: str, identifiers: Sequence[str], extra_args: Sequence[str] = ()
    ) -> None:
        # SDK не умеет пакетных операций: команда применяется к каждому id по очереди
        LOGGER.info("sdk %s %s %s", command, " ".join(extra_args), " ".join(identifiers))
        for container_id in identifiers:
            try:
                container = self._client.containers.get(container_id)
                _container_action(container, command, extra_args)()
            except DockerException as exc:
                raise DispatchFailure(
                    f"docker {command} {container_id} failed: {exc}",
                    context={"command": command, "identifier": container_id},
                ) from exc

    def prune_build_cache(self) -> None:
        LOGGER.info("sdk prune build cache")
        try:
            self._client.api.prune_builds()
        except DockerException as exc:
            raise PruneSubActionFailure("buildx prune", str(exc)) from exc

    def prune_system(self) -> None:
        LOGGER.info("sdk prune containers, networks, images, volumes")
        try:
            self._client.containers.prune()
            self._client.networks.prune()
            self._client.images.prune(filters={"dangling": True})
            self._client.volumes.prune()
        except DockerException as exc:
            raise PruneSubActionFailure("system prune", str(exc)) from exc


def _container_action(container: Any, command: str, extra_args: Sequence[str]) -> Callable[[], Any]:
    if command == "rm":
        force = "--force" in extra_args
        volumes = "--volumes" in extra_args
        return lambda: container.remove(force=force, v=volumes)
    if command in ("start", "stop", "restart", "kill"):
        return getattr(container, command)
    raise DispatchFailure(f"SDK backend cannot run {command}", context={"command": command})


def _container_row(container: Any) -> Dict[str, Any]:
    """Приводит объект SDK к строке `docker container ls --format {{json .}}`."""

    attrs = getattr(container, "attrs", {}) or {}
    config = attrs.get("Config") or {}
    labels = getattr(container, "labels", None) or config.get("Labels") or {}
    state = attrs.get("State") or {}
    status = getattr(container, "status", "") or ""
    return {
        "ID": container.id,
        "Names": container.name,
        "Image": config.get("Image", ""),
        "Labels": ",".join(f"{key}={value}" for key, value in labels.items()),
        "State": status,
        "Status": _format_status(status, state),
        "CreatedAt": _format_created(attrs.get("Created")),
    }


def _format_status(status: str, state: Dict[str, Any]) -> str:
    if status == "running":
        return f"Up since {state.get('StartedAt', '')}".strip()
    if status == "exited":
        return f"Exited ({state.get('ExitCode', 0)})"
    return status.capitalize()


def _format_created(value: str | None) -> str:
    """Приводит ISO-дату Docker к формату CreatedAt из docker ps."""

    if not value:
        return ""
    # наносекунды docker не помещаются в fromisoformat, Docker отдаёт время в UTC
    head, _, _ = value.replace("Z", "").partition(".")
    try:
        timestamp = datetime.fromisoformat(head)
    except ValueError:
        return ""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S +0000 UTC")

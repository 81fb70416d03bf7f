"""Построение меню строки состояния по снимку среды выполнения."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from docker_ps.docker_api.data_provider import RuntimeSnapshot
from docker_ps.docker_api.models import ContainerRecord
from docker_ps.docker_api.volumes import split_anonymous
from docker_ps.orchestrators.minikube import MinikubeStatus
from docker_ps.projects.models import Project, ProjectType
from docker_ps.settings.registry import SettingsRegistry
from docker_ps.ui.items import MenuItem, action, separator
from docker_ps.utils.helpers import format_age

DOCKER_ICON = "🐳"
BUILDKIT_ICON = "⚙️"
BUILDKIT_IMAGE_PREFIX = "moby/buildkit:"

PROJECT_ICONS: Dict[ProjectType, str] = {
    ProjectType.GROUP: "🐳",
    ProjectType.COMPOSE: "🐙",
    ProjectType.KUBERNETES: "☸️",
    ProjectType.MINIKUBE: "📦",
    ProjectType.TALOS: "🔺",
}

# (заголовок, команды) для групповых действий над проектом
BULK_ACTIONS = (
    ("▶️ Start all", ("start",)),
    ("🔄 Restart all", ("restart",)),
    ("⏹ Stop all", ("stop",)),
    ("⏬ Stop and remove all", ("kill", "rm")),
)


@dataclass(slots=True)
class MenuOptions:
    """Параметры отрисовки меню."""

    docker_binary: str = "docker"
    executable: Optional[str] = None  # путь к самой программе для групповых действий
    show_networks: bool = True
    show_volumes: bool = True
    show_details: bool = True
    show_global_actions: bool = True

    @classmethod
    def from_settings(
        cls, settings: SettingsRegistry, executable: Optional[str] = None
    ) -> "MenuOptions":
        return cls(
            docker_binary=settings.get_value("docker", "binary"),
            executable=executable,
            show_networks=settings.get_value("menu", "show_networks"),
            show_volumes=settings.get_value("menu", "show_volumes"),
            show_details=settings.get_value("menu", "show_details"),
            show_global_actions=settings.get_value("menu", "show_global_actions"),
        )


def build_menu(snapshot: RuntimeSnapshot, options: MenuOptions) -> List[MenuItem]:
    """Возвращает пункты меню в порядке вывода; контейнеры должны быть упорядочены."""

    items = [_summary(snapshot), separator()]
    items.extend(_container_sections(snapshot.containers, options))
    if options.show_networks:
        items.extend(_network_section(snapshot))
    if options.show_volumes:
        items.extend(_volume_section(snapshot))
    if snapshot.minikube is not None and options.executable:
        items.extend(_minikube_section(snapshot.minikube, options.executable))
    if options.show_global_actions and options.executable:
        items.extend(_global_actions(options.executable))
    return items


def _summary(snapshot: RuntimeSnapshot) -> MenuItem:
    if not snapshot.containers:
        return MenuItem(title=DOCKER_ICON)
    return MenuItem(title=f"{DOCKER_ICON}{snapshot.running_count}/{len(snapshot.containers)}")


def _container_sections(
    containers: List[ContainerRecord], options: MenuOptions
) -> List[MenuItem]:
    items: List[MenuItem] = []
    last_project = Project()
    for container in containers:
        if container.project != last_project:
            last_project = container.project
            items.append(separator())
            items.append(_project_header(last_project, options.executable))
        items.append(_container_line(container, options))
    return items


def _project_header(project: Project, executable: Optional[str]) -> MenuItem:
    header = MenuItem(title=f"{PROJECT_ICONS[project.type]} {project.name}")
    if project.type.supports_bulk_actions and executable:
        for title, commands in BULK_ACTIONS:
            header.children.append(
                action(title, executable, f"--project={project.name}", *commands)
            )
    return header


def _container_line(container: ContainerRecord, options: MenuOptions) -> MenuItem:
    icon = DOCKER_ICON
    if container.image.startswith(BUILDKIT_IMAGE_PREFIX):
        icon = BUILDKIT_ICON
    title = f"{icon} {container.name}"
    if container.image:
        title = f"{title} ({container.image})"

    binary = options.docker_binary
    if container.running:
        item = action(title, binary, "stop", container.identifier, color="green")
        primary = action("⏹ Stop", binary, "stop", container.identifier)
    else:
        item = action(title, binary, "start", container.identifier, color="red")
        primary = action("▶️ Start", binary, "start", container.identifier)

    if options.show_details:
        item.children = [
            primary,
            action("🔄 Restart", binary, "restart", container.identifier),
        ]
        if container.running:
            item.children.append(action("⏏️ Kill", binary, "kill", container.identifier))
        else:
            item.children.append(
                action("🗑 Remove", binary, "rm", "--force", "--volumes", container.identifier)
            )
        item.children.extend(
            [
                separator(),
                MenuItem(title=container.status or container.state or "unknown"),
                MenuItem(title=f"ID: {container.short_id}"),
                MenuItem(title=f"Created: {format_age(container.created_at)}"),
            ]
        )
    return item


def _network_section(snapshot: RuntimeSnapshot) -> List[MenuItem]:
    if not snapshot.networks:
        return []
    items = [separator(), MenuItem(title=f"{len(snapshot.networks)} networks")]
    items.extend(
        MenuItem(title=f"{network.name} ({network.driver})") for network in snapshot.networks
    )
    return items


def _volume_section(snapshot: RuntimeSnapshot) -> List[MenuItem]:
    if not snapshot.volumes:
        return []
    named, anonymous = split_anonymous(snapshot.volumes)
    items = [separator(), MenuItem(title=f"{len(snapshot.volumes)} volumes")]
    items.extend(MenuItem(title=f"{volume.name} ({volume.driver})") for volume in named)
    if anonymous:
        items.append(MenuItem(title=f"{anonymous} anonymous"))
    return items


def _minikube_section(status: MinikubeStatus, executable: str) -> List[MenuItem]:
    header = MenuItem(title=f"{PROJECT_ICONS[ProjectType.MINIKUBE]} minikube {status.host}")
    if status.running:
        header.children.append(action("⏹ Stop", executable, "--minikube=stop"))
    header.children.append(action("❌ Delete", executable, "--minikube=delete"))
    return [separator(), header]


def _global_actions(executable: str) -> List[MenuItem]:
    return [
        separator(),
        action("⭕️ Stop all containers", executable, "stop"),
        action("🛑 Remove stopped containers", executable, "rm"),
        action("⛔️ Prune orphan data", executable, "--prune"),
        action("📛 Stop, remove and prune everything", executable, "--prune", "kill", "rm"),
    ]

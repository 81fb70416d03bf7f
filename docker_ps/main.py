"""Точка входа docker-ps.

Без аргументов печатает меню для xbar/BitBar; с командами (start, stop,
restart, kill, rm) применяет их к контейнерам, при необходимости только
к одному проекту. Флаг --prune добавляет очистку в конце любого запуска.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from docker_ps import __version__
from docker_ps.docker_api.backend import create_backend
from docker_ps.docker_api.containers import SUPPORTED_COMMANDS
from docker_ps.docker_api.data_provider import DockerDataProvider
from docker_ps.docker_api.exceptions import DockerAPIError
from docker_ps.orchestrators.minikube import MINIKUBE_ACTIONS, MinikubeClient, MinikubeError
from docker_ps.settings.exceptions import SettingsError
from docker_ps.settings.registry import SettingsRegistry
from docker_ps.ui import xbar
from docker_ps.ui.menu import MenuOptions, build_menu
from docker_ps.utils.logger import LOG_FORMAT, configure_logging
from docker_ps.utils.paths import resolve_base_dir

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docker-ps",
        description="Displays statuses of local Docker containers.",
        epilog=f"Commands: {', '.join(SUPPORTED_COMMANDS)}.",
    )
    parser.add_argument("commands", nargs="*", metavar="command")
    parser.add_argument(
        "--project",
        default="",
        help='"project" (Docker Compose project, Kubernetes namespace, '
        "Minikube profile name, Talos cluster)",
    )
    parser.add_argument(
        "--prune",
        action="store_true",
        help="prune stopped containers, networks, volumes, and caches",
    )
    parser.add_argument("--minikube", choices=MINIKUBE_ACTIONS, help="stop or delete minikube")
    parser.add_argument("--config", type=Path, help="path to config.json")
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="override log level"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.project and not args.commands:
        parser.error("--project requires at least one command")
    if args.minikube and args.commands:
        parser.error("--minikube cannot be combined with container commands")
    return args


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Создаёт реестр настроек и загружает config.json."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    return registry


def setup_logging_from_settings(
    base_dir: Path, settings: SettingsRegistry, level_override: Optional[str] = None
) -> None:
    """Настраивает логирование в соответствии с группой logging."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        level_name=level_override or logging_settings.get("level"),
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
    )


def resolve_executable() -> Optional[str]:
    """Путь к запущенной программе для пунктов меню, вызывающих её же."""

    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0:
        return None
    path = Path(argv0)
    if path.is_file():
        return str(path.resolve())
    return shutil.which(argv0)


def create_provider(settings: SettingsRegistry) -> DockerDataProvider:
    minikube: Optional[MinikubeClient] = None
    if settings.get_value("minikube", "enabled"):
        minikube = MinikubeClient(settings.get_value("minikube", "binary"))
    return DockerDataProvider(create_backend(settings), minikube)


def execute(args: argparse.Namespace, settings: SettingsRegistry) -> int:
    """Выполняет один цикл: меню, команды или действие minikube, затем очистку."""

    provider: Optional[DockerDataProvider] = None
    if args.minikube:
        MinikubeClient(settings.get_value("minikube", "binary")).run_action(args.minikube)
    else:
        provider = create_provider(settings)
        if args.commands:
            provider.run_commands(args.commands, args.project or None)
        else:
            snapshot = provider.fetch_snapshot()
            options = MenuOptions.from_settings(settings, executable=resolve_executable())
            sys.stdout.write(xbar.render(build_menu(snapshot, options)))

    if args.prune:
        provider = provider or create_provider(settings)
        failures = provider.prune()
        if failures:
            LOGGER.warning("Prune finished with %s failed step(s)", len(failures))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Основная точка входа: готовит окружение и выполняет запуск."""

    args = parse_args(argv)
    base_dir = resolve_base_dir()
    # до загрузки config.json ошибки пишутся только в stderr
    logging.basicConfig(
        level=args.log_level or "INFO", format=LOG_FORMAT, stream=sys.stderr, force=True
    )

    try:
        settings = initialize_settings(args.config or base_dir / "config.json")
        setup_logging_from_settings(base_dir, settings, args.log_level)
        return execute(args, settings)
    except (DockerAPIError, SettingsError, MinikubeError, OSError) as exc:
        LOGGER.error("docker-ps failed: %s", exc)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

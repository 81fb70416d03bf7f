"""Тесты групп настроек и базового класса."""

from __future__ import annotations

import pytest

from docker_ps.settings.exceptions import SettingsValidationError, UnknownSettingError
from docker_ps.settings.groups import (
    DockerSettings,
    LoggingSettings,
    MenuSettings,
    MinikubeSettings,
)


def test_logging_settings_ranges() -> None:
    settings = LoggingSettings()
    settings.from_dict({"max_file_size_mb": 100})
    assert settings.get("max_file_size_mb") == 100
    with pytest.raises(SettingsValidationError):
        settings.from_dict({"max_archived_files": 0})
    with pytest.raises(SettingsValidationError):
        settings.from_dict({"level": "TRACE"})


def test_docker_settings_binary() -> None:
    settings = DockerSettings()
    settings.from_dict({"binary": "/usr/local/bin/docker"})
    for value in ("", "docker --debug", None):
        with pytest.raises(SettingsValidationError) as excinfo:
            settings.from_dict({"binary": value})
        assert excinfo.value.key == "binary"
    with pytest.raises(SettingsValidationError):
        settings.from_dict({"backend": "podman"})
    assert settings.get("binary") == "/usr/local/bin/docker"


def test_menu_settings_are_booleans() -> None:
    settings = MenuSettings()
    settings.from_dict({"show_details": False})
    assert settings.get("show_details") is False
    with pytest.raises(SettingsValidationError):
        settings.from_dict({"show_networks": "yes"})


def test_minikube_partial_section() -> None:
    settings = MinikubeSettings()
    settings.from_dict({"binary": "/opt/homebrew/bin/minikube"})
    assert settings.get("binary") == "/opt/homebrew/bin/minikube"
    assert settings.get("enabled") is True


def test_invalid_section_applies_nothing() -> None:
    settings = MinikubeSettings()
    with pytest.raises(SettingsValidationError):
        settings.from_dict({"enabled": False, "binary": "mini kube"})
    assert settings.get("enabled") is True


def test_unknown_key() -> None:
    with pytest.raises(UnknownSettingError):
        MenuSettings().get("show_images")
    with pytest.raises(UnknownSettingError):
        MenuSettings().from_dict({"show_images": True})

"""Различные вспомогательные функции."""

from __future__ import annotations

from datetime import datetime, timezone

_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")
_HEX_DIGITS = frozenset("0123456789abcdef")


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает путь сокета с корректным префиксом unix://."""

    value = raw_value.strip()
    if not value:
        return value
    lowered = value.lower()
    if lowered.startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value


def is_hex(value: str) -> bool:
    """Проверяет, что строка непуста и состоит из hex-символов в нижнем регистре."""

    return bool(value) and all(char in _HEX_DIGITS for char in value)


def format_age(timestamp: datetime, *, now: datetime | None = None) -> str:
    """Приводит момент времени к дружелюбному виду ("3 days ago")."""

    if timestamp.year <= 1:
        return "N/A"
    current = now or datetime.now(timezone.utc)
    delta = current - timestamp.astimezone(timezone.utc)
    if delta.total_seconds() < 0:
        return "just now"
    days = delta.days
    if days < 1:
        hours = delta.seconds // 3600
        if hours:
            return f"{hours}h ago"
        minutes = (delta.seconds % 3600) // 60
        if minutes:
            return f"{minutes}m ago"
        return "just now"
    if days == 1:
        return "1 day ago"
    if days < 30:
        return f"{days} days ago"
    months = days // 30
    if months == 1:
        return "1 month ago"
    return f"{months} months ago"

"""Пакет docker-ps: статус контейнеров Docker для строки меню."""

__version__ = "1.0.0"

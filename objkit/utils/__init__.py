# objkit/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * Diagnostics   – журнал сообщений одной загрузки
    * LoaderConfig  – опции загрузчика
"""

from .logger import logger, Diagnostics, Severity
from .config import LoaderConfig, DEFAULT_CONFIG

__all__ = ["logger", "Diagnostics", "Severity", "LoaderConfig", "DEFAULT_CONFIG"]

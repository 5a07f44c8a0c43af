# objkit/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер + накопитель диагностики для одной загрузки.
# ---------------------------------------------------------------

import logging
from enum import Enum


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("objkit")

logger = init_logger()


class Severity(Enum):
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class Diagnostics:
    """
    Журнал сообщений одной загрузки (только дописывание).

    Каждое сообщение дублируется в `logger`, а после загрузки
    пользователь может запросить списки errors / warnings / infos.
    """

    def __init__(self, tag: str = "objkit"):
        self.tag = tag
        self._entries: list[tuple[Severity, str]] = []

    def record(self, severity: Severity, message: str) -> None:
        self._entries.append((severity, message))
        logger.log(severity.value, f"[{self.tag}] {message}")

    def info(self, message: str) -> None:
        self.record(Severity.INFO, message)

    def warn(self, message: str) -> None:
        self.record(Severity.WARNING, message)

    def error(self, message: str) -> None:
        self.record(Severity.ERROR, message)

    # -----------------------------------------------------------------
    def _messages(self, severity: Severity) -> list[str]:
        return [msg for sev, msg in self._entries if sev is severity]

    def errors(self) -> list[str]:
        return self._messages(Severity.ERROR)

    def warnings(self) -> list[str]:
        return self._messages(Severity.WARNING)

    def infos(self) -> list[str]:
        return self._messages(Severity.INFO)

    def has_error(self) -> bool:
        return any(sev is Severity.ERROR for sev, _ in self._entries)

    def has_warning(self) -> bool:
        return any(sev is Severity.WARNING for sev, _ in self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

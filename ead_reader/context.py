from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class RecordContext(ABC):
    """What the date parser needs to know about the record it works for.

    Messages are one-way: nothing returned by log/record_warning is used.
    """

    source_id: str
    record_id: str

    @abstractmethod
    def log(self, component: str, message: str, level: int = logging.WARNING) -> None:
        raise NotImplementedError

    @abstractmethod
    def record_warning(self, message: str) -> None:
        """Attach a structured warning (e.g. "invalid date range") to the record."""
        raise NotImplementedError

    def describe(self) -> str:
        return f"{self.source_id}.{self.record_id}"


@dataclass
class RecordLog(RecordContext):
    """Context backed by the `logging` module; keeps warnings in memory for the record."""

    source_id: str
    record_id: str = ""
    warnings: list[str] = field(default_factory=list)

    def log(self, component: str, message: str, level: int = logging.WARNING) -> None:
        logger.log(level, "[%s] %s", component, message)

    def record_warning(self, message: str) -> None:
        if message not in self.warnings:
            self.warnings.append(message)

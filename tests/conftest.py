from __future__ import annotations

import logging

import pytest

from ead_reader.context import RecordContext


class FakeContext(RecordContext):
    def __init__(self, source_id: str = "test", record_id: str = "rec1") -> None:
        self.source_id = source_id
        self.record_id = record_id
        self.logged: list[tuple[str, str, int]] = []
        self.warnings: list[str] = []

    def log(self, component: str, message: str, level: int = logging.WARNING) -> None:
        self.logged.append((component, message, level))

    def record_warning(self, message: str) -> None:
        self.warnings.append(message)


@pytest.fixture
def ctx() -> FakeContext:
    return FakeContext()

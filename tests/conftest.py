"""Pytest configuration.

Selects the test settings before `result_copier.config` is imported and provides
fake collaborators that record every call made by a copier.
"""

from __future__ import annotations

import os


os.environ["ENV"] = "test"

import pytest  # noqa: E402

from result_copier.common.enums import CopyState, ReleasePolicy  # noqa: E402
from result_copier.task_managers import CopyManager  # noqa: E402


class FakeResource:
    def __init__(self, name: str, calls: list[str]) -> None:
        self.name = name
        self.calls = calls
        self.close_error: Exception | None = None
        self.close_count = 0

    def close(self) -> None:
        self.close_count += 1
        self.calls.append(f"{self.name}.close")
        if self.close_error is not None:
            raise self.close_error


class FakeAcquirer:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.connection: FakeResource | None = FakeResource("connection", self.calls)
        self.writer: FakeResource | None = FakeResource("writer", self.calls)
        self.connection_error: BaseException | None = None
        self.writer_error: BaseException | None = None
        self.copy_error: BaseException | None = None
        self.copied: list[tuple] = []

    def acquire_connection(self):
        self.calls.append("acquire_connection")
        if self.connection_error is not None:
            raise self.connection_error
        return self.connection

    def acquire_writer(self, file_name: str):
        self.calls.append("acquire_writer")
        if self.writer_error is not None:
            raise self.writer_error
        return self.writer

    def copy_rows(self, connection, query: str, writer) -> None:
        self.calls.append("copy_rows")
        self.copied.append((connection, query, writer))
        if self.copy_error is not None:
            raise self.copy_error


@pytest.fixture
def acquirer() -> FakeAcquirer:
    return FakeAcquirer()


@pytest.fixture
def states() -> list[CopyState]:
    return []


@pytest.fixture
def make_copier(acquirer, states):
    def _make(release_policy: ReleasePolicy):
        return CopyManager.get_copier(acquirer=acquirer, release_policy=release_policy, state_callback=states.append)

    return _make

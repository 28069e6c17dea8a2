"""Pytest fixtures for sync client tests."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

import pytest

from santasync.client.sync.types import DaemonError
from santasync.core.config import SyncConfig
from santasync.core.types import Rule, StoredEvent

BASE_URL = "http://test"
MACHINE_ID = "machine-1"
RULE_URL = f"{BASE_URL}/rule_download/{MACHINE_ID}"
EVENT_URL = f"{BASE_URL}/event_upload/{MACHINE_ID}"


class FakeDaemon:
    """In-memory stand-in for the daemon connection.

    Every call is appended to ``calls`` so tests can check ordering against
    HTTP requests recorded in the same list.
    """

    def __init__(self, events: Sequence[StoredEvent] = ()) -> None:
        self.events = list(events)
        self.rules: list[Rule] = []
        self.calls: list[tuple[str, Any]] = []
        self.fail_add_rules = False
        self.fail_pending = False
        self.fail_lookup = False
        self.fail_remove = False

    async def pending_events(self) -> list[StoredEvent]:
        self.calls.append(("pending_events", None))
        if self.fail_pending:
            raise DaemonError("database locked")
        return list(self.events)

    async def event_for_sha256(self, sha256: str) -> StoredEvent | None:
        self.calls.append(("event_for_sha256", sha256))
        if self.fail_lookup:
            raise DaemonError("connection invalidated")
        for event in self.events:
            if event.file_sha256 == sha256:
                return event
        return None

    def remove_events(self, ids: Sequence[int]) -> None:
        self.calls.append(("remove_events", list(ids)))
        if self.fail_remove:
            raise DaemonError("connection invalidated")
        self.events = [e for e in self.events if e.idx not in ids]

    async def add_rules(self, rules: Sequence[Rule]) -> None:
        self.calls.append(("add_rules", list(rules)))
        if self.fail_add_rules:
            raise DaemonError("rule table is read-only")
        self.rules.extend(rules)

    def calls_named(self, name: str) -> list[Any]:
        return [args for call, args in self.calls if call == name]


def make_event(idx: int, sha256: str | None = None) -> StoredEvent:
    """Create a StoredEvent for testing."""
    return StoredEvent(
        idx=idx,
        file_sha256=sha256 or f"{idx:064x}",
        file_path=f"/usr/local/bin/tool{idx}",
        executing_user="alice",
        occurrence_date=datetime(2025, 1, 1, tzinfo=timezone.utc),
        decision=2,
    )


@pytest.fixture
def config() -> SyncConfig:
    """Create a SyncConfig pointing at the mock server."""
    return SyncConfig(sync_base_url=BASE_URL, machine_id=MACHINE_ID)


@pytest.fixture
def daemon() -> FakeDaemon:
    """Create an empty FakeDaemon."""
    return FakeDaemon()

"""Interface to the privileged daemon that owns the rule and event stores.

The sync flows never touch persistent state directly. They go through a single
shared connection to the daemon whose calls are asynchronous. Within one flow
at most one daemon call is outstanding at a time.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from santasync.client.sync.types import DaemonError
from santasync.core.types import Rule, StoredEvent

__all__ = ["DaemonConnection", "DaemonError"]


@runtime_checkable
class DaemonConnection(Protocol):
    """Operations the sync flows need from the daemon."""

    async def pending_events(self) -> list[StoredEvent]:
        """Return every event waiting for upload, oldest first."""
        ...

    async def event_for_sha256(self, sha256: str) -> StoredEvent | None:
        """Return the pending event for a file hash, if any."""
        ...

    def remove_events(self, ids: Sequence[int]) -> None:
        """Dispatch removal of uploaded events without waiting for a reply."""
        ...

    async def add_rules(self, rules: Sequence[Rule]) -> None:
        """Store downloaded rules.

        Raises:
            DaemonError: If the rules could not be stored.
        """
        ...

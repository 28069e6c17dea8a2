"""Batched event upload.

This module provides:
- EventUploader: Send pending events in batches, removing each accepted batch
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from santasync.client.api import APIError
from santasync.client.sync.serializer import event_to_dict
from santasync.client.sync.types import DaemonError
from santasync.core.config import DEFAULT_EVENT_BATCH_SIZE

if TYPE_CHECKING:
    from santasync.client.api import HTTPClient
    from santasync.client.daemon import DaemonConnection
    from santasync.core.types import StoredEvent

logger = logging.getLogger(__name__)


class EventUploader:
    """Uploads the daemon's pending events to the sync server.

    Batches go out one at a time. Once the server accepts a batch, its events
    are removed from the daemon before the next batch is sent. A rejected
    batch ends the session; events not yet accepted stay pending.

    Usage:
        uploader = EventUploader(client, daemon, batch_size=50)
        success = await uploader.upload_pending()
    """

    def __init__(
        self,
        client: HTTPClient,
        daemon: DaemonConnection,
        batch_size: int = DEFAULT_EVENT_BATCH_SIZE,
    ) -> None:
        """Initialize the event uploader.

        Args:
            client: HTTP client for server communication.
            daemon: Connection to the daemon holding the event queue.
            batch_size: Maximum number of events per request.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._client = client
        self._daemon = daemon
        self._batch_size = batch_size

    async def upload_pending(self) -> bool:
        """Upload every pending event.

        Returns:
            True if all pending events were accepted (or there were none).
        """
        try:
            events = await self._daemon.pending_events()
        except DaemonError as e:
            logger.error(f"Failed to read pending events: {e}")
            return False

        if not events:
            return True
        return await self.upload_events(events, self._batch_size)

    async def upload_one(self, sha256: str) -> bool:
        """Upload the pending event for a single file hash.

        Args:
            sha256: SHA-256 of the file whose event should be sent.

        Returns:
            True if the event was accepted or no such event exists.
        """
        try:
            event = await self._daemon.event_for_sha256(sha256)
        except DaemonError as e:
            logger.error(f"Failed to look up event for {sha256}: {e}")
            return False

        if event is None:
            return True
        return await self.upload_events([event], batch_size=1)

    async def upload_events(
        self,
        events: Sequence[StoredEvent],
        batch_size: int,
    ) -> bool:
        """Upload events in order, batch_size at a time.

        Args:
            events: Events to send, in upload order.
            batch_size: Maximum number of events per request.

        Returns:
            True if every batch was accepted.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")

        remaining = list(events)
        while remaining:
            batch, remaining = remaining[:batch_size], remaining[batch_size:]

            try:
                await self._client.upload_events([event_to_dict(e) for e in batch])
            except APIError as e:
                logger.error(f"Event upload failed: {e} (status {e.status_code})")
                return False

            logger.info(f"Uploaded {len(batch)} events")
            ids = [e.idx for e in batch]
            try:
                self._daemon.remove_events(ids)
            except DaemonError as e:
                # The server already holds the batch; it may be re-sent next session
                logger.warning(f"Failed to remove {len(ids)} uploaded event(s): {e}")

        return True

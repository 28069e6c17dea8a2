"""Sync session that drives the rule download and event upload flows.

The two flows share no state, so a session runs them concurrently. Each flow
is still a strict serial chain of requests on its own.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from santasync.client.api import HTTPClient
from santasync.client.sync.event_upload import EventUploader
from santasync.client.sync.rule_download import RuleDownloader
from santasync.client.sync.types import SyncResult

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from santasync.client.daemon import DaemonConnection
    from santasync.core.config import SyncConfig

logger = logging.getLogger(__name__)


class SyncSession:
    """One sync session against the policy server.

    Usage:
        async with SyncSession(config, daemon) as session:
            result = await session.run()
    """

    def __init__(
        self,
        config: SyncConfig,
        daemon: DaemonConnection,
        client: HTTPClient | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            config: Sync configuration.
            daemon: Connection to the daemon.
            client: HTTP client to use. When omitted the session creates one
                from config and closes it on exit.
        """
        self._config = config
        self._owns_client = client is None
        self._client = client or HTTPClient(config)
        self.rule_downloader = RuleDownloader(self._client, daemon)
        self.event_uploader = EventUploader(
            self._client, daemon, batch_size=config.event_batch_size
        )

    async def aclose(self) -> None:
        """Close the HTTP client if this session created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> SyncSession:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def run(self, rules: bool = True, events: bool = True) -> SyncResult:
        """Run the requested flows.

        Args:
            rules: Download rules.
            events: Upload pending events.

        Returns:
            Per-stage outcome.
        """
        stages: dict[str, Awaitable[bool]] = {}
        if rules:
            stages["rule_download"] = self.rule_downloader.download()
        if events:
            stages["event_upload"] = self.event_uploader.upload_pending()

        outcomes = await asyncio.gather(*stages.values())
        result = SyncResult(**dict(zip(stages, outcomes)))

        if result.success:
            logger.info(f"Sync with {self._config.sync_base_url} complete")
        else:
            failed = ", ".join(stage.value for stage in result.failed_stages)
            logger.error(f"Sync with {self._config.sync_base_url} failed: {failed}")
        return result

    async def upload_event(self, sha256: str) -> bool:
        """Upload the pending event for one file hash.

        Args:
            sha256: SHA-256 of the file.

        Returns:
            True if the event was accepted or none was pending.
        """
        return await self.event_uploader.upload_one(sha256)

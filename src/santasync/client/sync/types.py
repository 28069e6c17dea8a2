"""Shared types for sync operations.

This module provides:
- SyncError, DaemonError: Exception classes
- SyncStage: The independent flows a session can run
- SyncResult: Overall sync session result
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SyncError(Exception):
    """Base exception for sync errors."""


class DaemonError(SyncError):
    """The daemon reported a failure or could not be reached."""


class SyncStage(str, Enum):
    """Flows that make up a sync session."""

    RULE_DOWNLOAD = "rule_download"
    EVENT_UPLOAD = "event_upload"


@dataclass
class SyncResult:
    """Result of a sync session.

    Each stage is True/False when it ran, None when it was skipped.
    """

    rule_download: bool | None = None
    event_upload: bool | None = None

    @property
    def success(self) -> bool:
        """True when every stage that ran succeeded."""
        return all(
            result is not False
            for result in (self.rule_download, self.event_upload)
        )

    @property
    def failed_stages(self) -> list[SyncStage]:
        """Stages that ran and failed."""
        failed = []
        if self.rule_download is False:
            failed.append(SyncStage.RULE_DOWNLOAD)
        if self.event_upload is False:
            failed.append(SyncStage.EVENT_UPLOAD)
        return failed

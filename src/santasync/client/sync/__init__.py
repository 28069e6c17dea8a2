"""Sync operations for rule download and event upload.

Architecture:
    SyncSession → RuleDownloader / EventUploader → HTTPClient + DaemonConnection

Components:
- **RuleDownloader**: Paginated rule fetch, single commit to the daemon
- **EventUploader**: Batched event upload with per-batch removal
- **event_to_dict**: Sparse wire encoding of stored events
- **SyncSession**: Runs either or both flows
"""

from santasync.client.sync.event_upload import EventUploader
from santasync.client.sync.rule_download import RuleDownloader, parse_rule
from santasync.client.sync.serializer import (
    certificate_to_dict,
    event_to_dict,
    split_path,
    to_epoch,
)
from santasync.client.sync.session import SyncSession
from santasync.client.sync.types import (
    DaemonError,
    SyncError,
    SyncResult,
    SyncStage,
)

__all__ = [
    # Flows
    "EventUploader",
    "RuleDownloader",
    "SyncSession",
    "parse_rule",
    # Serialization
    "certificate_to_dict",
    "event_to_dict",
    "split_path",
    "to_epoch",
    # Types
    "DaemonError",
    "SyncError",
    "SyncResult",
    "SyncStage",
]

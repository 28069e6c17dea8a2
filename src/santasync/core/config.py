"""Shared configuration classes for santasync.

This module defines the sync configuration used by the HTTP client and the
rule download / event upload flows.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_EVENT_BATCH_SIZE = 50

# Endpoint prefixes, relative to the sync base URL
URL_RULE_DOWNLOAD = "rule_download/"
URL_EVENT_UPLOAD = "event_upload/"


@dataclass
class SyncConfig:
    """Configuration for a sync session against a policy server.

    Attributes:
        sync_base_url: Base URL of the sync server (e.g., "https://santa.example.com/api").
        machine_id: Identifier appended to every endpoint path.
        event_batch_size: Maximum number of events per upload request.
        timeout: Request/connection timeout in seconds.
        verify_ssl: Whether to verify SSL certificates (default True).
    """

    sync_base_url: str
    machine_id: str
    event_batch_size: int = DEFAULT_EVENT_BATCH_SIZE
    timeout: float = 30.0
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        """Normalize server URL and validate values."""
        self.sync_base_url = self.sync_base_url.rstrip("/")
        if not self.machine_id:
            raise ValueError("machine_id cannot be empty")
        if self.event_batch_size < 1:
            raise ValueError(
                f"event_batch_size must be positive, got {self.event_batch_size}"
            )

    @property
    def rule_download_path(self) -> str:
        """Get the rule download endpoint, relative to the base URL."""
        return f"{URL_RULE_DOWNLOAD}{self.machine_id}"

    @property
    def event_upload_path(self) -> str:
        """Get the event upload endpoint, relative to the base URL."""
        return f"{URL_EVENT_UPLOAD}{self.machine_id}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SyncConfig:
        """Create from a configuration dictionary."""
        return cls(
            sync_base_url=data["sync_base_url"],
            machine_id=data["machine_id"],
            event_batch_size=int(
                data.get("event_batch_size", DEFAULT_EVENT_BATCH_SIZE)
            ),
            timeout=float(data.get("timeout", 30.0)),
            verify_ssl=bool(data.get("verify_ssl", True)),
        )


def get_config_dir() -> Path:
    """Get the configuration directory for santasync.

    Returns:
        Path to ~/.santasync or equivalent.
    """
    return Path.home() / ".santasync"


def get_config_file() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.json"


def load_config(path: Path | None = None) -> SyncConfig:
    """Load the sync configuration from a JSON file.

    Args:
        path: Config file to read (default: ~/.santasync/config.json).

    Returns:
        Parsed configuration.

    Raises:
        FileNotFoundError: If the config file does not exist.
        KeyError: If a required key is missing.
    """
    config_file = path or get_config_file()
    return SyncConfig.from_dict(dict(json.loads(config_file.read_text())))

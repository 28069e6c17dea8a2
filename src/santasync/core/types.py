"""Shared types for santasync.

This module defines the rule and event models exchanged between the sync
flows, the policy server and the daemon.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class RuleState(str, Enum):
    """Policy outcome a client applies to a matched binary or certificate.

    Values are the strings the server sends in the ``policy`` field.
    """

    WHITELIST = "WHITELIST"
    BLACKLIST = "BLACKLIST"
    SILENT_BLACKLIST = "SILENT_BLACKLIST"
    REMOVE = "REMOVE"


class RuleType(str, Enum):
    """What a rule's hash identifies.

    Values are the strings the server sends in the ``rule_type`` field.
    """

    BINARY = "BINARY"
    CERTIFICATE = "CERTIFICATE"


@dataclass(frozen=True)
class Rule:
    """A policy rule downloaded from the sync server."""

    shasum: str
    state: RuleState
    type: RuleType
    custom_msg: str | None = None


@dataclass
class Certificate:
    """A certificate in a binary's signing chain."""

    sha256: str | None = None
    common_name: str | None = None
    org_name: str | None = None
    org_unit: str | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None


@dataclass
class StoredEvent:
    """An execution event waiting in the daemon's queue for upload.

    Attributes:
        idx: Stable identifier used to remove the event once uploaded.
        file_sha256: SHA-256 of the executed file.
        file_path: Full path of the executed file.
        occurrence_date: When the execution happened.
        decision: Numeric decision code recorded by the daemon.
        signing_chain: Certificates that signed the binary, leaf first.
    """

    idx: int
    file_sha256: str | None = None
    file_path: str | None = None
    executing_user: str | None = None
    occurrence_date: datetime | None = None
    decision: int | None = None
    logged_in_users: list[str] | None = None
    current_sessions: list[str] | None = None
    file_bundle_id: str | None = None
    file_bundle_name: str | None = None
    file_bundle_version: str | None = None
    file_bundle_version_string: str | None = None
    pid: int | None = None
    ppid: int | None = None
    signing_chain: list[Certificate] = field(default_factory=list)

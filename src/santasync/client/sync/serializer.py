"""Conversion of stored events into upload records.

Records are sparse: a key is only written when the event carries a value for
it. The signing chain is the exception and is always present as a list.
"""

from __future__ import annotations

import posixpath
from datetime import datetime, timezone
from typing import Any

from santasync.client.constants import (
    KEY_CERT_CN,
    KEY_CERT_ORG,
    KEY_CERT_OU,
    KEY_CERT_SHA256,
    KEY_CERT_VALID_FROM,
    KEY_CERT_VALID_UNTIL,
    KEY_CURRENT_SESSIONS,
    KEY_DECISION,
    KEY_EXECUTING_USER,
    KEY_EXECUTION_TIME,
    KEY_FILE_BUNDLE_ID,
    KEY_FILE_BUNDLE_NAME,
    KEY_FILE_BUNDLE_VERSION,
    KEY_FILE_BUNDLE_VERSION_STRING,
    KEY_FILE_NAME,
    KEY_FILE_PATH,
    KEY_FILE_SHA256,
    KEY_LOGGED_IN_USERS,
    KEY_PID,
    KEY_PPID,
    KEY_SIGNING_CHAIN,
)
from santasync.core.types import Certificate, StoredEvent


def to_epoch(value: datetime) -> float:
    """Convert a datetime to POSIX epoch seconds.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def split_path(path: str) -> tuple[str, str]:
    """Split a file path into its directory and base name.

    Args:
        path: Full path (e.g., "/Applications/App.app/Contents/MacOS/App").

    Returns:
        Tuple of (directory, name). The root path is its own name.
    """
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    if path == "/":
        return "/", "/"
    return posixpath.dirname(path), posixpath.basename(path)


def _add(record: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        record[key] = value


def certificate_to_dict(cert: Certificate) -> dict[str, Any]:
    """Serialize one certificate of a signing chain."""
    record: dict[str, Any] = {}
    _add(record, KEY_CERT_SHA256, cert.sha256)
    _add(record, KEY_CERT_CN, cert.common_name)
    _add(record, KEY_CERT_ORG, cert.org_name)
    _add(record, KEY_CERT_OU, cert.org_unit)
    if cert.valid_from is not None:
        record[KEY_CERT_VALID_FROM] = to_epoch(cert.valid_from)
    if cert.valid_until is not None:
        record[KEY_CERT_VALID_UNTIL] = to_epoch(cert.valid_until)
    return record


def event_to_dict(event: StoredEvent) -> dict[str, Any]:
    """Serialize a stored event into its upload record.

    Args:
        event: Event read from the daemon.

    Returns:
        JSON-ready dictionary without keys for absent fields.
    """
    record: dict[str, Any] = {}

    _add(record, KEY_FILE_SHA256, event.file_sha256)
    if event.file_path is not None:
        directory, name = split_path(event.file_path)
        record[KEY_FILE_PATH] = directory
        record[KEY_FILE_NAME] = name
    _add(record, KEY_EXECUTING_USER, event.executing_user)
    if event.occurrence_date is not None:
        record[KEY_EXECUTION_TIME] = to_epoch(event.occurrence_date)
    _add(record, KEY_DECISION, event.decision)
    if event.logged_in_users is not None:
        record[KEY_LOGGED_IN_USERS] = list(event.logged_in_users)
    if event.current_sessions is not None:
        record[KEY_CURRENT_SESSIONS] = list(event.current_sessions)

    _add(record, KEY_FILE_BUNDLE_ID, event.file_bundle_id)
    _add(record, KEY_FILE_BUNDLE_NAME, event.file_bundle_name)
    _add(record, KEY_FILE_BUNDLE_VERSION, event.file_bundle_version)
    _add(record, KEY_FILE_BUNDLE_VERSION_STRING, event.file_bundle_version_string)

    _add(record, KEY_PID, event.pid)
    _add(record, KEY_PPID, event.ppid)

    record[KEY_SIGNING_CHAIN] = [
        certificate_to_dict(cert) for cert in event.signing_chain
    ]
    return record

"""Tests for event serialization."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from santasync.client.sync import certificate_to_dict, event_to_dict, split_path, to_epoch
from santasync.core.types import Certificate, StoredEvent

EPOCH_2025 = 1735689600.0


class TestToEpoch:
    """Tests for to_epoch."""

    def test_aware_datetime(self) -> None:
        """Should convert an aware datetime."""
        assert to_epoch(datetime(2025, 1, 1, tzinfo=timezone.utc)) == EPOCH_2025

    def test_naive_datetime_is_utc(self) -> None:
        """Should treat naive datetimes as UTC."""
        assert to_epoch(datetime(2025, 1, 1)) == EPOCH_2025

    def test_other_timezone(self) -> None:
        """Should account for the offset."""
        tz = timezone(timedelta(hours=2))
        assert to_epoch(datetime(2025, 1, 1, 2, 0, tzinfo=tz)) == EPOCH_2025


class TestSplitPath:
    """Tests for split_path."""

    def test_nested_path(self) -> None:
        """Should split directory and file name."""
        assert split_path("/Applications/Foo.app/Contents/MacOS/Foo") == (
            "/Applications/Foo.app/Contents/MacOS",
            "Foo",
        )

    def test_root_file(self) -> None:
        """Should keep the root as directory."""
        assert split_path("/launchd") == ("/", "launchd")

    def test_root_path(self) -> None:
        """Should use the root as both directory and name."""
        assert split_path("/") == ("/", "/")
        assert split_path("//") == ("/", "/")

    def test_trailing_slash(self) -> None:
        """Should ignore a trailing slash."""
        assert split_path("/usr/local/bin/") == ("/usr/local", "bin")


class TestEventToDict:
    """Tests for event_to_dict."""

    def test_minimal_event(self) -> None:
        """Should only emit the signing chain for an empty event."""
        assert event_to_dict(StoredEvent(idx=1)) == {"signing_chain": []}

    def test_full_event(self) -> None:
        """Should emit every field with wire keys."""
        event = StoredEvent(
            idx=7,
            file_sha256="deadbeef",
            file_path="/Applications/Foo.app/Contents/MacOS/Foo",
            executing_user="alice",
            occurrence_date=datetime(2025, 1, 1, tzinfo=timezone.utc),
            decision=3,
            logged_in_users=["alice", "bob"],
            current_sessions=["alice@console"],
            file_bundle_id="com.example.foo",
            file_bundle_name="Foo",
            file_bundle_version="123",
            file_bundle_version_string="1.2.3",
            pid=501,
            ppid=1,
            signing_chain=[
                Certificate(
                    sha256="leaf",
                    common_name="Developer ID Application: Example",
                    org_name="Example Inc",
                    org_unit="ABCDE12345",
                    valid_from=datetime(2025, 1, 1, tzinfo=timezone.utc),
                    valid_until=datetime(2025, 1, 2, tzinfo=timezone.utc),
                ),
                Certificate(sha256="root", common_name="Apple Root CA"),
            ],
        )

        record = event_to_dict(event)

        assert record == {
            "file_sha256": "deadbeef",
            "file_path": "/Applications/Foo.app/Contents/MacOS",
            "file_name": "Foo",
            "executing_user": "alice",
            "execution_time": EPOCH_2025,
            "decision": 3,
            "logged_in_users": ["alice", "bob"],
            "current_sessions": ["alice@console"],
            "file_bundle_id": "com.example.foo",
            "file_bundle_name": "Foo",
            "file_bundle_version": "123",
            "file_bundle_version_string": "1.2.3",
            "pid": 501,
            "ppid": 1,
            "signing_chain": [
                {
                    "sha256": "leaf",
                    "cn": "Developer ID Application: Example",
                    "org": "Example Inc",
                    "ou": "ABCDE12345",
                    "valid_from": EPOCH_2025,
                    "valid_until": EPOCH_2025 + 86400,
                },
                {"sha256": "root", "cn": "Apple Root CA"},
            ],
        }

    def test_idx_not_serialized(self) -> None:
        """Should not send the daemon's identifier."""
        assert "idx" not in event_to_dict(StoredEvent(idx=1, file_sha256="a"))

    def test_zero_values_are_present(self) -> None:
        """Should emit falsy but present values."""
        record = event_to_dict(StoredEvent(idx=1, decision=0, pid=0, logged_in_users=[]))

        assert record["decision"] == 0
        assert record["pid"] == 0
        assert record["logged_in_users"] == []

    def test_signing_chain_length(self) -> None:
        """Should emit one entry per certificate, even when empty."""
        chain = [Certificate() for _ in range(3)]

        record = event_to_dict(StoredEvent(idx=1, signing_chain=chain))

        assert record["signing_chain"] == [{}, {}, {}]

    def test_does_not_modify_event(self) -> None:
        """Should not alias the event's lists."""
        users = ["alice"]
        record = event_to_dict(StoredEvent(idx=1, logged_in_users=users))
        record["logged_in_users"].append("mallory")

        assert users == ["alice"]


class TestCertificateToDict:
    """Tests for certificate_to_dict."""

    def test_partial_certificate(self) -> None:
        """Should skip absent fields."""
        cert = Certificate(org_unit="XYZ", valid_until=datetime(2025, 1, 1))

        assert certificate_to_dict(cert) == {"ou": "XYZ", "valid_until": EPOCH_2025}

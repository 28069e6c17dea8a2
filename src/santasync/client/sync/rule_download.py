"""Paginated rule download.

This module provides:
- parse_rule: Turn one server record into a Rule, or None if unusable
- RuleDownloader: Fetch every page of rules, then hand them to the daemon once
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from santasync.client.api import APIError, DecodeError
from santasync.client.constants import (
    KEY_RULE_CUSTOM_MSG,
    KEY_RULE_POLICY,
    KEY_RULE_SHA256,
    KEY_RULE_TYPE,
)
from santasync.client.sync.types import DaemonError
from santasync.core.types import Rule, RuleState, RuleType

if TYPE_CHECKING:
    from santasync.client.api import HTTPClient
    from santasync.client.daemon import DaemonConnection

logger = logging.getLogger(__name__)


def parse_rule(record: Any) -> Rule | None:
    """Parse a rule record from the server.

    Args:
        record: One element of the response's ``rules`` array.

    Returns:
        The rule, or None when the record is not an object, has no hash,
        or carries a policy or rule type this client does not know.
    """
    if not isinstance(record, dict):
        return None

    shasum = record.get(KEY_RULE_SHA256)
    if not isinstance(shasum, str) or not shasum:
        return None

    try:
        state = RuleState(record.get(KEY_RULE_POLICY))
        rule_type = RuleType(record.get(KEY_RULE_TYPE))
    except ValueError:
        return None

    custom_msg = record.get(KEY_RULE_CUSTOM_MSG)
    return Rule(
        shasum=shasum,
        state=state,
        type=rule_type,
        custom_msg=custom_msg if isinstance(custom_msg, str) else None,
    )


class RuleDownloader:
    """Downloads all rules for this machine and stores them in the daemon.

    Pages are fetched strictly one after another. Rules accumulate in
    arrival order and reach the daemon in a single add_rules call after the
    last page, so a failed session commits nothing.

    Usage:
        downloader = RuleDownloader(client, daemon)
        success = await downloader.download()
    """

    def __init__(self, client: HTTPClient, daemon: DaemonConnection) -> None:
        """Initialize the rule downloader.

        Args:
            client: HTTP client for server communication.
            daemon: Connection to the daemon holding the rule store.
        """
        self._client = client
        self._daemon = daemon

    async def download(self) -> bool:
        """Run a rule download session.

        Returns:
            True if every page was fetched and the daemon stored the rules.
        """
        rules: list[Rule] = []
        cursor: str | None = None

        while True:
            try:
                page = await self._client.download_rules(cursor)
            except DecodeError as e:
                # Fatal even when the body looked like it carried a cursor
                logger.error(f"Rule download failed: {e}")
                return False
            except APIError as e:
                logger.error(f"Rule download failed: {e} (status {e.status_code})")
                return False

            for record in page.rules:
                rule = parse_rule(record)
                if rule is None:
                    logger.debug(f"Dropping unusable rule record: {record!r}")
                    continue
                rules.append(rule)

            if page.cursor is None:
                break
            cursor = page.cursor

        try:
            await self._daemon.add_rules(rules)
        except DaemonError as e:
            logger.error(f"Failed to store {len(rules)} rule(s): {e}")
            return False

        if rules:
            logger.info(f"Added {len(rules)} rule(s)")
        return True

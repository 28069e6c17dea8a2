"""Core module - Shared configuration and models."""

from santasync.core.config import (
    DEFAULT_EVENT_BATCH_SIZE,
    URL_EVENT_UPLOAD,
    URL_RULE_DOWNLOAD,
    SyncConfig,
    get_config_dir,
    get_config_file,
    load_config,
)
from santasync.core.types import (
    Certificate,
    Rule,
    RuleState,
    RuleType,
    StoredEvent,
)

__all__ = [
    # Config
    "DEFAULT_EVENT_BATCH_SIZE",
    "SyncConfig",
    "URL_EVENT_UPLOAD",
    "URL_RULE_DOWNLOAD",
    "get_config_dir",
    "get_config_file",
    "load_config",
    # Types
    "Certificate",
    "Rule",
    "RuleState",
    "RuleType",
    "StoredEvent",
]

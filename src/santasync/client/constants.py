"""Wire-format keys for the sync protocol."""

# Top-level request/response keys
KEY_CURSOR = "cursor"
KEY_RULES = "rules"
KEY_EVENTS = "events"

# Rule record keys
KEY_RULE_SHA256 = "sha256"
KEY_RULE_POLICY = "policy"
KEY_RULE_TYPE = "rule_type"
KEY_RULE_CUSTOM_MSG = "custom_msg"

# Event record keys
KEY_FILE_SHA256 = "file_sha256"
KEY_FILE_PATH = "file_path"
KEY_FILE_NAME = "file_name"
KEY_EXECUTING_USER = "executing_user"
KEY_EXECUTION_TIME = "execution_time"
KEY_DECISION = "decision"
KEY_LOGGED_IN_USERS = "logged_in_users"
KEY_CURRENT_SESSIONS = "current_sessions"
KEY_FILE_BUNDLE_ID = "file_bundle_id"
KEY_FILE_BUNDLE_NAME = "file_bundle_name"
KEY_FILE_BUNDLE_VERSION = "file_bundle_version"
KEY_FILE_BUNDLE_VERSION_STRING = "file_bundle_version_string"
KEY_PID = "pid"
KEY_PPID = "ppid"
KEY_SIGNING_CHAIN = "signing_chain"

# Certificate keys (inside signing_chain)
KEY_CERT_SHA256 = "sha256"
KEY_CERT_CN = "cn"
KEY_CERT_ORG = "org"
KEY_CERT_OU = "ou"
KEY_CERT_VALID_FROM = "valid_from"
KEY_CERT_VALID_UNTIL = "valid_until"

"""Shared constants for the error log.

For environment-based configuration (log location, retention limits), use the env module:
    from common.env import env
    max_entries = env.error_log_max_entries()
"""

# Vault-relative location of the error log document
DEFAULT_LOG_LOCATION = "CareerOS/error_log.md"

# Retention limits applied on every rotation
DEFAULT_MAX_ENTRIES = 100
DEFAULT_MAX_AGE_DAYS = 30

# Title line written at the top of every error log document
LOG_TITLE = "CareerOS Error Log"

"""modules/observability: action audit trail and logging setup."""

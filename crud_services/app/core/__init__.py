"""Core infrastructure: settings, database bootstrap, logging and the per-app context."""

"""Core configuration and database lifecycle."""

"""Logging setup and CLI settings."""

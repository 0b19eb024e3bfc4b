"""Shared utilities (console and logging helpers)."""

"""Shared helpers: error types, character tables and logging setup."""

"""
Module: utils
Description: Package initialization for utility functions.

This package contains shared helpers used throughout the plugin.

Current utilities:
- logger: Structured logging configuration and helpers
- interpolate: {env:NAME} substitution inside parsed config documents
- filters: Event type allowlist matching for targets
"""

__all__ = []

"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the data models and host interfaces used by the plugin:
- RetryConfig, TargetConfig, PluginConfig: Validated target configuration
- HostClient, FailureLogger, EventRecord: Host runtime contracts

All models are exported here for convenient importing.
"""

from .host import EventRecord, FailureLogger, HostClient, event_type
from .target import PluginConfig, RetryConfig, TargetConfig

__all__ = [
    "EventRecord",
    "FailureLogger",
    "HostClient",
    "PluginConfig",
    "RetryConfig",
    "TargetConfig",
    "event_type",
]

"""
Package: opencode_event_push
Description: Forwards host lifecycle events to configured HTTP targets.

Targets are read from a global and a project JSON config file, filtered
per event type, and delivered over HTTP POST with exponential-backoff retry.
"""

from opencode_event_push.config.loader import load_config, read_config_file
from opencode_event_push.delivery.push import PushDeliveryClient, push_to_target
from opencode_event_push.handlers.events import EventDispatcher, dispatch_event
from opencode_event_push.models.target import PluginConfig, RetryConfig, TargetConfig
from opencode_event_push.plugin import HostLogger, event_push_plugin
from opencode_event_push.utils.interpolate import interpolate

__version__ = "0.1.0"

__all__ = [
    "EventDispatcher",
    "HostLogger",
    "PluginConfig",
    "PushDeliveryClient",
    "RetryConfig",
    "TargetConfig",
    "dispatch_event",
    "event_push_plugin",
    "interpolate",
    "load_config",
    "push_to_target",
    "read_config_file",
]

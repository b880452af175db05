"""
Module: host.py
Description: Interfaces of the host runtime the plugin talks to.

The host supplies a client whose app.log() coroutine accepts structured
log records, and passes events as plain mappings carrying at least a
"type" field. These protocols describe that contract; the plugin never
constructs a host client itself.
"""

from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Protocol

# Coroutine called once per terminally failed delivery: (message, extra)
FailureLogger = Callable[[str, Optional[Dict[str, Any]]], Awaitable[None]]

# Mapping forwarded verbatim as the delivery payload
EventRecord = Mapping[str, Any]


class HostApp(Protocol):
    async def log(self, *, body: Dict[str, Any]) -> Any:
        ...


class HostClient(Protocol):
    """Client handed to the plugin at activation time."""

    app: HostApp


def event_type(event: EventRecord) -> Optional[str]:
    """Return the event's type field, or None when it has none."""
    value = event.get("type")
    return value if isinstance(value, str) else None

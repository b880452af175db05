"""
Module: filters.py
Description: Event type filtering for delivery targets.

A target's events list is an allowlist: an empty or absent list forwards
every event, otherwise only events whose type is listed are forwarded.
"""

from typing import Iterable, List

from opencode_event_push.models.host import EventRecord, event_type
from opencode_event_push.models.target import TargetConfig


def target_accepts(target: TargetConfig, event: EventRecord) -> bool:
    """Check whether target should receive event."""
    return target.accepts(event_type(event))


def select_targets(targets: Iterable[TargetConfig], event: EventRecord) -> List[TargetConfig]:
    """
    Return the targets that should receive event.

    Args:
        targets: Loaded targets
        event: Inbound event record

    Returns:
        Matching targets, in configuration order
    """
    return [target for target in targets if target_accepts(target, event)]

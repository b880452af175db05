"""
Module: events.py
Description: Event dispatch to matching delivery targets.

Each inbound event is matched against the loaded targets and pushed to
every matching one concurrently. Completion waits for all deliveries to
settle; one target failing never affects another, and dispatch itself
never raises.
"""

import asyncio
from typing import Optional, Sequence

from opencode_event_push.delivery.push import PushDeliveryClient
from opencode_event_push.models.host import EventRecord, FailureLogger, event_type
from opencode_event_push.models.target import TargetConfig
from opencode_event_push.utils.filters import select_targets
from opencode_event_push.utils.logger import get_logger

logger = get_logger(__name__)


async def dispatch_event(
    targets: Sequence[TargetConfig],
    event: EventRecord,
    log_failure: FailureLogger,
    delivery: Optional[PushDeliveryClient] = None
) -> None:
    """
    Push event to every target whose allowlist accepts it.

    Args:
        targets: Loaded targets (read-only, shared across deliveries)
        event: Inbound event record, forwarded verbatim
        log_failure: Host logger for terminal delivery failures
        delivery: Delivery client, a default one is created if omitted
    """
    try:
        matching = select_targets(targets, event)
    except Exception as e:
        logger.error("Event filtering failed", error=str(e), error_type=type(e).__name__)
        return

    if not matching:
        return

    if delivery is None:
        delivery = PushDeliveryClient()

    results = await asyncio.gather(
        *(delivery.deliver(target, event, log_failure) for target in matching),
        return_exceptions=True
    )

    for target, result in zip(matching, results):
        if isinstance(result, Exception):
            logger.error(
                "Delivery task raised unexpectedly",
                url=target.url,
                event_type=event_type(event),
                error=str(result),
                error_type=type(result).__name__
            )


class EventDispatcher:
    """
    Event hook bound to a loaded target list.

    Instances are the callable handed back to the host; calling one
    dispatches a single event.
    """

    def __init__(
        self,
        targets: Sequence[TargetConfig],
        log_failure: FailureLogger,
        delivery: Optional[PushDeliveryClient] = None
    ):
        self.targets = tuple(targets)
        self.log_failure = log_failure
        self.delivery = delivery if delivery is not None else PushDeliveryClient()

    async def __call__(self, event: EventRecord) -> None:
        await dispatch_event(self.targets, event, self.log_failure, self.delivery)

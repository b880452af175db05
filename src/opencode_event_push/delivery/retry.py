"""
Module: delivery/retry.py
Description: Retry policy for event delivery.

Builds a tenacity AsyncRetrying from a target's RetryConfig: a fixed number
of total attempts and exponential backoff of base, 2*base, 4*base, ...
between them. Every exception raised by an attempt is retryable; the last
one is re-raised once attempts run out.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from opencode_event_push.models.target import RetryConfig
from opencode_event_push.utils.logger import get_logger

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]


def build_retrying(policy: RetryConfig, sleep: Sleep = asyncio.sleep) -> AsyncRetrying:
    """
    Create the retry controller for one delivery.

    Args:
        policy: Target retry policy, with defaults already resolved
        sleep: Coroutine used to wait between attempts

    Returns:
        AsyncRetrying that re-raises the final attempt's exception
    """
    return AsyncRetrying(
        stop=stop_after_attempt(policy.effective_attempts),
        wait=wait_exponential(multiplier=policy.base_delay_seconds, exp_base=2, min=0),
        retry=retry_if_exception_type(Exception),
        before_sleep=before_sleep_log(logger, logging.DEBUG),
        sleep=sleep,
        reraise=True
    )

"""
Module: push.py
Description: Push event delivery to configured targets.

Implements HTTP POST delivery with bounded exponential-backoff retry.
Delivery never raises: once a target's attempts are exhausted the failure
is reported through the host failure logger and the call returns.
"""

import asyncio
import json
from typing import Any, Dict, Optional

import httpx

from opencode_event_push.config.settings import Settings, settings as default_settings
from opencode_event_push.delivery.retry import Sleep, build_retrying
from opencode_event_push.models.host import EventRecord, FailureLogger
from opencode_event_push.models.target import TargetConfig
from opencode_event_push.utils.logger import get_logger

logger = get_logger(__name__)


def _describe(error: BaseException) -> str:
    return str(error) or type(error).__name__


def _serialize(payload: EventRecord) -> bytes:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class PushDeliveryClient:
    """
    HTTP client for pushing events to targets.

    Holds the transport options shared by every delivery. An httpx.AsyncClient
    may be injected and is then reused (and left open); otherwise each
    delivery opens and closes its own client.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        sleep: Sleep = asyncio.sleep,
        settings: Settings = default_settings
    ):
        """
        Initialize push delivery client.

        Args:
            client: Optional shared httpx.AsyncClient
            sleep: Coroutine used for backoff waits
            settings: Settings supplying the request timeout
        """
        self._client = client
        self._sleep = sleep
        self._settings = settings
        self._timeout = settings.delivery_timeout

    def _new_client(self) -> httpx.AsyncClient:
        if self._timeout is None:
            return httpx.AsyncClient()
        return httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))

    async def deliver(
        self,
        target: TargetConfig,
        payload: EventRecord,
        log_failure: FailureLogger
    ) -> None:
        """
        Deliver payload to target, retrying per the target's policy.

        Args:
            target: Destination and retry policy
            payload: Event record, sent as the JSON body
            log_failure: Host logger called once if every attempt fails
        """
        if self._client is not None:
            await self._deliver_with(self._client, target, payload, log_failure)
            return

        async with self._new_client() as client:
            await self._deliver_with(client, target, payload, log_failure)

    async def _deliver_with(
        self,
        client: httpx.AsyncClient,
        target: TargetConfig,
        payload: EventRecord,
        log_failure: FailureLogger
    ) -> None:
        policy = target.retry_policy.with_defaults(self._settings)

        try:
            async for attempt in build_retrying(policy, sleep=self._sleep):
                with attempt:
                    await self._post(client, target, payload)
        except Exception as e:
            await self._report_failure(target, policy.effective_attempts, e, log_failure)

    async def _post(
        self,
        client: httpx.AsyncClient,
        target: TargetConfig,
        payload: EventRecord
    ) -> None:
        logger.debug("Attempting event delivery", url=target.url)

        response = await client.post(
            target.url,
            content=_serialize(payload),
            headers=target.request_headers(),
            follow_redirects=True
        )

        if not response.is_success:
            raise httpx.HTTPStatusError(
                f"HTTP {response.status_code} {response.reason_phrase}",
                request=response.request,
                response=response
            )

        logger.debug(
            "Event delivered",
            url=target.url,
            status_code=response.status_code
        )

    async def _report_failure(
        self,
        target: TargetConfig,
        attempts: int,
        error: BaseException,
        log_failure: FailureLogger
    ) -> None:
        description = _describe(error)
        message = (
            f"Failed to push event to {target.url} after {attempts} attempt(s): "
            f"{description}"
        )
        extra: Dict[str, Any] = {
            "url": target.url,
            "error": description,
            "attempts": attempts,
        }

        try:
            await log_failure(message, extra)
        except Exception as e:
            logger.error(
                "Host logger failed while reporting a delivery failure",
                url=target.url,
                error=str(e),
                error_type=type(e).__name__
            )


async def push_to_target(
    target: TargetConfig,
    payload: EventRecord,
    log_failure: FailureLogger,
    *,
    client: Optional[httpx.AsyncClient] = None,
    sleep: Sleep = asyncio.sleep
) -> None:
    """
    Deliver one payload to one target with retry. Never raises.

    Args:
        target: Destination and retry policy
        payload: Event record, sent as the JSON body
        log_failure: Host logger called once if every attempt fails
        client: Optional shared httpx.AsyncClient
        sleep: Coroutine used for backoff waits
    """
    await PushDeliveryClient(client=client, sleep=sleep).deliver(target, payload, log_failure)

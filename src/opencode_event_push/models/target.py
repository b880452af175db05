"""
Module: target.py
Description: Target configuration models for the event push plugin.

Defines the validated shape of the JSON config document: a list of
delivery targets, each with an optional event allowlist, retry policy and
extra HTTP headers. Models are frozen; once loaded they are shared read-only
by every concurrent delivery.

Key Components:
- RetryConfig: Attempt count and base backoff delay
- TargetConfig: One delivery destination
- PluginConfig: Ordered list of targets, with merge support

Dependencies: pydantic
Author: Event Push Team
"""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from opencode_event_push.config.settings import Settings, settings

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class RetryConfig(BaseModel):
    """
    Retry policy for a single target.

    Attributes:
        attempts: Total tries including the first (default from settings, 3)
        delay_ms: Base backoff delay in milliseconds (default from settings, 500)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    attempts: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of attempts, including the first"
    )
    delay_ms: Optional[int] = Field(
        default=None,
        ge=0,
        alias="delayMs",
        description="Base delay in milliseconds for exponential backoff"
    )

    @property
    def effective_attempts(self) -> int:
        if self.attempts is None:
            return settings.default_retry_attempts
        return self.attempts

    @property
    def effective_delay_ms(self) -> int:
        if self.delay_ms is None:
            return settings.default_retry_delay_ms
        return self.delay_ms

    @property
    def base_delay_seconds(self) -> float:
        return self.effective_delay_ms / 1000

    def with_defaults(self, defaults: Settings) -> "RetryConfig":
        """Return a copy with unset fields filled from defaults."""
        return RetryConfig(
            attempts=self.attempts if self.attempts is not None else defaults.default_retry_attempts,
            delay_ms=self.delay_ms if self.delay_ms is not None else defaults.default_retry_delay_ms
        )


class TargetConfig(BaseModel):
    """
    One HTTP delivery destination.

    Attributes:
        url: Endpoint that receives POSTed events
        events: Allowlist of event types; empty means every event
        retry: Optional retry policy
        headers: Extra request headers, applied over Content-Type
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str = Field(..., min_length=1, description="URL to POST events to")
    events: Tuple[str, ...] = Field(
        default=(),
        description="Event types forwarded to this target (empty forwards all)"
    )
    retry: Optional[RetryConfig] = Field(default=None, description="Retry policy")
    headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra HTTP headers (e.g. Authorization, X-API-Key)"
    )

    @field_validator('events', mode='before')
    @classmethod
    def validate_events(cls, v):
        """Treat an explicit null allowlist the same as an absent one."""
        if v is None:
            return ()
        return v

    @property
    def retry_policy(self) -> RetryConfig:
        return self.retry if self.retry is not None else RetryConfig()

    def accepts(self, event_type: Optional[str]) -> bool:
        """Return True if events of this type should be pushed to the target."""
        if not self.events:
            return True
        return event_type in self.events

    def request_headers(self) -> Dict[str, str]:
        """
        Build the header set for a delivery request.

        Target headers win over the default Content-Type, regardless of
        the casing they are written in.
        """
        overridden = {name.lower() for name in self.headers}
        headers = {
            name: value for name, value in DEFAULT_HEADERS.items()
            if name.lower() not in overridden
        }
        headers.update(self.headers)
        return headers


class PluginConfig(BaseModel):
    """Ordered list of delivery targets."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    targets: Tuple[TargetConfig, ...] = Field(default=())

    @classmethod
    def empty(cls) -> "PluginConfig":
        return cls(targets=())

    @classmethod
    def merge(cls, *configs: Optional["PluginConfig"]) -> "PluginConfig":
        """
        Concatenate the targets of several configs, in argument order.

        None entries (absent config files) contribute nothing.
        """
        targets = []
        for config in configs:
            if config is not None:
                targets.extend(config.targets)
        return cls(targets=tuple(targets))

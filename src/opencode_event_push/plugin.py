"""
Module: plugin.py
Description: Entry point the host runtime activates.

Loads the global and project target configuration once and returns the
host hook table. With no targets configured the table is empty and the
host never calls back; otherwise it holds an "event" hook that dispatches
every inbound event.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from opencode_event_push.config.loader import load_config
from opencode_event_push.config.settings import Settings, settings as default_settings
from opencode_event_push.delivery.push import PushDeliveryClient
from opencode_event_push.handlers.events import EventDispatcher
from opencode_event_push.models.host import HostClient
from opencode_event_push.utils.logger import get_logger

logger = get_logger(__name__)


class HostLogger:
    """
    Failure logger that writes warn records through the host client.

    Records have the shape the host expects:
    {"service": ..., "level": "warn", "message": ..., "extra": ...}
    """

    def __init__(self, client: HostClient, service: str = default_settings.service_name):
        self.client = client
        self.service = service

    async def __call__(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        await self.client.app.log(
            body={
                "service": self.service,
                "level": "warn",
                "message": message,
                "extra": extra,
            }
        )


async def event_push_plugin(
    client: HostClient,
    directory: Optional[Union[str, Path]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    delivery: Optional[PushDeliveryClient] = None,
    settings: Settings = default_settings
) -> Dict[str, Any]:
    """
    Activate the plugin for one host session.

    Args:
        client: Host client, used only for failure logging
        directory: Project directory, or None to use the global config only
        environ: Variable lookup for {env:NAME} tokens, defaults to os.environ
        delivery: Delivery client shared by every dispatch
        settings: Settings supplying config locations and defaults

    Returns:
        {} when no targets are configured, else {"event": dispatcher}
    """
    config = load_config(directory, environ=environ, settings=settings)

    if not config.targets:
        logger.debug("No event push targets configured, plugin is a no-op")
        return {}

    logger.info(
        "Event push plugin activated",
        target_count=len(config.targets),
        directory=str(directory) if directory is not None else None
    )

    if delivery is None:
        delivery = PushDeliveryClient(settings=settings)

    dispatcher = EventDispatcher(
        config.targets,
        HostLogger(client, service=settings.service_name),
        delivery=delivery
    )
    return {"event": dispatcher}

"""Unicast endpoint: one responder per channel, publish returns its answer."""

from __future__ import annotations

from typing import Awaitable, Generic, Optional, Union

from ..registry import ChannelRegistry, default_registry
from ..types import Handler, P, R, Unsubscribe


class Sender(Generic[P, R]):
    """Request/response endpoint bound to a single channel id."""

    def __init__(self, channel_id: str, registry: ChannelRegistry):
        self.channel_id = channel_id
        self._registry = registry

    def subscribe(self, handler: Handler[P, R]) -> Unsubscribe:
        """Install ``handler`` as the sole responder, replacing any previous one."""
        return self._registry.subscribe(self.channel_id, handler, multicast=False)

    def publish(self, payload: P) -> Optional[Union[R, Awaitable[R]]]:
        """Invoke the current responder and return its result.

        Returns ``None`` when nobody is subscribed. An async responder's
        awaitable is returned as is; awaiting it is up to the caller.
        Exceptions raised by the responder propagate.
        """
        handler = self._registry.handler(self.channel_id)
        if handler is None:
            return None
        return handler(payload)

    @property
    def has_subscriber(self) -> bool:
        return self._registry.handler(self.channel_id) is not None

    def __repr__(self) -> str:
        return f"Sender({self.channel_id!r})"


def create_sender(
    channel_id: str, registry: Optional[ChannelRegistry] = None
) -> Sender:
    """Create a unicast endpoint on ``channel_id`` (default registry if omitted)."""
    return Sender(channel_id, registry or default_registry())


__all__ = ["Sender", "create_sender"]

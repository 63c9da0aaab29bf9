"""Channel registry shared by senders and notifiers.

The registry maps a channel id to either a single handler (unicast) or an
ordered list of handlers (multicast). Storage is type-erased: nothing checks
that every user of a channel id agrees on payload and result types, that is a
contract between callers. The typed façades live in ``mediator.channels``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .types import Handler, Unsubscribe

if TYPE_CHECKING:  # pragma: no cover
    from .channels.notifier import Notifier
    from .channels.sender import Sender
    from .services.config_schema import MediatorConfig

logger = logging.getLogger(__name__)


def _once(remove: Unsubscribe) -> Unsubscribe:
    done = False

    def unsubscribe() -> None:
        nonlocal done
        if done:
            return
        done = True
        remove()

    return unsubscribe


class ChannelRegistry:
    """Process-wide mapping from channel id to handler(s)."""

    def __init__(self, log_failures: bool = True):
        self.log_failures = log_failures
        self._unicast: Dict[str, Handler] = {}
        self._multicast: Dict[str, List[Handler]] = {}

    @classmethod
    def from_config(cls, config: MediatorConfig) -> ChannelRegistry:
        return cls(log_failures=config.notifier.log_failures)

    def subscribe(
        self, channel_id: str, handler: Handler, multicast: bool = False
    ) -> Unsubscribe:
        """Install ``handler`` on ``channel_id`` and return its unsubscribe handle.

        Unicast: the last subscriber wins. The handle only clears the channel
        while ``handler`` is still the installed one, so a replaced subscriber
        cannot remove its successor.

        Multicast: the handler is appended. The handle removes the first
        occurrence of this exact handler object.

        Each handle acts at most once, so calling it again never removes a
        later subscription of the same handler.
        """
        if multicast:
            self._multicast.setdefault(channel_id, []).append(handler)
            logger.debug(f"Multicast subscribe on {channel_id!r}")
            return _once(lambda: self._remove_multicast(channel_id, handler))

        if channel_id in self._unicast:
            logger.debug(f"Unicast handler replaced on {channel_id!r}")
        self._unicast[channel_id] = handler
        return _once(lambda: self._remove_unicast(channel_id, handler))

    def _remove_unicast(self, channel_id: str, handler: Handler) -> None:
        if self._unicast.get(channel_id) is handler:
            del self._unicast[channel_id]
            logger.debug(f"Unicast unsubscribe on {channel_id!r}")

    def _remove_multicast(self, channel_id: str, handler: Handler) -> None:
        handlers = self._multicast.get(channel_id)
        if not handlers:
            return
        # identity, not equality: two equal bound methods are distinct subscriptions
        for index, current in enumerate(handlers):
            if current is handler:
                del handlers[index]
                logger.debug(f"Multicast unsubscribe on {channel_id!r}")
                break
        if not handlers:
            del self._multicast[channel_id]

    # --- Lookups ---------------------------------------------------------
    def handler(self, channel_id: str) -> Optional[Handler]:
        return self._unicast.get(channel_id)

    def handlers(self, channel_id: str) -> Tuple[Handler, ...]:
        """Snapshot of the multicast handlers, in subscription order."""
        return tuple(self._multicast.get(channel_id, ()))

    def subscriber_count(self, channel_id: str) -> int:
        unicast = 1 if channel_id in self._unicast else 0
        return unicast + len(self._multicast.get(channel_id, ()))

    def channels(self) -> List[str]:
        seen = dict.fromkeys(self._unicast)
        seen.update(dict.fromkeys(self._multicast))
        return list(seen)

    def clear(self) -> None:
        self._unicast.clear()
        self._multicast.clear()

    # --- Façade factories ------------------------------------------------
    def create_sender(self, channel_id: str) -> Sender[Any, Any]:
        from .channels.sender import Sender

        return Sender(channel_id, self)

    def create_notifier(self, channel_id: str) -> Notifier[Any]:
        from .channels.notifier import Notifier

        return Notifier(channel_id, self)


_default: Optional[ChannelRegistry] = None


def default_registry() -> ChannelRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default
    if _default is None:
        _default = ChannelRegistry()
    return _default


__all__ = ["ChannelRegistry", "default_registry"]

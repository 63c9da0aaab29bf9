"""Multicast endpoint: every subscriber is notified, failures are isolated."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Generator, Generic, List, Optional, Tuple

from ..registry import ChannelRegistry, default_registry
from ..types import Handler, P, Unsubscribe

logger = logging.getLogger(__name__)


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class Settlement:
    """Completion of one ``Notifier.publish`` call.

    Awaiting it waits until every asynchronous handler has finished, whatever
    the outcome. Dropping it is fine: handlers were already started.
    """

    def __init__(
        self,
        notifier: Notifier,
        scheduled: List[asyncio.Future],
        deferred: List[Tuple[Handler, Awaitable[Any]]],
    ):
        self._notifier = notifier
        self._scheduled = scheduled
        self._deferred = deferred

    @property
    def pending(self) -> int:
        return len(self._scheduled) + len(self._deferred)

    async def wait(self) -> None:
        # published outside an event loop: start the leftovers now
        while self._deferred:
            handler, awaitable = self._deferred.pop(0)
            self._scheduled.append(self._notifier._schedule(handler, awaitable))
        if self._scheduled:
            await asyncio.gather(*self._scheduled, return_exceptions=True)

    def __await__(self) -> Generator[Any, None, None]:
        return self.wait().__await__()


class Notifier(Generic[P]):
    """Fire-and-forget endpoint bound to a single channel id."""

    def __init__(self, channel_id: str, registry: ChannelRegistry):
        self.channel_id = channel_id
        self._registry = registry

    def subscribe(self, handler: Handler[P, None]) -> Unsubscribe:
        """Append ``handler``; the returned handle removes only this subscription."""
        return self._registry.subscribe(self.channel_id, handler, multicast=True)

    def publish(self, payload: P) -> Settlement:
        """Notify every subscriber now and return an awaitable settlement.

        Handlers are called in subscription order during this call, so
        synchronous subscribers have run by the time it returns. Awaitable
        results are scheduled on the running loop right away (or when the
        settlement is awaited, if there is no loop yet). A settlement
        published outside a loop must be awaited for its async handlers to
        run at all. A failing handler
        never stops the others and is never re-raised to the publisher.
        """
        loop = _running_loop()
        scheduled: List[asyncio.Future] = []
        deferred: List[Tuple[Handler, Awaitable[Any]]] = []
        try:
            for handler in self._registry.handlers(self.channel_id):
                try:
                    result = handler(payload)
                except Exception as e:
                    self._report(handler, e)
                    continue
                if not inspect.isawaitable(result):
                    continue
                if loop is None:
                    deferred.append((handler, result))
                else:
                    scheduled.append(self._schedule(handler, result))
        except BaseException:
            for future in scheduled:
                future.cancel()
            for _, awaitable in deferred:
                if inspect.iscoroutine(awaitable):
                    awaitable.close()
            raise
        return Settlement(self, scheduled, deferred)

    def _schedule(
        self, handler: Handler, awaitable: Awaitable[Any]
    ) -> asyncio.Future:
        future = asyncio.ensure_future(awaitable)

        def done(f: asyncio.Future) -> None:
            if f.cancelled():
                return
            error = f.exception()
            if error is not None:
                self._report(handler, error)

        future.add_done_callback(done)
        return future

    def _report(self, handler: Handler, error: BaseException) -> None:
        if not self._registry.log_failures:
            return
        name = getattr(handler, "__qualname__", None) or repr(handler)
        logger.warning(
            f"Notifier {self.channel_id!r}: {name} failed: {error!r}",
            exc_info=error,
        )

    @property
    def subscriber_count(self) -> int:
        return len(self._registry.handlers(self.channel_id))

    def __repr__(self) -> str:
        return f"Notifier({self.channel_id!r})"


def create_notifier(
    channel_id: str, registry: Optional[ChannelRegistry] = None
) -> Notifier:
    """Create a multicast endpoint on ``channel_id`` (default registry if omitted)."""
    return Notifier(channel_id, registry or default_registry())


__all__ = ["Notifier", "Settlement", "create_notifier"]

"""Helpers for combining subscriptions."""

from __future__ import annotations

from .types import Unsubscribe


def merge_subscriptions(*unsubscribes: Unsubscribe) -> Unsubscribe:
    """Chain several unsubscribe handles into one, called in the given order."""

    def unsubscribe() -> None:
        for unsub in unsubscribes:
            unsub()

    return unsubscribe


__all__ = ["merge_subscriptions"]

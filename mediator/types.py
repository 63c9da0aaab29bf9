"""Handler and subscription type contracts."""

from __future__ import annotations

from typing import Awaitable, Callable, TypeVar, Union

P = TypeVar("P")
R = TypeVar("R")

# A handler may answer synchronously or hand back something to await.
Handler = Callable[[P], Union[R, Awaitable[R]]]
Unsubscribe = Callable[[], None]

__all__ = ["Handler", "Unsubscribe", "P", "R"]

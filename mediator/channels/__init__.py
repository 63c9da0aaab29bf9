"""Typed unicast and multicast endpoints over a channel registry."""

from .notifier import Notifier, Settlement, create_notifier
from .sender import Sender, create_sender

__all__ = ["Notifier", "Settlement", "create_notifier", "Sender", "create_sender"]

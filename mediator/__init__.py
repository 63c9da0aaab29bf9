"""In-process publish/subscribe mediator.

Two delivery modes share one channel registry:

- ``create_sender``: unicast, a single responder whose result ``publish``
  returns (``None`` when nobody listens);
- ``create_notifier``: multicast, ``publish(...)`` notifies every subscriber
  at once; awaiting its result waits for all of them, ignoring individual
  failures.

Example::

    sender = create_sender("parse")
    unsubscribe = sender.subscribe(int)
    assert sender.publish("123") == 123
    unsubscribe()
    assert sender.publish("123") is None
"""

from .channels import Notifier, Sender, Settlement, create_notifier, create_sender
from .registry import ChannelRegistry, default_registry
from .subscriptions import merge_subscriptions
from .types import Handler, Unsubscribe

__all__ = [
    "ChannelRegistry",
    "default_registry",
    "Sender",
    "Notifier",
    "Settlement",
    "create_sender",
    "create_notifier",
    "merge_subscriptions",
    "Handler",
    "Unsubscribe",
]

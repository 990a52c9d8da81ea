"""
One-Shot Subscriptions

A pub/sub listener that fires at most once and then detaches itself.
"""

from __future__ import annotations
from typing import Any, Callable, Optional

from pubsub import pub


class OneShotSubscription:
    """Listen for a single message about one window.

    The subscription is dropped either on the first matching message or when
    cancel() is called, whichever comes first. Pypubsub only holds a weak
    reference to the listener, so the owner must keep this object alive
    while it is pending.
    """

    def __init__(
        self,
        topic: str,
        window: Any,
        callback: Callable[[Any], None],
    ):
        """Subscribe immediately.

        Args:
            topic: Topic to listen on; messages carry a ``window`` argument
            window: Only messages about this window fire the callback.
                Windows are matched on ``object_id``, since a host may hand
                out a fresh wrapper object for the same window on every
                signal.
            callback: Called with the message's window when it arrives
        """
        self.topic = topic
        self.object_id = window.object_id
        self._callback: Optional[Callable[[Any], None]] = callback
        pub.subscribe(self._on_message, topic)

    @property
    def active(self) -> bool:
        """Whether the subscription is still waiting for its message."""
        return self._callback is not None

    def cancel(self):
        """Detach without firing. Safe to call more than once."""
        if self._callback is None:
            return
        self._callback = None
        pub.unsubscribe(self._on_message, self.topic)

    def _on_message(self, window):
        if self._callback is None or window.object_id != self.object_id:
            return
        callback = self._callback
        self.cancel()
        callback(window)

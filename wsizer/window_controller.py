"""
Window Controller

Handles the size cycling and centering commands.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Sequence, TYPE_CHECKING

from .geometry import Area, MaximizeFlags, Size
from .message import format_size_message
from .oneshot import OneShotSubscription
from .sizing import NoFittingCandidate, center, cycle, fitting_candidates

if TYPE_CHECKING:
    from .host import HostWindow, ScaleProvider


class SizeController:
    """Executes window sizing commands.

    This component subscribes to command events, computes the target frame
    from the window's live geometry and asks the host to apply it. Once the
    host reports the resize, the new size is handed to ``notify``. Requests
    that keep the size (centering) are reported at once.

    Responsibilities:
    - CMD_CYCLE_WINDOW_SIZES: Resize to the next/previous preferred size
    - CMD_CENTER_WINDOW: Center the window on its work area
    - WINDOW_UNMANAGED: Drop the window's pending resize listener
    """

    def __init__(
        self,
        bus,
        scale_provider: "ScaleProvider",
        sizes: Optional[Sequence[Size]],
        notify: Callable[[str], None],
    ):
        """Initialize size controller.

        Args:
            bus: Event bus instance (Pypubsub)
            scale_provider: Source of the current display scale factor
            sizes: Validated preferred sizes, or None if cycling is disabled
            notify: Called with the message text after a resize completes
        """
        self.bus = bus
        self.scale_provider = scale_provider
        self.sizes: List[Size] = list(sizes) if sizes else []
        self.notify = notify

        # window object_id -> subscription waiting for that window's resize
        self._pending: Dict[int, OneShotSubscription] = {}

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to window command events."""
        from pubsub import pub
        from . import topics

        pub.subscribe(self._on_cycle_window_sizes, topics.CMD_CYCLE_WINDOW_SIZES)
        pub.subscribe(self._on_center_window, topics.CMD_CENTER_WINDOW)
        pub.subscribe(self._on_window_unmanaged, topics.WINDOW_UNMANAGED)

    def shutdown(self):
        """Unsubscribe from commands and drop pending resize listeners."""
        from pubsub import pub
        from . import topics

        pub.unsubscribe(self._on_cycle_window_sizes, topics.CMD_CYCLE_WINDOW_SIZES)
        pub.unsubscribe(self._on_center_window, topics.CMD_CENTER_WINDOW)
        pub.unsubscribe(self._on_window_unmanaged, topics.WINDOW_UNMANAGED)
        for subscription in self._pending.values():
            subscription.cancel()
        self._pending.clear()

    def _on_cycle_window_sizes(self, window: "HostWindow", backward: bool = False):
        """Handle CMD_CYCLE_WINDOW_SIZES command."""
        try:
            self.cycle_window_sizes(window, backward)
        except NoFittingCandidate as e:
            print(f"SizeController: Not resizing window {window.object_id}: {e}")

    def _on_center_window(self, window: "HostWindow"):
        """Handle CMD_CENTER_WINDOW command."""
        self.center_window(window)

    def _on_window_unmanaged(self, window: "HostWindow"):
        """Handle WINDOW_UNMANAGED event."""
        self.forget_window(window)

    def cycle_window_sizes(self, window: "HostWindow", backward: bool = False):
        """Resize a window to the size after the one nearest its current size.

        Args:
            window: The window to resize
            backward: Step to the previous size instead

        Raises:
            NoFittingCandidate: if no size fits; the window is left untouched
        """
        work_area = window.get_work_area_current_monitor()
        scale_factor = self.scale_provider.scale_factor

        # Bail out before touching the window if nothing fits
        if not fitting_candidates(self.sizes, work_area, scale_factor):
            raise NoFittingCandidate(work_area, scale_factor)

        self._unmaximize(window)
        outer_rect = window.get_frame_rect()

        result = cycle(outer_rect, work_area, self.sizes, scale_factor, backward)
        self.move_resize(window, Area(result.x, result.y, result.width, result.height))

    def center_window(self, window: "HostWindow"):
        """Center a window on its work area without resizing it."""
        self._unmaximize(window)

        work_area = window.get_work_area_current_monitor()
        outer_rect = window.get_frame_rect()

        x, y = center(outer_rect, work_area)
        self.move_resize(window, Area(x, y, outer_rect.width, outer_rect.height))

    def move_resize(
        self, window: "HostWindow", frame: Area
    ) -> Optional[OneShotSubscription]:
        """Ask the host to apply a frame and notify with the resulting size.

        A still-pending notification for the same window is cancelled first,
        so only the latest request is reported. If the frame keeps the
        window's current size the host sends no size-changed signal, so the
        size is reported right away instead of waiting for one.

        Returns:
            The subscription waiting for the host's resize confirmation, or
            None if the size was reported immediately
        """
        from . import topics

        self.forget_window(window)

        current = window.get_frame_rect()
        if (current.width, current.height) == (frame.width, frame.height):
            window.move_resize_frame(True, frame.x, frame.y, frame.width, frame.height)
            self._notify_size(window)
            return None

        subscription = OneShotSubscription(
            topics.WINDOW_SIZE_CHANGED, window, self._on_window_resized
        )
        self._pending[window.object_id] = subscription

        window.move_resize_frame(True, frame.x, frame.y, frame.width, frame.height)
        return subscription

    def forget_window(self, window: "HostWindow"):
        """Drop the pending resize notification for a window, if any."""
        subscription = self._pending.pop(window.object_id, None)
        if subscription is not None:
            subscription.cancel()

    @property
    def pending_windows(self) -> List[int]:
        """Object ids of windows with a resize notification outstanding."""
        return list(self._pending)

    def _on_window_resized(self, window: "HostWindow"):
        self._pending.pop(window.object_id, None)
        self._notify_size(window)

    def _notify_size(self, window: "HostWindow"):
        """Report the size the host actually gave the window."""
        rect = window.get_frame_rect()
        message = format_size_message(
            rect.width, rect.height, self.scale_provider.scale_factor
        )
        self.notify(message)

    def _unmaximize(self, window: "HostWindow"):
        if window.get_maximized() != MaximizeFlags.NONE:
            window.unmaximize(MaximizeFlags.BOTH)

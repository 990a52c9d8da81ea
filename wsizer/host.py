"""
Host Shell Interfaces

Abstract collaborators provided by the desktop shell. wsizer never talks to
a compositor directly; a host adapter implements these classes and hands
them to SizerExtension.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import IntFlag
from typing import Callable, List, TYPE_CHECKING

if TYPE_CHECKING:
    import cairo
    from .geometry import Area, MaximizeFlags


class KeyBindingFlags(IntFlag):
    """Flags passed along when registering a key binding."""

    NONE = 0
    PER_WINDOW = 1  # Only active while a window has focus
    IS_REVERSED = 2  # Binding reports itself as reversed when fired


class HostWindow(ABC):
    """A window owned by the host shell."""

    object_id: int

    @abstractmethod
    def get_frame_rect(self) -> "Area":
        """Current frame rect, decorations included."""
        pass

    @abstractmethod
    def get_work_area_current_monitor(self) -> "Area":
        """Usable area of the monitor the window is on."""
        pass

    @abstractmethod
    def get_maximized(self) -> "MaximizeFlags":
        pass

    @abstractmethod
    def unmaximize(self, flags: "MaximizeFlags"):
        pass

    @abstractmethod
    def move_resize_frame(self, user_op: bool, x: int, y: int, width: int, height: int):
        """
        Move and resize the frame in one step.

        Completes asynchronously; the host reports completion through
        SizerExtension.window_size_changed().
        """
        pass


class ScaleProvider(ABC):
    """Pixel scale of the active output."""

    @property
    @abstractmethod
    def scale_factor(self) -> float:
        pass


class BindingDescriptor(ABC):
    """The key binding that triggered a handler."""

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def is_reversed(self) -> bool:
        pass

    @abstractmethod
    def is_per_window(self) -> bool:
        pass


# handler(display, window, event, binding)
KeyBindingHandler = Callable[[object, "HostWindow", object, BindingDescriptor], None]


class SettingsStore(ABC):
    """Read access to the user's configured accelerators."""

    @abstractmethod
    def get_strv(self, key: str) -> List[str]:
        pass


class KeyBindingRegistrar(ABC):
    """Global shortcut registration on the host."""

    @abstractmethod
    def add_keybinding(
        self,
        name: str,
        settings: SettingsStore,
        flags: KeyBindingFlags,
        handler: KeyBindingHandler,
    ) -> bool:
        """Grab the accelerators stored under ``name`` in ``settings``.

        Returns:
            True if the binding was registered
        """
        pass

    @abstractmethod
    def remove_keybinding(self, name: str):
        pass


class MessageSurface(ABC):
    """Overlay that can show one rendered label above all windows."""

    @abstractmethod
    def primary_monitor(self) -> "Area":
        pass

    @abstractmethod
    def show_label(self, image: "cairo.ImageSurface", x: int, y: int):
        """Show (or replace) the label image at the given position."""
        pass

    @abstractmethod
    def set_label_opacity(self, opacity: int):
        """Set label opacity, 0-255."""
        pass

    @abstractmethod
    def destroy_label(self):
        pass

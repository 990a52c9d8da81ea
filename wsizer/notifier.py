"""
Size Message Label

Shows a short text (the new window size) centered on the primary monitor
and fades it out. At most one label exists; a new message replaces the
current one and restarts the fade.
"""

from __future__ import annotations
import math
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Tuple, TYPE_CHECKING

import cairo

if TYPE_CHECKING:
    from .host import MessageSurface


@dataclass
class LabelStyle:
    """Styling for the message label."""

    font_family: str = "sans-serif"
    font_size: int = 24
    padding: int = 16
    text_color: Tuple[int, int, int, int] = (255, 255, 255, 255)
    background_color: Tuple[int, int, int, int] = (0, 0, 0, 179)
    corner_radius: int = 8


class LabelRenderer:
    """Renders message text into an ARGB32 image with a rounded backdrop."""

    def __init__(self, style: LabelStyle):
        self.style = style

    def measure(self, text: str) -> Tuple[int, int]:
        """Size of the label image needed for ``text``."""
        scratch = cairo.ImageSurface(cairo.FORMAT_ARGB32, 1, 1)
        ctx = cairo.Context(scratch)
        self._select_font(ctx)
        extents = ctx.text_extents(text)
        font_extents = ctx.font_extents()

        width = math.ceil(extents.x_advance) + 2 * self.style.padding
        height = math.ceil(font_extents[2]) + 2 * self.style.padding
        return width, height

    def render(self, text: str) -> cairo.ImageSurface:
        """Render the label.

        Args:
            text: Message to draw

        Returns:
            Image surface sized to fit the text plus padding
        """
        width, height = self.measure(text)
        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
        ctx = cairo.Context(surface)

        # Backdrop
        self._rounded_rect(ctx, width, height, self.style.corner_radius)
        self._set_color(ctx, self.style.background_color)
        ctx.fill()

        # Text, baseline placed so the font's ascent sits inside the padding
        self._select_font(ctx)
        ascent = ctx.font_extents()[0]
        self._set_color(ctx, self.style.text_color)
        ctx.move_to(self.style.padding, self.style.padding + ascent)
        ctx.show_text(text)

        surface.flush()
        return surface

    def _select_font(self, ctx: cairo.Context):
        ctx.select_font_face(
            self.style.font_family, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD
        )
        ctx.set_font_size(self.style.font_size)

    def _rounded_rect(self, ctx: cairo.Context, width: int, height: int, radius: int):
        radius = min(radius, width // 2, height // 2)
        ctx.new_sub_path()
        ctx.arc(width - radius, radius, radius, -math.pi / 2, 0)
        ctx.arc(width - radius, height - radius, radius, 0, math.pi / 2)
        ctx.arc(radius, height - radius, radius, math.pi / 2, math.pi)
        ctx.arc(radius, radius, radius, math.pi, 3 * math.pi / 2)
        ctx.close_path()

    def _set_color(self, ctx: cairo.Context, color: Tuple[int, int, int, int]):
        """Set Cairo color from RGBA tuple (values 0-255)."""
        r, g, b, a = color
        ctx.set_source_rgba(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def ease_out_quad(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


class FadeAnimation:
    """Opacity ramp from fully opaque to transparent over a fixed duration."""

    def __init__(self, start: float, duration_ms: int):
        self.start = start
        self.duration = duration_ms / 1000.0

    def progress(self, now: float) -> float:
        """Fraction of the fade completed, clamped to [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, (now - self.start) / self.duration))

    def opacity(self, now: float) -> int:
        return round(255 * (1 - ease_out_quad(self.progress(now))))

    def is_complete(self, now: float) -> bool:
        return self.progress(now) >= 1.0


class LabelState(Enum):
    """Lifecycle of the message label."""

    ABSENT = auto()  # No label on screen
    FADING = auto()  # Label visible, fade animation running


class Notifier:
    """Owns the single message label and its fade animation.

    The host drives the fade by calling tick() from its frame clock.
    Transitions:
    - ABSENT -> FADING: flash()
    - FADING -> FADING: flash() replaces the running fade with a new one
    - FADING -> ABSENT: tick() after the fade completes, or destroy()
    """

    def __init__(
        self,
        surface: "MessageSurface",
        style: Optional[LabelStyle] = None,
        fade_time_ms: int = 2000,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize notifier.

        Args:
            surface: Host overlay that displays the label
            style: Label styling
            fade_time_ms: Duration of the fade-out
            clock: Monotonic time source in seconds
        """
        self.surface = surface
        self.renderer = LabelRenderer(style or LabelStyle())
        self.fade_time_ms = fade_time_ms
        self._clock = clock

        self.state = LabelState.ABSENT
        self.text: Optional[str] = None
        self._animation: Optional[FadeAnimation] = None

    def flash(self, text: str):
        """Show ``text`` at full opacity and start fading it out."""
        image = self.renderer.render(text)
        monitor = self.surface.primary_monitor()
        x = monitor.x + math.floor(monitor.width / 2 - image.get_width() / 2)
        y = monitor.y + math.floor(monitor.height / 2 - image.get_height() / 2)

        self.surface.show_label(image, x, y)
        self.surface.set_label_opacity(255)

        self.text = text
        self._animation = FadeAnimation(self._clock(), self.fade_time_ms)
        self.state = LabelState.FADING

    def tick(self):
        """Advance the fade; removes the label once it is fully transparent."""
        if self.state is not LabelState.FADING:
            return

        now = self._clock()
        if self._animation.is_complete(now):
            self._hide()
        else:
            self.surface.set_label_opacity(self._animation.opacity(now))

    def destroy(self):
        """Remove the label immediately."""
        if self.state is LabelState.FADING:
            self._hide()

    def _hide(self):
        self.surface.destroy_label()
        self.state = LabelState.ABSENT
        self.text = None
        self._animation = None

"""
Unit tests for the message label.
"""

import pytest
from wsizer.geometry import Area
from wsizer.notifier import (
    FadeAnimation,
    LabelRenderer,
    LabelState,
    LabelStyle,
    Notifier,
    ease_out_quad,
)


@pytest.mark.unit
class TestFadeAnimation:
    """Test the opacity ramp."""

    def test_starts_opaque(self):
        fade = FadeAnimation(start=10.0, duration_ms=2000)

        assert fade.opacity(10.0) == 255
        assert not fade.is_complete(10.0)

    def test_ends_transparent(self):
        fade = FadeAnimation(start=10.0, duration_ms=2000)

        assert fade.opacity(12.0) == 0
        assert fade.is_complete(12.0)

    def test_eases_out(self):
        fade = FadeAnimation(start=0.0, duration_ms=1000)

        # Quadratic ease-out has faded 75% at the halfway point
        assert fade.opacity(0.5) == round(255 * 0.25)

    def test_zero_duration_is_complete(self):
        assert FadeAnimation(start=0.0, duration_ms=0).is_complete(0.0)

    def test_ease_out_quad_endpoints(self):
        assert ease_out_quad(0) == 0
        assert ease_out_quad(1) == 1


@pytest.mark.unit
class TestLabelRenderer:
    """Test cairo rendering of the label."""

    def test_image_fits_text_and_padding(self):
        renderer = LabelRenderer(LabelStyle(font_size=20, padding=10))

        image = renderer.render("1600×900")

        assert image.get_width() > 20
        assert image.get_height() > 20
        assert (image.get_width(), image.get_height()) == renderer.measure("1600×900")

    def test_longer_text_is_wider(self):
        renderer = LabelRenderer(LabelStyle())

        short = renderer.measure("1280×720")
        long = renderer.measure("1280×900 (12.80:9)")

        assert long[0] > short[0]
        assert long[1] == short[1]


@pytest.mark.unit
class TestNotifier:
    """Test label lifecycle."""

    def test_starts_absent(self, surface, clock):
        notifier = Notifier(surface, clock=clock)

        assert notifier.state is LabelState.ABSENT
        assert notifier.text is None

    def test_flash_shows_label(self, surface, clock):
        notifier = Notifier(surface, clock=clock)

        notifier.flash("1600×900")

        assert notifier.state is LabelState.FADING
        assert notifier.text == "1600×900"
        assert surface.shown == 1
        assert surface.opacity == 255

    def test_label_centered_on_primary_monitor(self, clock):
        from conftest import MockSurface

        surface = MockSurface(monitor=Area(1920, 0, 2560, 1440))
        notifier = Notifier(surface, clock=clock)

        notifier.flash("1600×900")

        width, height = surface.image.get_width(), surface.image.get_height()
        x, y = surface.position
        assert x == 1920 + (2560 - width) // 2
        assert y == (1440 - height) // 2

    def test_tick_fades(self, surface, clock):
        notifier = Notifier(surface, fade_time_ms=2000, clock=clock)
        notifier.flash("1600×900")

        clock.advance(1.0)
        notifier.tick()

        assert 0 < surface.opacity < 255
        assert notifier.state is LabelState.FADING

    def test_label_removed_after_fade(self, surface, clock):
        notifier = Notifier(surface, fade_time_ms=2000, clock=clock)
        notifier.flash("1600×900")

        clock.advance(2.0)
        notifier.tick()

        assert notifier.state is LabelState.ABSENT
        assert surface.destroyed == 1
        assert surface.image is None

    def test_new_message_restarts_fade(self, surface, clock):
        notifier = Notifier(surface, fade_time_ms=2000, clock=clock)
        notifier.flash("1280×720")
        first = notifier._animation

        clock.advance(1.5)
        notifier.flash("1280×900 (12.80:9)")
        clock.advance(1.0)
        notifier.tick()

        assert notifier._animation is not first
        assert notifier._animation.start == 101.5
        assert notifier.text == "1280×900 (12.80:9)"
        assert notifier.state is LabelState.FADING
        assert surface.destroyed == 0
        assert surface.shown == 2

    def test_label_recreated_after_removal(self, surface, clock):
        notifier = Notifier(surface, fade_time_ms=100, clock=clock)
        notifier.flash("1280×720")
        clock.advance(1.0)
        notifier.tick()

        notifier.flash("1440×900 (14.40:9)")

        assert notifier.state is LabelState.FADING
        assert surface.shown == 2

    def test_tick_without_label_does_nothing(self, surface, clock):
        notifier = Notifier(surface, clock=clock)

        notifier.tick()

        assert surface.opacity is None
        assert surface.destroyed == 0

    def test_destroy(self, surface, clock):
        notifier = Notifier(surface, clock=clock)
        notifier.flash("1600×900")

        notifier.destroy()
        notifier.destroy()

        assert notifier.state is LabelState.ABSENT
        assert surface.destroyed == 1

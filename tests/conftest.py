"""
Shared pytest fixtures for wsizer tests.
"""

import pytest
from pubsub import pub

from wsizer.geometry import Area, MaximizeFlags, Size
from wsizer.host import (
    BindingDescriptor,
    HostWindow,
    KeyBindingRegistrar,
    MessageSurface,
    ScaleProvider,
)


SCENARIO_SIZES = [Size(1280, 720), Size(1280, 900), Size(1440, 900), Size(1600, 900)]


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests that need no host shell")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop every listener left on the global bus after each test."""
    yield
    pub.unsubAll()


class MockWindow(HostWindow):
    """Host window that applies move/resize requests immediately."""

    def __init__(
        self,
        object_id=1,
        frame=None,
        work_area=None,
        maximized=MaximizeFlags.NONE,
        height_step=1,
    ):
        self.object_id = object_id
        self.frame = frame or Area(100, 100, 800, 600)
        self.work_area = work_area or Area(0, 0, 1920, 1080)
        self.maximized = maximized
        self.height_step = height_step  # Emulates cell-size snapping
        self.calls = []

    def get_frame_rect(self):
        return Area(self.frame.x, self.frame.y, self.frame.width, self.frame.height)

    def get_work_area_current_monitor(self):
        return self.work_area

    def get_maximized(self):
        return self.maximized

    def unmaximize(self, flags):
        self.calls.append(("unmaximize", flags))
        self.maximized = MaximizeFlags.NONE

    def move_resize_frame(self, user_op, x, y, width, height):
        self.calls.append(("move_resize_frame", x, y, width, height))
        height -= height % self.height_step
        self.frame = Area(x, y, width, height)


class MockScale(ScaleProvider):
    def __init__(self, scale_factor=1):
        self._scale_factor = scale_factor

    @property
    def scale_factor(self):
        return self._scale_factor


class MockBinding(BindingDescriptor):
    def __init__(self, name="cycle-window-sizes", reversed=False, per_window=True):
        self.name = name
        self.reversed = reversed
        self.per_window = per_window

    def get_name(self):
        return self.name

    def is_reversed(self):
        return self.reversed

    def is_per_window(self):
        return self.per_window


class MockRegistrar(KeyBindingRegistrar):
    """Records bindings; ``refuse`` lists names the host rejects."""

    def __init__(self, refuse=()):
        self.handlers = {}
        self.flags = {}
        self.removed = []
        self.refuse = set(refuse)

    def add_keybinding(self, name, settings, flags, handler):
        if name in self.refuse:
            return False
        self.handlers[name] = handler
        self.flags[name] = flags
        return True

    def remove_keybinding(self, name):
        self.removed.append(name)
        self.handlers.pop(name, None)

    def fire(self, name, window, reversed=False):
        """Invoke a handler the way the host would."""
        binding = MockBinding(name=name, reversed=reversed)
        self.handlers[name](object(), window, object(), binding)


class MockSurface(MessageSurface):
    def __init__(self, monitor=None):
        self.monitor = monitor or Area(0, 0, 1920, 1080)
        self.image = None
        self.position = None
        self.opacity = None
        self.shown = 0
        self.destroyed = 0

    def primary_monitor(self):
        return self.monitor

    def show_label(self, image, x, y):
        self.image = image
        self.position = (x, y)
        self.shown += 1

    def set_label_opacity(self, opacity):
        self.opacity = opacity

    def destroy_label(self):
        self.image = None
        self.destroyed += 1


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def mock_window():
    """Factory fixture for creating mock window objects."""
    return MockWindow


@pytest.fixture
def scale():
    return MockScale(1)


@pytest.fixture
def registrar():
    return MockRegistrar()


@pytest.fixture
def surface():
    return MockSurface()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sizes():
    """Preferred sizes used across the scenario tests."""
    return list(SCENARIO_SIZES)


@pytest.fixture
def standard_area():
    """Standard 1920x1080 work area."""
    return Area(0, 0, 1920, 1080)


@pytest.fixture
def large_area():
    """2000x1200 work area that fits every scenario size."""
    return Area(0, 0, 2000, 1200)

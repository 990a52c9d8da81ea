"""
Configuration

Preferred sizes, key binding accelerators and label styling, plus the
validation applied before any action is registered with the host.

Accelerator strings are passed to the host untouched; only the host knows
its keysym and modifier names, so it alone decides whether one is valid.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from .geometry import Size
from .host import SettingsStore


class ConfigurationError(ValueError):
    """Invalid size list or label colour."""


# Action names, also the settings keys holding their accelerators
ACTION_CYCLE = "cycle-window-sizes"
ACTION_CYCLE_BACKWARD = "cycle-window-sizes-backward"
ACTION_CENTER = "center-window"

DEFAULT_SIZES: Tuple[Size, ...] = (
    Size(1280, 720),
    Size(1280, 900),  # Firefox default
    Size(1440, 900),
    Size(1600, 900),
)

DEFAULT_KEYBINDINGS: Dict[str, List[str]] = {
    ACTION_CYCLE: ["<Control><Alt>s"],
    ACTION_CYCLE_BACKWARD: ["<Shift><Control><Alt>s"],
    ACTION_CENTER: ["<Control><Alt>c"],
}

MESSAGE_FADE_TIME = 2000  # ms


def parse_color(color: str | Tuple[int, int, int, int]) -> Tuple[int, int, int, int]:
    """
    Normalize a label colour to an (R, G, B, A) tuple of 0-255 channels.

    Strings are ``#RRGGBB`` (opaque) or ``#RRGGBBAA``; the leading ``#`` is
    optional. Tuples must already hold four channels in range.

    Raises:
        ConfigurationError: for any other shape or an out-of-range channel
    """
    if isinstance(color, str):
        digits = color.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ConfigurationError(
                f"Colour {color!r} must be #RRGGBB or #RRGGBBAA"
            )
        try:
            channels = tuple(bytes.fromhex(digits))
        except ValueError:
            raise ConfigurationError(f"Colour {color!r} is not hexadecimal") from None
        return channels if len(channels) == 4 else channels + (0xFF,)

    if isinstance(color, (tuple, list)) and len(color) == 4:
        if all(isinstance(c, int) and 0 <= c <= 0xFF for c in color):
            return tuple(color)
        raise ConfigurationError(f"Colour channels {color!r} must be 0-255")

    raise ConfigurationError(f"Unsupported colour value {color!r}")


def validate_sizes(sizes: Iterable) -> List[Size]:
    """
    Check the configured size list and normalize it to Size objects.

    Accepts Size objects or (width, height) pairs.

    Raises:
        ConfigurationError: if the list is empty or an entry is not a pair
            of positive integers
    """
    result = []
    for entry in sizes:
        if isinstance(entry, Size):
            width, height = entry.width, entry.height
        else:
            try:
                width, height = entry
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"Size entry {entry!r} is not a (width, height) pair"
                ) from None

        for value in (width, height):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(
                    f"Size entry {entry!r} must hold positive integers"
                )
        result.append(Size(width, height))

    if not result:
        raise ConfigurationError("No window sizes configured")
    return result


def parse_sizes(text: str) -> List[Size]:
    """Parse ``"1280x720,1600x900"`` into a validated size list."""
    pairs = []
    for item in filter(None, (part.strip() for part in text.split(","))):
        width, sep, height = item.lower().partition("x")
        if not sep or not width.isdigit() or not height.isdigit():
            raise ConfigurationError(f"Invalid size {item!r}. Use WIDTHxHEIGHT")
        pairs.append((int(width), int(height)))
    return validate_sizes(pairs)


class DictSettings(SettingsStore):
    """Settings store backed by a plain dictionary."""

    def __init__(self, values: Dict[str, List[str]]):
        self._values = {key: list(accels) for key, accels in values.items()}

    def get_strv(self, key: str) -> List[str]:
        return list(self._values.get(key, []))


@dataclass
class SizerConfig:
    """wsizer configuration."""

    # Preferred sizes, unscaled, in cycle order
    sizes: Sequence = DEFAULT_SIZES

    # Action name -> accelerators, used when the host has no settings store
    keybindings: Dict[str, List[str]] = field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_KEYBINDINGS.items()}
    )

    # Size message label
    fade_time_ms: int = MESSAGE_FADE_TIME
    font_family: str = "sans-serif"
    font_size: int = 24
    padding: int = 16
    text_color: str | Tuple[int, int, int, int] = "#ffffff"
    background_color: str | Tuple[int, int, int, int] = "#000000b3"

    def __post_init__(self):
        """Parse color strings into tuples."""
        self.text_color = parse_color(self.text_color)
        self.background_color = parse_color(self.background_color)

    def settings(self) -> DictSettings:
        """Settings store holding the configured accelerators."""
        return DictSettings(self.keybindings)

    @classmethod
    def from_env(cls, **overrides) -> "SizerConfig":
        """Build a config, taking sizes from WSIZER_SIZES when set."""
        env_sizes = os.getenv("WSIZER_SIZES")
        if env_sizes and "sizes" not in overrides:
            overrides["sizes"] = parse_sizes(env_sizes)
        return cls(**overrides)

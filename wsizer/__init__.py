"""
wsizer - window size cycling for desktop shells

Cycles the focused window through a list of preferred 16:9-family sizes and
centers windows on their monitor's work area, driven by the shell's global
key bindings.

This package provides:
- The sizing core (nearest-size search, cyclic stepping, on-screen clamping)
- Size notification formatting and a fading cairo-rendered label
- Abstract host interfaces and an extension object that wires them together

Example usage:
    from wsizer import SizerExtension, SizerConfig

    ext = SizerExtension(registrar, scale_provider, surface,
                         config=SizerConfig(sizes=[(1280, 720), (1600, 900)]))
    ext.enable()

Or preview from the command line:
    python -m wsizer cycle --frame 0,0,1280,720 --work-area 0,0,1920,1080
"""

__version__ = "0.1.0"

from .geometry import Area, MaximizeFlags, Size

from .sizing import (
    CycleResult,
    NoFittingCandidate,
    advance_index,
    center,
    clamp_onscreen,
    cycle,
    find_nearest_index,
    fitting_candidates,
    scale_sizes,
)

from .message import format_size_message, ratio_numerator

from .config import (
    ACTION_CENTER,
    ACTION_CYCLE,
    ACTION_CYCLE_BACKWARD,
    DEFAULT_SIZES,
    ConfigurationError,
    DictSettings,
    SizerConfig,
    validate_sizes,
)

from .host import (
    BindingDescriptor,
    HostWindow,
    KeyBindingFlags,
    KeyBindingRegistrar,
    MessageSurface,
    ScaleProvider,
    SettingsStore,
)

from .notifier import LabelState, LabelStyle, Notifier
from .window_controller import SizeController
from .binding_manager import Action, BindingManager
from .extension import SizerExtension

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Area",
    "MaximizeFlags",
    "Size",
    # Sizing core
    "CycleResult",
    "NoFittingCandidate",
    "advance_index",
    "center",
    "clamp_onscreen",
    "cycle",
    "find_nearest_index",
    "fitting_candidates",
    "scale_sizes",
    # Messages
    "format_size_message",
    "ratio_numerator",
    # Configuration
    "ACTION_CENTER",
    "ACTION_CYCLE",
    "ACTION_CYCLE_BACKWARD",
    "DEFAULT_SIZES",
    "ConfigurationError",
    "DictSettings",
    "SizerConfig",
    "validate_sizes",
    # Host interfaces
    "BindingDescriptor",
    "HostWindow",
    "KeyBindingFlags",
    "KeyBindingRegistrar",
    "MessageSurface",
    "ScaleProvider",
    "SettingsStore",
    # Components
    "LabelState",
    "LabelStyle",
    "Notifier",
    "SizeController",
    "Action",
    "BindingManager",
    "SizerExtension",
    # Event topics
    "topics",
]

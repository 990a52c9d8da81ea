"""
Binding Manager

Registers wsizer's named actions as host key bindings and turns the host's
callbacks into command events.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from .config import ACTION_CENTER, ACTION_CYCLE, ACTION_CYCLE_BACKWARD
from .host import KeyBindingFlags

if TYPE_CHECKING:
    from .host import BindingDescriptor, HostWindow, KeyBindingRegistrar, SettingsStore


@dataclass
class Action:
    """A named action the host can bind a shortcut to."""

    name: str
    event_topic: str  # Event topic to publish (e.g., 'cmd.center_window')
    flags: KeyBindingFlags = KeyBindingFlags.PER_WINDOW
    event_data: dict = field(default_factory=dict)  # Additional event parameters


def default_actions() -> List[Action]:
    """The three actions wsizer exposes."""
    from . import topics

    return [
        Action(ACTION_CYCLE, topics.CMD_CYCLE_WINDOW_SIZES),
        Action(
            ACTION_CYCLE_BACKWARD,
            topics.CMD_CYCLE_WINDOW_SIZES,
            KeyBindingFlags.PER_WINDOW | KeyBindingFlags.IS_REVERSED,
        ),
        Action(ACTION_CENTER, topics.CMD_CENTER_WINDOW),
    ]


class BindingManager:
    """Manages the host key bindings for wsizer actions."""

    def __init__(self, registrar: "KeyBindingRegistrar", settings: "SettingsStore"):
        """Initialize binding manager.

        Args:
            registrar: Host key binding registration
            settings: Store holding the accelerators for each action
        """
        self.registrar = registrar
        self.settings = settings
        self.bindings: Dict[str, Action] = {}  # action name -> registered action

    def bind_action(self, action: Action) -> bool:
        """Register an action with the host.

        Accelerator strings go to the host as configured, since only the
        host knows which keysyms and modifiers it accepts. An action with no
        accelerators is treated as disabled and not registered.

        Returns:
            True if the host accepted the binding
        """
        if not self.settings.get_strv(action.name):
            print(f"BindingManager: No accelerator for {action.name}, skipping")
            return False

        handler = self._make_handler(action)
        if not self.registrar.add_keybinding(
            action.name, self.settings, action.flags, handler
        ):
            print(f"BindingManager: Host refused binding {action.name}")
            return False

        self.bindings[action.name] = action
        return True

    def _make_handler(self, action: Action):
        """Adapt the host callback signature into a command event."""
        from pubsub import pub
        from . import topics

        def handle(display, window: Optional["HostWindow"], event, binding: "BindingDescriptor"):
            # Per-window actions need a focused window
            if window is None:
                return
            data = dict(action.event_data)
            if action.event_topic == topics.CMD_CYCLE_WINDOW_SIZES:
                data["backward"] = binding.is_reversed()
            pub.sendMessage(action.event_topic, window=window, **data)

        return handle

    def unbind_all(self):
        """Remove every registered binding from the host."""
        for name in list(self.bindings):
            self.registrar.remove_keybinding(name)
        self.bindings.clear()

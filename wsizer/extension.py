"""
wsizer Extension

Wires the sizing components to a host shell.
"""

from __future__ import annotations
import os
import time
from typing import List, Optional

from pubsub import pub

from . import topics
from .binding_manager import Action, BindingManager, default_actions
from .config import ConfigurationError, SizerConfig, validate_sizes
from .host import (
    HostWindow,
    KeyBindingRegistrar,
    MessageSurface,
    ScaleProvider,
    SettingsStore,
)
from .notifier import LabelStyle, Notifier
from .window_controller import SizeController


class SizerExtension:
    """
    Window size cycling and centering for a desktop shell.

    Architecture:
    1. enable() validates configuration and creates components
    2. Components self-subscribe to command events on the bus (Pypubsub)
    3. Host key bindings publish commands; the host reports resizes through
       window_size_changed() and closed windows through window_unmanaged()
    4. disable() tears everything down again
    """

    def __init__(
        self,
        registrar: KeyBindingRegistrar,
        scale_provider: ScaleProvider,
        surface: MessageSurface,
        settings: Optional[SettingsStore] = None,
        config: Optional[SizerConfig] = None,
    ):
        self.config = config or SizerConfig()
        self.registrar = registrar
        self.scale_provider = scale_provider
        self.surface = surface
        self.settings = settings or self.config.settings()

        self.notifier: Optional[Notifier] = None
        self.size_controller: Optional[SizeController] = None
        self.binding_manager: Optional[BindingManager] = None
        self.enabled = False

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")

    def enable(self):
        """Create components and register key bindings."""
        if self.enabled:
            return

        if os.getenv("WSIZER_DEBUG"):
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

        try:
            sizes = validate_sizes(self.config.sizes)
        except ConfigurationError as e:
            print(f"SizerExtension: Size cycling disabled: {e}")
            sizes = None

        style = LabelStyle(
            font_family=self.config.font_family,
            font_size=self.config.font_size,
            padding=self.config.padding,
            text_color=self.config.text_color,
            background_color=self.config.background_color,
        )
        self.notifier = Notifier(
            self.surface, style=style, fade_time_ms=self.config.fade_time_ms
        )

        # Window commands (self-subscribes)
        self.size_controller = SizeController(
            bus=pub,
            scale_provider=self.scale_provider,
            sizes=sizes,
            notify=self.flash_message,
        )

        # Key bindings (publishes command events)
        self.binding_manager = BindingManager(self.registrar, self.settings)
        for action in self._actions(cycling=sizes is not None):
            self.binding_manager.bind_action(action)

        self.enabled = True

    def disable(self):
        """Remove key bindings, pending listeners and the message label."""
        if not self.enabled:
            return

        self.binding_manager.unbind_all()
        self.size_controller.shutdown()
        self.notifier.destroy()

        if pub.isSubscribed(self.debug_event_logger, pub.ALL_TOPICS):
            pub.unsubscribe(self.debug_event_logger, pub.ALL_TOPICS)

        self.binding_manager = None
        self.size_controller = None
        self.notifier = None
        self.enabled = False

    def window_size_changed(self, window: HostWindow):
        """Host callback: a window's frame changed size."""
        pub.sendMessage(topics.WINDOW_SIZE_CHANGED, window=window)

    def window_unmanaged(self, window: HostWindow):
        """Host callback: a window was closed or destroyed."""
        pub.sendMessage(topics.WINDOW_UNMANAGED, window=window)

    def tick(self):
        """Host callback: advance the label fade, once per frame."""
        if self.notifier is not None:
            self.notifier.tick()

    def flash_message(self, text: str):
        """Show a message on the primary monitor."""
        self.notifier.flash(text)
        pub.sendMessage(topics.MESSAGE_FLASHED, text=text)

    @property
    def bound_actions(self) -> List[str]:
        """Names of the actions currently registered with the host."""
        if self.binding_manager is None:
            return []
        return list(self.binding_manager.bindings)

    def _actions(self, cycling: bool) -> List[Action]:
        actions = default_actions()
        if cycling:
            return actions
        return [a for a in actions if a.event_topic != topics.CMD_CYCLE_WINDOW_SIZES]

"""
Event Topics for wsizer

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Command events (imperative - tell components to do something)
# These are triggered by the host's key bindings or the command line

CMD_CYCLE_WINDOW_SIZES = "cmd.cycle_window_sizes"
"""Command: Resize a window to the next preferred size.
Params: window, backward (step to the previous size instead)"""

CMD_CENTER_WINDOW = "cmd.center_window"
"""Command: Center a window on its work area. Params: window"""

# Notification events

WINDOW_SIZE_CHANGED = "window.size_changed"
"""Published when the host reports that a window's frame changed size.
Params: window"""

MESSAGE_FLASHED = "notify.message_flashed"
"""Published when a size message is shown. Params: text"""

WINDOW_UNMANAGED = "window.unmanaged"
"""Published when the host stops managing a window (closed or destroyed).
Params: window"""

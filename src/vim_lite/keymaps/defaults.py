"""Built-in dispatch tables for Normal and Insert mode."""

from __future__ import annotations

from vim_lite.actions import core as core_actions
from vim_lite.actions import edit as edit_actions
from vim_lite.actions import motion as motion_actions
from vim_lite.modes.base_mode import (
    BACKSPACE_TOKEN,
    CHAR_TOKEN,
    ENTER_TOKEN,
    ESCAPE_TOKEN,
    Mode,
)

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.enter_insert",
        handler=core_actions.enter_insert_mode,
        description="Enter insert mode",
    ),
    ActionRef(
        id="core.exit_to_normal",
        handler=core_actions.exit_to_normal_mode,
        description="Return to normal mode",
    ),
    ActionRef(
        id="core.quit",
        handler=core_actions.quit_editor,
        description="Quit the editor",
    ),
    ActionRef(
        id="motion.left",
        handler=motion_actions.move_left,
        description="Move cursor left",
    ),
    ActionRef(
        id="motion.right",
        handler=motion_actions.move_right,
        description="Move cursor right",
    ),
    ActionRef(
        id="motion.up",
        handler=motion_actions.move_up,
        description="Move cursor up",
    ),
    ActionRef(
        id="motion.down",
        handler=motion_actions.move_down,
        description="Move cursor down",
    ),
    ActionRef(
        id="edit.insert_char",
        handler=edit_actions.insert_char,
        description="Insert the typed character",
    ),
    ActionRef(
        id="edit.delete_char",
        handler=edit_actions.delete_char,
        description="Delete before the cursor, joining lines at column 0",
    ),
    ActionRef(
        id="edit.insert_newline",
        handler=edit_actions.insert_newline,
        description="Split the line at the cursor",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="normal.quit",
        mode=Mode.NORMAL,
        key="q",
        action_id="core.quit",
        description="Quit the editor",
    ),
    Binding(
        id="normal.enter_insert",
        mode=Mode.NORMAL,
        key="i",
        action_id="core.enter_insert",
        description="Enter insert mode",
    ),
    Binding(
        id="normal.left",
        mode=Mode.NORMAL,
        key="h",
        action_id="motion.left",
        description="Move cursor left",
    ),
    Binding(
        id="normal.down",
        mode=Mode.NORMAL,
        key="j",
        action_id="motion.down",
        description="Move cursor down",
    ),
    Binding(
        id="normal.up",
        mode=Mode.NORMAL,
        key="k",
        action_id="motion.up",
        description="Move cursor up",
    ),
    Binding(
        id="normal.right",
        mode=Mode.NORMAL,
        key="l",
        action_id="motion.right",
        description="Move cursor right",
    ),
    Binding(
        id="insert.exit_escape",
        mode=Mode.INSERT,
        key=ESCAPE_TOKEN,
        action_id="core.exit_to_normal",
        description="Leave insert mode",
    ),
    Binding(
        id="insert.backspace",
        mode=Mode.INSERT,
        key=BACKSPACE_TOKEN,
        action_id="edit.delete_char",
        description="Delete before the cursor",
    ),
    Binding(
        id="insert.newline",
        mode=Mode.INSERT,
        key=ENTER_TOKEN,
        action_id="edit.insert_newline",
        description="Split the line at the cursor",
    ),
    Binding(
        id="insert.char",
        mode=Mode.INSERT,
        key=CHAR_TOKEN,
        action_id="edit.insert_char",
        description="Insert any printable character",
    ),
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register built-in actions and bindings for every mode."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action)

    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]

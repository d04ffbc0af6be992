"""Editing verbs bound to keys by the default keymaps."""

from .core import enter_insert_mode, exit_to_normal_mode, quit_editor
from .edit import delete_char, insert_char, insert_newline
from .motion import move_down, move_left, move_right, move_up

__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "quit_editor",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "insert_char",
    "delete_char",
    "insert_newline",
]

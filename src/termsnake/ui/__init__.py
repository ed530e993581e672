"""Terminal UI - rendering and keyboard input"""

from .keyboard import KEY_DIRECTIONS, QUIT_KEYS, RawKeyboard, key_to_direction, parse_keys
from .render import render_frame, render_grid, render_scores_table, render_status

__all__ = [
    "KEY_DIRECTIONS",
    "QUIT_KEYS",
    "RawKeyboard",
    "key_to_direction",
    "parse_keys",
    "render_frame",
    "render_grid",
    "render_scores_table",
    "render_status",
]

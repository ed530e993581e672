"""CLI module"""

from termsnake.cli import config_cmd, main, play, scores_cmd

__all__ = ["config_cmd", "main", "play", "scores_cmd"]

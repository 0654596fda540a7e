"""CLI commands for callsy."""

from .call import run_call
from .config_cmd import config

__all__ = [
    "run_call",
    "config",
]

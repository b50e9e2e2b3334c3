"""
Commands package for the valuekit CLI.

Each command lives in its own module.
"""

from .check import check_command
from .sample import sample_command

__all__ = ["check_command", "sample_command"]

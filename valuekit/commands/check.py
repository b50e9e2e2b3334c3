"""
Check command - parse raw text as a type and report the outcome.
"""

from __future__ import annotations

from ..core.errors import ParseFailure
from ..core.types import try_parse, type_name
from ..utilities.console import print_error, print_success
from .registry import resolve_type


def check_command(type_expression: str, raw: str) -> bool:
    """Return True when *raw* parses as the type, printing the result either way."""
    cls = resolve_type(type_expression)
    if not callable(getattr(cls, "parse", None)):
        raise ValueError(f"{type_name(cls)} has no textual form to check")

    result = try_parse(cls, raw)
    if isinstance(result, ParseFailure):
        print_error(str(result))
        return False

    print_success(f"Valid {type_name(cls)}: {result!r}")
    return True

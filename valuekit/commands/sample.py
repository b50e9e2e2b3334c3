"""
Sample command - print generated values for a type expression.
"""

from __future__ import annotations

import logging

from ..config import GenerationConfig
from ..core.types import type_name
from ..testing import Seed, Session, arbitrary_of, negated_of
from ..utilities.console import print_info, print_table
from ..utilities.validators import validate_positive_number
from .registry import resolve_type

logger = logging.getLogger(__name__)


def sample_command(
    type_expression: str,
    seed: str | None = None,
    count: int = 5,
    negated: bool = False,
    config: GenerationConfig | None = None,
) -> list[object]:
    """
    Generate *count* values, one per case derived from the run seed.

    Prints a table of case seeds and values and returns the values.
    """
    validate_positive_number(count, "count")
    cls = resolve_type(type_expression)
    spec = negated_of(cls) if negated else arbitrary_of(cls)

    session = Session(Seed.from_hex(seed) if seed else None, config)
    values = session.cases(spec, count)

    mode = "negated" if negated else "arbitrary"
    print_info(f"{count} {mode} value(s) of {type_name(cls)} from seed {session.seed.hex()}")
    print_table(
        f"{type_name(cls)}",
        ["#", "Case seed", "Value"],
        [
            (str(index), session.seed.derive(index).hex()[:16], repr(value))
            for index, value in enumerate(values)
        ],
    )
    return values

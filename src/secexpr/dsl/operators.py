"""The closed set of binary arithmetic operators."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum
from typing import TypeAlias

Number: TypeAlias = int | float


class Operator(str, Enum):
    """Supported ``fn`` symbols."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def apply(self, a: Number, b: Number) -> Number:
        """Apply the operator to ``a`` and ``b`` in that order."""
        return _FUNCTIONS[self](a, b)


def _divide(a: Number, b: Number) -> Number:
    """Float division that yields inf/nan on a zero divisor instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


_FUNCTIONS: dict[Operator, Callable[[Number, Number], Number]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUBTRACT: lambda a, b: a - b,
    Operator.MULTIPLY: lambda a, b: a * b,
    Operator.DIVIDE: _divide,
}

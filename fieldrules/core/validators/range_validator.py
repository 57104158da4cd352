"""
RangeValidator - validates numeric values against an exclusive bound.
"""

import operator
import re
from typing import Callable

from .base_validator import BaseValidator

# Plain decimal notation: optional sign, digits with an optional fraction, optional exponent
NUMBER_PATTERN = re.compile(r"^\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\s*\Z")


class RangeValidator(BaseValidator):
    """
    Validates that the numeric value of a field is beyond a bound.

    Parameters:
    - compare: Binary operator applied as ``compare(float(value), int(param))``

    Values that are not written as a plain decimal number fail the rule,
    including "1_000", "infinity" and non-ASCII digits.
    """

    numeric_param = True

    def __init__(self, name: str, compare: Callable[[float, int], bool], message: str):
        super().__init__(name, message)
        self.compare = compare

    def check(self, value: str, param: str | None) -> bool:
        if not NUMBER_PATTERN.match(value):
            return False

        return self.compare(float(value), int(param))


def greater_than(name: str = "gt") -> RangeValidator:
    return RangeValidator(name, operator.gt, "Field must be greater than {param}")


def less_than(name: str = "lt") -> RangeValidator:
    return RangeValidator(name, operator.lt, "Field must be less than {param}")

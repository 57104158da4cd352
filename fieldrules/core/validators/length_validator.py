"""
LengthValidator - validates the character count of a field value.
"""

import operator
from typing import Callable

from .base_validator import BaseValidator


class LengthValidator(BaseValidator):
    """
    Compares the length of the value against a numeric param.

    Parameters:
    - compare: Binary operator applied as ``compare(len(value), int(param))``

    Used for ``eq`` (==), ``max`` (<=) and ``min`` (>=).
    """

    numeric_param = True

    def __init__(self, name: str, compare: Callable[[int, int], bool], message: str):
        super().__init__(name, message)
        self.compare = compare

    def check(self, value: str, param: str | None) -> bool:
        return self.compare(len(value), int(param))


def exact_length(name: str = "eq") -> LengthValidator:
    return LengthValidator(name, operator.eq, "Field should be {param} characters")


def max_length(name: str = "max") -> LengthValidator:
    return LengthValidator(name, operator.le, "Field can not exceed {param} characters")


def min_length(name: str = "min") -> LengthValidator:
    return LengthValidator(name, operator.ge, "Field should be {param} or more characters")

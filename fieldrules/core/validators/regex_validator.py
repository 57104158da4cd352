"""
RegexValidator - validates field values against a regular expression pattern.
"""

import re
from re import Pattern

from .base_validator import BaseValidator

DECIMAL_PATTERN = re.compile(r"^[0-9]+\.([0-9]*)\Z")


class RegexValidator(BaseValidator):
    """
    Validates that a field value matches a regular expression pattern.

    Parameters:
    - pattern: Regular expression pattern (string or compiled Pattern)
    - flags: Optional regex flags (e.g., re.IGNORECASE)
    - search: Match anywhere in the value instead of from the start
    """

    def __init__(
        self,
        name: str,
        pattern: str | Pattern,
        message: str,
        flags: int = 0,
        search: bool = False,
    ):
        super().__init__(name, message)

        # Compile pattern
        try:
            if isinstance(pattern, str):
                self.pattern: Pattern = re.compile(pattern, flags)
            elif isinstance(pattern, Pattern):
                self.pattern = pattern
            else:
                raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}")

        self.search = search

    def check(self, value: str, param: str | None) -> bool:
        if self.search:
            return self.pattern.search(value) is not None
        return self.pattern.match(value) is not None


class DecimalValidator(BaseValidator):
    """
    Validates a decimal number with an exact count of fractional digits.

    The param is the number of digits required after the decimal point,
    e.g. ``float:2`` accepts "10.50" but not "10.5" or "10".
    """

    message_template = "Field must be numeric with {param} decimals"
    numeric_param = True

    def check(self, value: str, param: str | None) -> bool:
        match = DECIMAL_PATTERN.match(value)
        return match is not None and len(match.group(1)) == int(param)

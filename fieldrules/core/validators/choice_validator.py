"""
Validators that compare a field value against values carried in the param.
"""

from .base_validator import BaseValidator


class MembershipValidator(BaseValidator):
    """
    Validates that the value is one of a comma-separated list of tokens.

    ``in:red,green,blue`` accepts "green" but not "Green" or "red,green".
    """

    message_template = "Field must contain one of the following: `{param}`"
    requires_param = True

    def __init__(self, name: str = "in", message: str | None = None):
        super().__init__(name, message)

    def check(self, value: str, param: str | None) -> bool:
        return value in param.split(",")


class MatchValidator(BaseValidator):
    """
    Validates that the value equals another value.

    The param is either the expected value itself, or ``label|value`` when
    matching another field, where label names that field in the message
    (``match:Password|s3cret``).
    """

    message_template = "Field must match with `{param}`"
    requires_param = True

    def __init__(self, name: str = "match", message: str | None = None):
        super().__init__(name, message)

    @staticmethod
    def split_param(param: str) -> tuple[str, str]:
        """Return (label, expected) for a match param."""
        if "|" in param:
            label, expected = param.split("|", 1)
            return label, expected
        return param, param

    def message(self, param: str | None = None) -> str:
        if param is None:
            return super().message(param)
        label, _ = self.split_param(param)
        return super().message(label)

    def check(self, value: str, param: str | None) -> bool:
        _, expected = self.split_param(param)
        return value == expected

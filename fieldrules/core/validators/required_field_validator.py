"""
RequiredFieldValidator - ensures a field is present and not empty.
"""

from .base_validator import BaseValidator

REQUIRED_RULE = "required"


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is not empty.

    Fails if the value is empty or contains only whitespace.
    """

    message_template = "Field is required"

    def __init__(self, name: str = REQUIRED_RULE, message: str | None = None):
        super().__init__(name, message)

    def check(self, value: str, param: str | None) -> bool:
        return value.strip() != ""

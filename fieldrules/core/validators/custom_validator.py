"""
CustomValidator - validates using a custom Python function.
"""

from typing import Callable

from .base_validator import BaseValidator


class CustomValidator(BaseValidator):
    """
    Validates using a custom predicate function.

    Parameters:
    - predicate: A callable that takes (value, param) and returns a bool
    - message: Default error message, ``{param}`` is substituted
    - requires_param: Whether the rule needs a param
    - numeric_param: Whether the param must be numeric

    The predicate signature should be:
        def my_predicate(value: str, param: str | None) -> bool:
            return value.startswith(param or "")

    Exceptions raised by the predicate propagate to the caller.
    """

    def __init__(
        self,
        name: str,
        predicate: Callable[[str, str | None], bool],
        message: str = "Custom validation failed",
        requires_param: bool = False,
        numeric_param: bool = False,
    ):
        super().__init__(name, message)

        if not callable(predicate):
            raise ValueError("predicate must be callable")

        self.predicate = predicate
        self.requires_param = requires_param
        self.numeric_param = numeric_param

    def check(self, value: str, param: str | None) -> bool:
        return bool(self.predicate(value, param))


class AllOfValidator(BaseValidator):
    """
    Passes only when every wrapped validator passes.

    The param, if any, is forwarded to each wrapped validator.
    """

    def __init__(self, name: str, validators: list[BaseValidator], message: str):
        super().__init__(name, message)
        self.validators = tuple(validators)

    def check(self, value: str, param: str | None) -> bool:
        return all(validator.validate(value, param) for validator in self.validators)

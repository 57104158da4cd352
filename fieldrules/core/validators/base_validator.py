"""
Base validator interface for all validation rules.

All validators must inherit from BaseValidator and implement the check() method.
A validator is a stateless predicate over a string value plus an optional
parameter, paired with the default message reported when it fails.
"""

import re
from abc import ABC, abstractmethod

NUMERIC_PATTERN = re.compile(r"^[0-9]+\Z")


class RuleConfigurationError(ValueError):
    """Raised when a rule set is misconfigured by the caller."""


class UnknownRuleError(RuleConfigurationError):
    """Raised when a rule name is not registered."""

    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(f"Function for type, {rule_name}, does not exist")


class MissingPredicateError(RuleConfigurationError):
    """Raised when a registered rule has no callable validate()."""

    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(f"Function for type, {rule_name}, is missing")


class InvalidParamError(RuleConfigurationError):
    """Raised when a rule parameter is missing or malformed."""

    def __init__(self, rule_name: str, param: str | None, message: str):
        self.rule_name = rule_name
        self.param = param
        self.message = message
        super().__init__(f"[{rule_name}] {message}")


class RuleSetError(RuleConfigurationError):
    """Raised when a rule set has an unsupported shape."""


def is_numeric(value: str) -> bool:
    """Return True if value consists of ASCII digits only."""
    return bool(NUMERIC_PATTERN.match(value))


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Subclasses declare:
    - message_template: default message, ``{param}`` is substituted
    - requires_param: whether a parameter must be supplied
    - numeric_param: whether the parameter must be an unsigned integer
    """

    message_template: str = ""
    requires_param: bool = False
    numeric_param: bool = False

    def __init__(self, name: str, message: str | None = None):
        """
        Initialize validator.

        Args:
            name: Rule name this validator is registered under
            message: Optional override of the class message template
        """
        self.name = name
        if message is not None:
            self.message_template = message

    def message(self, param: str | None = None) -> str:
        """Return the default failure message with param interpolated."""
        return self.message_template.replace("{param}", "" if param is None else param)

    def validate(self, value: str, param: str | None = None) -> bool:
        """
        Validate a value against this rule.

        Args:
            value: The field value to validate
            param: Rule parameter taken from the rule identifier or options

        Returns:
            True if the value satisfies the rule

        Raises:
            InvalidParamError: If the parameter is missing or malformed
        """
        self.check_param(param)
        return self.check(value, param)

    def check_param(self, param: str | None) -> None:
        """Raise InvalidParamError if param does not suit this rule."""
        if self.numeric_param:
            if param is None or not is_numeric(param):
                raise InvalidParamError(
                    self.name,
                    param,
                    f"The param for the validation rule, {self.name}, must be numeric",
                )
            try:
                int(param)
            except ValueError:
                # past the interpreter's int string-conversion limit
                raise InvalidParamError(
                    self.name,
                    param,
                    f"The param for the validation rule, {self.name}, is too large",
                ) from None
        elif self.requires_param and param is None:
            raise InvalidParamError(
                self.name,
                param,
                f"The validation rule, {self.name}, requires a param",
            )

    @abstractmethod
    def check(self, value: str, param: str | None) -> bool:
        """Run the predicate once the param has been checked."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"

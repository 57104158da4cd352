"""
Validator registry: the immutable table of rule name -> validator.

The built-in table is constructed once at import time and shared read-only
by every evaluation. Callers that need extra rules build a new registry with
ValidatorRegistry.extend() instead of mutating the default one.
"""

import re
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .base_validator import BaseValidator, UnknownRuleError
from .choice_validator import MatchValidator, MembershipValidator
from .custom_validator import AllOfValidator
from .length_validator import exact_length, max_length, min_length
from .range_validator import greater_than, less_than
from .regex_validator import DecimalValidator, RegexValidator
from .required_field_validator import RequiredFieldValidator

SYMBOL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?`~"

UUID_PATTERN = (
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-5][0-9a-f]{3}-[089ab][0-9a-f]{3}-[0-9a-f]{12}\Z"
)


class ValidatorRegistry(Mapping):
    """
    Read-only mapping from rule name to validator.

    Entries only need ``message(param=None)`` and ``validate(value, param=None)``;
    BaseValidator subclasses provide both.
    """

    def __init__(self, validators: Mapping[str, Any]):
        self._validators = MappingProxyType(dict(validators))

    @classmethod
    def from_validators(cls, *validators: BaseValidator) -> "ValidatorRegistry":
        """Build a registry keyed by each validator's name."""
        return cls({validator.name: validator for validator in validators})

    def get_validator(self, name: str) -> Any:
        """
        Look up a validator by rule name.

        Raises:
            UnknownRuleError: If no validator is registered under name
        """
        try:
            return self._validators[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    def extend(self, *validators: BaseValidator) -> "ValidatorRegistry":
        """Return a new registry with validators added or replaced."""
        merged = dict(self._validators)
        merged.update({validator.name: validator for validator in validators})
        return ValidatorRegistry(merged)

    def __getitem__(self, name: str) -> Any:
        return self._validators[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._validators)

    def __len__(self) -> int:
        return len(self._validators)

    def __repr__(self) -> str:
        return f"ValidatorRegistry({sorted(self._validators)})"


def build_default_registry() -> ValidatorRegistry:
    """Construct the table of built-in validators."""
    lower = RegexValidator("lower", r"[a-z]", "Field must contain a lowercase letter", search=True)
    upper = RegexValidator("upper", r"[A-Z]", "Field must contain an uppercase letter", search=True)

    return ValidatorRegistry.from_validators(
        RegexValidator(
            "alpha-numeric",
            r"^(?=.*[0-9])(?=.*[a-zA-Z])([a-zA-Z0-9]+)\Z",
            "Field must contain letters and numbers",
        ),
        RegexValidator("email", r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z", "Field must be a valid email address"),
        exact_length(),
        DecimalValidator("float"),
        greater_than(),
        RegexValidator("has-int", r"[0-9]", "Field must contain a number", search=True),
        MembershipValidator(),
        lower,
        less_than(),
        MatchValidator(),
        max_length(),
        min_length(),
        AllOfValidator(
            "mixedCase",
            [lower, upper],
            "Field must contain uppercase and lowercase letters",
        ),
        RegexValidator("numeric", r"^[0-9]+\Z", "Field can only contain numbers"),
        RegexValidator("phone", r"^\+1([0-9]{10})\Z", "Field must be a valid phone number"),
        RequiredFieldValidator(),
        RegexValidator(
            "symbol",
            "[" + re.escape(SYMBOL_CHARACTERS) + "]",
            "Field must contain a special character",
            search=True,
        ),
        upper,
        RegexValidator("uuid", UUID_PATTERN, "Field must be a valid UUID", flags=re.IGNORECASE),
    )


_DEFAULT_REGISTRY = build_default_registry()


def default_registry() -> ValidatorRegistry:
    """Return the process-wide built-in registry."""
    return _DEFAULT_REGISTRY

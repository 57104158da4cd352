"""
Validation rule implementations.

Provides the built-in validators (required fields, lengths, numeric bounds,
regex patterns, value matching) and the registry that maps rule names to them.
"""

from .base_validator import (
    BaseValidator,
    InvalidParamError,
    MissingPredicateError,
    RuleConfigurationError,
    RuleSetError,
    UnknownRuleError,
)
from .choice_validator import MatchValidator, MembershipValidator
from .custom_validator import AllOfValidator, CustomValidator
from .length_validator import LengthValidator
from .range_validator import RangeValidator
from .regex_validator import DecimalValidator, RegexValidator
from .registry import ValidatorRegistry, build_default_registry, default_registry
from .required_field_validator import REQUIRED_RULE, RequiredFieldValidator

__all__ = [
    "BaseValidator",
    "RuleConfigurationError",
    "UnknownRuleError",
    "MissingPredicateError",
    "InvalidParamError",
    "RuleSetError",
    "RequiredFieldValidator",
    "REQUIRED_RULE",
    "LengthValidator",
    "RangeValidator",
    "RegexValidator",
    "DecimalValidator",
    "MembershipValidator",
    "MatchValidator",
    "CustomValidator",
    "AllOfValidator",
    "ValidatorRegistry",
    "build_default_registry",
    "default_registry",
]

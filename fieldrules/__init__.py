"""
fieldrules - declarative validation of string field values.

Usage:
    from fieldrules import evaluate_rule_set

    result = evaluate_rule_set("ab", ["required", "min:5"])
    result.valid   # False
    result.error   # "Field should be 5 or more characters"
"""

from fieldrules.core.models import EvaluationResult, RuleOptions, RuleResult, RuleSet
from fieldrules.core.rules import RuleEngine, evaluate_rule, evaluate_rule_set
from fieldrules.core.validators import (
    InvalidParamError,
    MissingPredicateError,
    RuleConfigurationError,
    RuleSetError,
    UnknownRuleError,
)

__version__ = "0.1.0"

__all__ = [
    "evaluate_rule",
    "evaluate_rule_set",
    "RuleEngine",
    "RuleOptions",
    "RuleSet",
    "RuleResult",
    "EvaluationResult",
    "RuleConfigurationError",
    "UnknownRuleError",
    "MissingPredicateError",
    "InvalidParamError",
    "RuleSetError",
]

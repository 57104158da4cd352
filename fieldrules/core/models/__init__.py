"""
Core data models for the field validation engine.

All models use Pydantic for runtime validation and are immutable.
"""

from .rule_set import RuleEntry, RuleOptions, RuleSet
from .validation_result import EvaluationResult, RuleResult

__all__ = [
    "RuleOptions",
    "RuleEntry",
    "RuleSet",
    "RuleResult",
    "EvaluationResult",
]

"""
Rule resolution, evaluation and configuration management.
"""

from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import RuleEngine, evaluate_rule, evaluate_rule_set, get_default_engine
from .rule_parser import normalize_rule_set, parse_rule_identifier, resolve_entry

__all__ = [
    "RuleEngine",
    "evaluate_rule",
    "evaluate_rule_set",
    "get_default_engine",
    "normalize_rule_set",
    "parse_rule_identifier",
    "resolve_entry",
    "RuleConfigLoader",
    "RuleConfigBuilder",
]

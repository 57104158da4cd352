"""
Rule identifier parsing and rule set normalization.

Rule sets arrive in one of two shapes:

    ["required", "min:5", "max:20"]

    {"required": {}, "min:": {"pattern": "5"}, "max:20": {"message": "Too long"}}

Both are resolved once, at the API boundary, into a RuleSet of RuleEntry
objects so the evaluation pipeline never re-inspects the raw shape.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from fieldrules.core.models import RuleEntry, RuleOptions, RuleSet
from fieldrules.core.validators import InvalidParamError, RuleSetError

PARAM_SEPARATOR = ":"


def parse_rule_identifier(identifier: str) -> tuple[str, str | None]:
    """
    Split a rule identifier into (name, param).

    Only the first colon separates; an empty param counts as no param.

    Examples:
        >>> parse_rule_identifier("email")
        ('email', None)
        >>> parse_rule_identifier("min:5")
        ('min', '5')
        >>> parse_rule_identifier("match:Time|10:30")
        ('match', 'Time|10:30')
    """
    if not isinstance(identifier, str):
        raise RuleSetError(f"Rule identifier must be a string, got {type(identifier).__name__}")

    name, _, param = identifier.partition(PARAM_SEPARATOR)
    if not name:
        raise RuleSetError(f"Rule identifier '{identifier}' has no rule name")

    return name, param or None


def is_positional_key(key: Any) -> bool:
    """Return True for integer keys and all-digit string keys."""
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and key.isascii() and key.isdigit()


def coerce_options(name: str, value: Any) -> RuleOptions:
    """Build RuleOptions from a mapping value (RuleOptions, dict or None)."""
    if value is None:
        return RuleOptions()
    if isinstance(value, RuleOptions):
        return value
    if isinstance(value, Mapping):
        try:
            return RuleOptions.model_validate(dict(value))
        except ValidationError as e:
            raise RuleSetError(f"Invalid options for rule '{name}': {e}") from e
    raise RuleSetError(
        f"Options for rule '{name}' must be a mapping, got {type(value).__name__}"
    )


def resolve_entry(key: Any, value: Any) -> RuleEntry:
    """
    Resolve one (key, value) pair of the mapping form.

    A positional key means value is itself a rule identifier. Otherwise key
    names the rule, with an optional ``:param`` suffix, and value holds its
    options. The param may come from the key or from options.pattern, not both.

    Raises:
        RuleSetError: If the pair has an unsupported shape
        InvalidParamError: If the param is given twice
    """
    if is_positional_key(key):
        if not isinstance(value, str):
            raise RuleSetError(
                f"Positional rule {key!r} must be a rule identifier string, "
                f"got {type(value).__name__}"
            )
        name, param = parse_rule_identifier(value)
        return RuleEntry(name=name, param=param)

    return entry_from_identifier(key, value)


def entry_from_identifier(identifier: str, options: Any = None) -> RuleEntry:
    """
    Build a RuleEntry from a rule identifier and its options.

    Raises:
        InvalidParamError: If the identifier embeds a param and options.pattern sets one too
    """
    name, key_param = parse_rule_identifier(identifier)
    rule_options = coerce_options(name, options)
    option_param = rule_options.pattern or None

    if key_param is not None and option_param is not None:
        raise InvalidParamError(
            name,
            key_param,
            f"Param for rule, {name}, given in both key and pattern",
        )

    return RuleEntry(name=name, param=key_param or option_param, options=rule_options)


def normalize_rule_set(rules: Any) -> RuleSet:
    """
    Normalize any supported rule set shape into a RuleSet.

    Args:
        rules: RuleSet, sequence of rule identifiers, or mapping of rule keys to options

    Returns:
        RuleSet with entries in declaration order

    Raises:
        RuleSetError: If the shape is not supported
    """
    if isinstance(rules, RuleSet):
        return rules

    if isinstance(rules, Mapping):
        entries = tuple(resolve_entry(key, value) for key, value in rules.items())
        return RuleSet(kind="map", entries=entries)

    if isinstance(rules, Sequence) and not isinstance(rules, (str, bytes)):
        entries = []
        for identifier in rules:
            name, param = parse_rule_identifier(identifier)
            entries.append(RuleEntry(name=name, param=param))
        return RuleSet(kind="list", entries=tuple(entries))

    raise RuleSetError(
        f"Rules must be a list of identifiers or a mapping of rules to options, "
        f"got {type(rules).__name__}"
    )

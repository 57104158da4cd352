"""
Rule configuration management.

Loads named rule sets from YAML files and provides a builder for
constructing rule sets in code.
"""

from pathlib import Path
from typing import Any

import yaml

from fieldrules.core.models import RuleEntry, RuleOptions, RuleSet
from fieldrules.core.rules.rule_parser import normalize_rule_set
from fieldrules.core.validators import REQUIRED_RULE, RuleSetError


class RuleConfigLoader:
    """
    Loads rule sets from YAML configuration files.

    Each field maps to a rule set in either the list or the mapping form.
    Expected YAML format:
    ```yaml
    rules:
      username:
        - required
        - "min:3"
        - "max:20"
        - alpha-numeric

      age:
        numeric: {}
        "gt:":
          pattern: "17"
          message: Must be an adult
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> dict[str, RuleSet]:
        """
        Load and parse rule sets from the YAML file.

        Returns:
            Mapping of field name to RuleSet, in file order

        Raises:
            RuleSetError: If YAML is invalid or a rule set is malformed
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleSetError(f"Invalid YAML in rule configuration file {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "rules" not in config:
            raise RuleSetError("Configuration file must contain 'rules' section")

        field_rules = config["rules"]
        if not isinstance(field_rules, dict):
            raise RuleSetError("'rules' section must map field names to rule sets")

        rule_sets = {}
        for field_name, raw_rules in field_rules.items():
            rule_sets[str(field_name)] = self._parse_rule_set(field_name, raw_rules)

        return rule_sets

    def load_field(self, field_name: str) -> RuleSet:
        """
        Load the rule set of a single field.

        Raises:
            KeyError: If the field has no rules in the file
        """
        rule_sets = self.load_rules()
        if field_name not in rule_sets:
            raise KeyError(f"No rules configured for field '{field_name}'")
        return rule_sets[field_name]

    def _parse_rule_set(self, field_name: Any, raw_rules: Any) -> RuleSet:
        # YAML reads `numeric:` with no value as None, same as an empty list
        if raw_rules is None:
            return RuleSet(kind="list")

        if not isinstance(raw_rules, (list, dict)):
            raise RuleSetError(f"Rules for field '{field_name}' must be a list or a mapping")

        try:
            return normalize_rule_set(raw_rules)
        except RuleSetError as e:
            raise RuleSetError(f"Invalid rules for field '{field_name}': {e}") from e


class RuleConfigBuilder:
    """
    Programmatically build rule sets (for testing or dynamic rules).

    Builds the mapping form, so every rule can carry its own message:

        rules = RuleConfigBuilder().required().min(8).match("Password", other).build()
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.entries: list[RuleEntry] = []

    def rule(self, name: str, param: Any = None, message: str | None = None) -> "RuleConfigBuilder":
        """Add any registered rule."""
        self.entries.append(RuleEntry(
            name=name,
            param=None if param is None else str(param),
            options=RuleOptions(message=message),
        ))
        return self

    def required(self, message: str | None = None) -> "RuleConfigBuilder":
        """Add a required rule."""
        return self.rule(REQUIRED_RULE, message=message)

    def min(self, length: int, message: str | None = None) -> "RuleConfigBuilder":
        """Add a minimum length rule."""
        return self.rule("min", length, message)

    def max(self, length: int, message: str | None = None) -> "RuleConfigBuilder":
        """Add a maximum length rule."""
        return self.rule("max", length, message)

    def one_of(self, choices: list[str], message: str | None = None) -> "RuleConfigBuilder":
        """Add a rule accepting only the given values."""
        return self.rule("in", ",".join(choices), message)

    def match(self, label: str, other_value: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a rule requiring the value to equal another field's value."""
        return self.rule("match", f"{label}|{other_value}", message)

    def build(self) -> RuleSet:
        """Build and return the rule set."""
        return RuleSet(kind="map", entries=tuple(self.entries))

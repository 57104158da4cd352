"""
Rule engine for evaluating a field value against a set of validation rules.

The engine resolves each rule against the validator registry, applies the
optional-field bypass, and reports the message of the first failing rule.
"""

from typing import Any

from fieldrules.core.models import EvaluationResult, RuleEntry, RuleOptions, RuleResult
from fieldrules.core.rules.rule_parser import entry_from_identifier, normalize_rule_set
from fieldrules.core.validators import (
    REQUIRED_RULE,
    MissingPredicateError,
    RuleConfigurationError,
    ValidatorRegistry,
    default_registry,
)
from fieldrules.observability.logger import get_logger

logger = get_logger(__name__)


class RuleEngine:
    """
    Evaluates string values against rule sets.

    The registry is fixed at construction; the engine keeps no other state,
    so one instance can serve any number of evaluations.
    """

    def __init__(self, registry: ValidatorRegistry | None = None):
        """
        Initialize the rule engine.

        Args:
            registry: Validators to resolve rule names against (built-ins if None)
        """
        self.registry = registry if registry is not None else default_registry()

    def evaluate_rule(
        self,
        rule: str,
        value: str,
        options: RuleOptions | dict[str, Any] | None = None,
    ) -> RuleResult:
        """
        Evaluate a single rule in isolation.

        Args:
            rule: Rule identifier ("email", "min:5")
            value: The field value to validate
            options: Optional message override and/or param

        Returns:
            RuleResult for this rule

        Raises:
            UnknownRuleError: If the rule name is not registered
            MissingPredicateError: If the registered rule has no validate()
            InvalidParamError: If the param is missing or malformed
        """
        entry = entry_from_identifier(rule, options)
        try:
            return self._evaluate_entry(entry, value)
        except RuleConfigurationError as e:
            self._log_configuration_error(entry.identifier, e)
            raise

    def evaluate_rule_set(self, value: str, rules: Any) -> EvaluationResult:
        """
        Evaluate a value against every rule in a rule set.

        An empty value passes without evaluating anything unless the rule set
        includes ``required``. Otherwise ``required`` runs first, the remaining
        rules run in declaration order, and the first failure ends the evaluation.

        Args:
            value: The field value to validate
            rules: RuleSet, list of rule identifiers, or mapping of rule keys to options

        Returns:
            EvaluationResult with the first failing rule's message, if any

        Raises:
            RuleConfigurationError: If the rule set or any evaluated rule is misconfigured
        """
        rule_set = normalize_rule_set(rules)

        if not rule_set.has_rule(REQUIRED_RULE) and value.strip() == "":
            logger.debug(
                "Skipping rules for empty optional field",
                extra={"rules": rule_set.rule_names},
            )
            return EvaluationResult.passed()

        failure: RuleResult | None = None

        # required first; it always passes on non-blank values
        entries = sorted(rule_set.entries, key=lambda entry: entry.name != REQUIRED_RULE)

        for entry in entries:
            try:
                result = self._evaluate_entry(entry, value)
            except RuleConfigurationError as e:
                self._log_configuration_error(entry.identifier, e)
                raise

            if not result.valid:
                failure = result
                break

        if failure is None:
            return EvaluationResult.passed()

        logger.debug(
            "Field failed validation",
            extra={"rule": failure.rule, "error": failure.message},
        )
        return EvaluationResult.from_failure(failure)

    def _evaluate_entry(self, entry: RuleEntry, value: str) -> RuleResult:
        """Run one resolved rule and build its result."""
        validator = self.registry.get_validator(entry.name)

        validate = getattr(validator, "validate", None)
        if not callable(validate):
            raise MissingPredicateError(entry.name)

        if entry.param is None:
            passed = validate(value)
        else:
            passed = validate(value, entry.param)

        if passed:
            return RuleResult(rule=entry.identifier, valid=True)

        return RuleResult(
            rule=entry.identifier,
            valid=False,
            message=self._error_message(validator, entry),
        )

    @staticmethod
    def _error_message(validator: Any, entry: RuleEntry) -> str:
        """Custom message verbatim if set, else the default with the param filled in."""
        if entry.options is not None and entry.options.message and entry.options.message.strip():
            return entry.options.message

        if entry.param is None:
            return validator.message()
        return validator.message(entry.param)

    @staticmethod
    def _log_configuration_error(rule: str, error: RuleConfigurationError) -> None:
        logger.warning(
            f"Rule configuration error: {error}",
            extra={"rule": rule, "error_type": type(error).__name__},
        )


_default_engine: RuleEngine | None = None


def get_default_engine() -> RuleEngine:
    """Return the shared engine over the built-in registry."""
    global _default_engine
    if _default_engine is None:
        _default_engine = RuleEngine()
    return _default_engine


def evaluate_rule(
    rule: str,
    value: str,
    options: RuleOptions | dict[str, Any] | None = None,
) -> RuleResult:
    """Evaluate a single rule with the built-in validators."""
    return get_default_engine().evaluate_rule(rule, value, options)


def evaluate_rule_set(value: str, rules: Any) -> EvaluationResult:
    """Evaluate a value against a rule set with the built-in validators."""
    return get_default_engine().evaluate_rule_set(value, rules)

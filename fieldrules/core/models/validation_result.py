"""
Result models for single-rule and rule-set evaluation (ephemeral).
"""

from pydantic import BaseModel, ConfigDict, model_validator


class RuleResult(BaseModel):
    """
    Outcome of evaluating one rule against a value.

    Attributes:
        rule: Rule identifier that was evaluated ("min:5")
        valid: Whether the value satisfied the rule
        message: Failure message, empty when valid
    """

    model_config = ConfigDict(frozen=True)

    rule: str
    valid: bool
    message: str = ""

    @model_validator(mode="after")
    def check_message_consistency(self) -> "RuleResult":
        """Validate that valid=True implies an empty message."""
        if self.valid and self.message:
            raise ValueError("valid=True but message is set")
        return self


class EvaluationResult(BaseModel):
    """
    Outcome of evaluating a value against a whole rule set.

    Attributes:
        valid: Overall verdict
        error: Message of the first failing rule, None when valid
        failed_rule: Identifier of the first failing rule, None when valid
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "valid": False,
                "error": "Field should be 5 or more characters",
                "failed_rule": "min:5",
            }
        },
    )

    valid: bool
    error: str | None = None
    failed_rule: str | None = None

    @model_validator(mode="after")
    def check_error_consistency(self) -> "EvaluationResult":
        """Validate that valid=True implies no error."""
        if self.valid and (self.error is not None or self.failed_rule is not None):
            raise ValueError("valid=True but error is set")
        return self

    @classmethod
    def passed(cls) -> "EvaluationResult":
        return cls(valid=True)

    @classmethod
    def from_failure(cls, failure: RuleResult) -> "EvaluationResult":
        return cls(valid=False, error=failure.message, failed_rule=failure.rule)

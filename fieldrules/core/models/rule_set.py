"""
Rule set models: per-rule options, normalized rule entries, and the rule set itself.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuleOptions(BaseModel):
    """
    Per-rule options supplied in the mapping form of a rule set.

    Attributes:
        message: Replaces the default failure message verbatim
        pattern: Param for rules whose key does not embed one ("min:")
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "message": "Password must be at least 8 characters",
                "pattern": "8",
            }
        },
    )

    message: str | None = None
    pattern: str | None = None

    @field_validator("pattern", mode="before")
    @classmethod
    def stringify_numeric_pattern(cls, v):
        """Accept integer patterns ({"pattern": 5}) as their decimal string."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class RuleEntry(BaseModel):
    """
    A single rule after resolution.

    Attributes:
        name: Registered rule name ("min")
        param: Rule parameter, None when the rule carries none
        options: Options from the mapping form, None in list form
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    param: str | None = None
    options: RuleOptions | None = None

    @property
    def identifier(self) -> str:
        """The rule in ``name`` / ``name:param`` form."""
        if self.param is None:
            return self.name
        return f"{self.name}:{self.param}"


class RuleSet(BaseModel):
    """
    An ordered collection of rules applied to one value.

    ``kind`` records which shape the caller supplied: "list" for a sequence of
    rule identifiers, "map" for a mapping of rule keys to options. Entries are
    kept in declaration order, which is evaluation order.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["list", "map"]
    entries: tuple[RuleEntry, ...] = ()

    @property
    def rule_names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def has_rule(self, name: str) -> bool:
        """Return True if any entry uses the named rule."""
        return any(entry.name == name for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

"""Validation models — rule kinds, violations and report structure.

All validation is deterministic: same target → same report.
"""

from enum import Enum
from pydantic import BaseModel, Field


class RuleKind(str, Enum):
    """Predicate families that can be attached to a field."""

    REQUIRED = "required"           # Value must be truthy
    POSITIVE_NUMBER = "positive"    # Value must be a real number > 0


class ValidationViolation(BaseModel):
    """A single failed predicate."""

    field: str
    rule: RuleKind
    message: str

    model_config = {"use_enum_values": True}


class ValidationReport(BaseModel):
    """Field-level outcome of validating one target."""

    passed: bool = Field(description="True if every predicate held")
    target: str = Field(description="Qualified name of the target's class")
    checked: int = Field(default=0, description="Number of predicates evaluated")
    violations: list[ValidationViolation] = Field(default_factory=list)

    @classmethod
    def build(cls, target: str, checked: int, violations: list[ValidationViolation]) -> "ValidationReport":
        """Build a report; the verdict is derived from the violations."""
        return cls(
            passed=not violations,
            target=target,
            checked=checked,
            violations=violations,
        )

    @property
    def failed_fields(self) -> list[str]:
        """Fields with at least one violation, in report order."""
        seen: list[str] = []
        for violation in self.violations:
            if violation.field not in seen:
                seen.append(violation.field)
        return seen

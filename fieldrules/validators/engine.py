"""Validation Engine — evaluates a target against the rules of its class.

Usage:
    validator = Validator(registry)
    if not validator.validate(course):
        # reject the input
    report = validator.report(course)  # field-level diagnostics
"""

import time
from typing import Any, Iterator, NamedTuple

from fieldrules.exceptions import InvalidTargetError
from fieldrules.logging_config import get_logger
from fieldrules.validators.models import RuleKind, ValidationReport, ValidationViolation
from fieldrules.validators.registry import RuleRegistry, qualified_name
from fieldrules.validators.rules import MISSING, get_rule

logger = get_logger(__name__)


class Outcome(NamedTuple):
    """Result of one predicate on one field."""

    field: str
    rule: RuleKind
    passed: bool


class Validator:
    """Evaluates every rule attached to a target's class.

    Design principles:
        - Deterministic: same target → same verdict
        - Exhaustive: every predicate runs, even after a failure
        - Read-only: the target is never mutated
    """

    def __init__(self, registry: RuleRegistry):
        self.registry = registry

    def validate(self, instance: Any) -> bool:
        """True if instance satisfies every rule attached to its exact class."""
        return self.report(instance).passed

    def validate_class(self, cls: type, instance: Any) -> bool:
        """Validate against cls, which must be the exact class of instance."""
        self._check_target(instance)
        if type(instance) is not cls:
            raise InvalidTargetError(
                f"{qualified_name(type(instance))} instance cannot be validated "
                f"against the rules of {qualified_name(cls)}"
            )
        return self.validate(instance)

    def report(self, instance: Any) -> ValidationReport:
        """Run all rules and collect violations in registration order."""
        self._check_target(instance)
        start_time = time.perf_counter()
        cls = type(instance)

        checked = 0
        violations: list[ValidationViolation] = []
        for outcome in self._evaluate(cls, instance):
            checked += 1
            if not outcome.passed:
                violations.append(ValidationViolation(
                    field=outcome.field,
                    rule=outcome.rule,
                    message=get_rule(outcome.rule).describe(outcome.field),
                ))

        report = ValidationReport.build(qualified_name(cls), checked, violations)

        logger.debug(
            "validation_complete",
            target=report.target,
            passed=report.passed,
            checked=checked,
            violations=len(violations),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return report

    def _evaluate(self, cls: type, instance: Any) -> Iterator[Outcome]:
        for field_name, kinds in self.registry.rules_for(cls).items():
            value = self._read(instance, field_name)
            for kind in kinds:
                yield Outcome(field_name, kind, get_rule(kind).check(value))

    @staticmethod
    def _read(instance: Any, field_name: str) -> Any:
        try:
            return getattr(instance, field_name)
        except AttributeError:
            return MISSING

    @staticmethod
    def _check_target(instance: Any) -> None:
        if instance is None:
            raise InvalidTargetError("Cannot validate None")
        if isinstance(instance, type):
            raise InvalidTargetError(
                f"Expected an instance, got the class {qualified_name(instance)}"
            )

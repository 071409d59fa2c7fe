"""Field validation — rule registry and validator.

Usage:
    from fieldrules.validators import RuleRegistry, Validator

    registry = RuleRegistry()
    registry.schema(Course).required("title").positive_number("price")
    validator = Validator(registry)
    validator.validate(Course("TS", 10))  # True
"""

from fieldrules.validators.engine import Validator
from fieldrules.validators.models import RuleKind, ValidationReport, ValidationViolation
from fieldrules.validators.registry import ClassRuleMap, FieldRules, RuleRegistry, SchemaBuilder
from fieldrules.validators.rules import MISSING, BaseRule

__all__ = [
    "Validator",
    "RuleRegistry",
    "SchemaBuilder",
    "ClassRuleMap",
    "FieldRules",
    "RuleKind",
    "ValidationReport",
    "ValidationViolation",
    "BaseRule",
    "MISSING",
]

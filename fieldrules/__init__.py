"""fieldrules — declarative per-field validation.

Rules are registered once per class on an explicit RuleRegistry; a Validator
bound to that registry checks instances against the rules of their class.

The library logs through the "fieldrules" stdlib logger and stays silent
until the host sets up logging. configure_logging() is the setup call for
hosts that want fieldrules' own structlog output.
"""

from fieldrules.exceptions import FieldRulesError, InvalidTargetError, RegistryFrozenError
from fieldrules.logging_config import configure_logging
from fieldrules.validators import (
    MISSING,
    RuleKind,
    RuleRegistry,
    SchemaBuilder,
    ValidationReport,
    ValidationViolation,
    Validator,
)

__version__ = "1.0.0"

__all__ = [
    "RuleRegistry",
    "SchemaBuilder",
    "Validator",
    "RuleKind",
    "ValidationReport",
    "ValidationViolation",
    "MISSING",
    "FieldRulesError",
    "InvalidTargetError",
    "RegistryFrozenError",
    "configure_logging",
]

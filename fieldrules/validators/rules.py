"""Rule predicates — one strategy object per RuleKind.

Each rule is a pure predicate over a single field value. A new kind needs a
RuleKind member, a rule class registered in RULES and a builder helper in
the registry; the engine never changes.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from numbers import Real
from typing import Any

from fieldrules.validators.models import RuleKind


class _Missing:
    """Sentinel for a field the target does not expose."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()


class BaseRule(ABC):
    """Abstract base for field predicates.

    Contract:
        - check() is deterministic and side-effect free
        - check() never raises for any value, including MISSING
    """

    @property
    @abstractmethod
    def kind(self) -> RuleKind:
        ...

    @abstractmethod
    def check(self, value: Any) -> bool:
        """Return True if the predicate holds for value."""
        ...

    @abstractmethod
    def describe(self, field: str) -> str:
        """Message reported when the predicate fails for field."""
        ...


class RequiredRule(BaseRule):
    """Plain truthiness: 0, "", None, empty containers and MISSING all fail."""

    @property
    def kind(self) -> RuleKind:
        return RuleKind.REQUIRED

    def check(self, value: Any) -> bool:
        return bool(value)

    def describe(self, field: str) -> str:
        return f"'{field}' is required"


class PositiveNumberRule(BaseRule):
    """Real number strictly greater than zero. Booleans and strings are not numbers."""

    @property
    def kind(self) -> RuleKind:
        return RuleKind.POSITIVE_NUMBER

    def check(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
            return False
        try:
            return value > 0
        except ArithmeticError:
            # Decimal NaN refuses ordering
            return False

    def describe(self, field: str) -> str:
        return f"'{field}' must be a positive number"


RULES: dict[RuleKind, BaseRule] = {
    rule.kind: rule for rule in (RequiredRule(), PositiveNumberRule())
}


def get_rule(kind: RuleKind) -> BaseRule:
    """Look up the predicate for a rule kind."""
    return RULES[RuleKind(kind)]

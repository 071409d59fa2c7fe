"""Rule Registry — class identity → field name → ordered rule kinds.

The class object is the registry key. Its qualified name is used only for
logging and reports, so same-named classes from different modules never
share rules.

Usage:
    registry = RuleRegistry()
    registry.schema(Course).required("title").positive_number("price")
    registry.freeze()
"""

from types import MappingProxyType
from typing import Mapping, Optional, Union

from fieldrules.config import get_settings
from fieldrules.logging_config import get_logger
from fieldrules.exceptions import RegistryFrozenError
from fieldrules.validators.models import RuleKind

logger = get_logger(__name__)

FieldRules = tuple[RuleKind, ...]
ClassRuleMap = Mapping[str, FieldRules]

_EMPTY: ClassRuleMap = MappingProxyType({})


def qualified_name(cls: type) -> str:
    """Diagnostic name for a class: module.QualName."""
    return f"{cls.__module__}.{cls.__qualname__}"


class RuleRegistry:
    """Process-lifetime store of field rules, populated once per class.

    Constraint: attach() is not idempotent. Attaching the same
    (class, field, kind) twice stores the kind twice and the predicate is
    evaluated twice. Built-in predicates are pure so the verdict is the same,
    but the report lists the violation twice.
    """

    def __init__(self, warn_on_duplicates: Optional[bool] = None):
        if warn_on_duplicates is None:
            warn_on_duplicates = get_settings().WARN_ON_DUPLICATE_RULES
        self.warn_on_duplicates = warn_on_duplicates
        self._rules: dict[type, dict[str, list[RuleKind]]] = {}
        self._frozen = False

    # ── Registration ──

    def attach(self, cls: type, field_name: str, kind: Union[RuleKind, str]) -> None:
        """Record that kind applies to field_name on cls."""
        if not isinstance(cls, type):
            raise TypeError(f"Rules can only be attached to classes, got {type(cls).__name__}")
        if not isinstance(field_name, str) or not field_name:
            raise ValueError("Field name must be a non-empty string")
        kind = RuleKind(kind)

        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot attach '{kind.value}' to {qualified_name(cls)}.{field_name}: registry is frozen"
            )

        field_rules = self._rules.setdefault(cls, {}).setdefault(field_name, [])
        if kind in field_rules and self.warn_on_duplicates:
            logger.warning(
                "duplicate_rule_attached",
                target=qualified_name(cls),
                field=field_name,
                rule=kind.value,
            )
        field_rules.append(kind)

        logger.debug(
            "rule_attached",
            target=qualified_name(cls),
            field=field_name,
            rule=kind.value,
        )

    def schema(self, cls: type) -> "SchemaBuilder":
        """Start a fluent rule definition for cls."""
        return SchemaBuilder(self, cls)

    def freeze(self) -> None:
        """End the registration phase. Later attach() calls raise."""
        if not self._frozen:
            self._frozen = True
            logger.info("registry_frozen", classes=len(self._rules))

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Lookup ──

    def rules_for(self, cls: type) -> ClassRuleMap:
        """Read-only field → rules map for cls; empty for unregistered classes."""
        class_rules = self._rules.get(cls)
        if not class_rules:
            return _EMPTY
        return MappingProxyType({name: tuple(kinds) for name, kinds in class_rules.items()})

    def classes(self) -> list[type]:
        """Registered classes in registration order."""
        return list(self._rules)

    def __contains__(self, cls: object) -> bool:
        return cls in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<RuleRegistry classes={len(self._rules)} {state}>"


class SchemaBuilder:
    """Fluent registration for one class: one helper per RuleKind."""

    def __init__(self, registry: RuleRegistry, cls: type):
        self.registry = registry
        self.cls = cls

    def required(self, field_name: str) -> "SchemaBuilder":
        self.registry.attach(self.cls, field_name, RuleKind.REQUIRED)
        return self

    def positive_number(self, field_name: str) -> "SchemaBuilder":
        self.registry.attach(self.cls, field_name, RuleKind.POSITIVE_NUMBER)
        return self

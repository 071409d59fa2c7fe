"""Course model and its field rules."""

from dataclasses import dataclass

from fieldrules.validators.registry import RuleRegistry, SchemaBuilder


@dataclass
class Course:
    """A course offered for sale."""

    title: str
    price: float


def register_course_rules(registry: RuleRegistry) -> SchemaBuilder:
    """Attach Course rules: title is required, price must be positive."""
    return registry.schema(Course).required("title").positive_number("price")

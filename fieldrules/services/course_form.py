"""Course form handler — builds a Course from submitted form fields and validates it."""

import math
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from fieldrules.config import get_settings
from fieldrules.logging_config import get_logger
from fieldrules.models.course import Course, register_course_rules
from fieldrules.validators import RuleRegistry, ValidationViolation, Validator

logger = get_logger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input, please try again!"


class FormResult(BaseModel):
    """Outcome of a form submission."""

    accepted: bool
    message: str = ""
    course: Optional[dict] = None
    violations: list[ValidationViolation] = Field(default_factory=list)


def parse_price(raw: Optional[str]) -> float:
    """Numeric coercion of a price field.

    Blank input is 0 and anything that is not a plain decimal number is NaN,
    so both fail the positive-number rule instead of raising. Digit
    separators ("1_000") count as unparsable.
    """
    text = (raw or "").strip()
    if not text:
        return 0.0
    if "_" in text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


class CourseFormHandler:
    """Owns the Course rule registry and validates submissions against it."""

    def __init__(self, registry: Optional[RuleRegistry] = None):
        if registry is None:
            registry = RuleRegistry()
            register_course_rules(registry)
            if get_settings().FREEZE_REGISTRY:
                registry.freeze()
        self.registry = registry
        self.validator = Validator(registry)

    def build_course(self, form: Mapping[str, str]) -> Course:
        return Course(title=form.get("title", ""), price=parse_price(form.get("price")))

    def submit(self, form: Mapping[str, str]) -> FormResult:
        """Validate a submission; rejected input is a normal result, not an error."""
        course = self.build_course(form)
        report = self.validator.report(course)

        if not report.passed:
            logger.warning(
                "course_rejected",
                fields=report.failed_fields,
                violations=len(report.violations),
            )
            return FormResult(
                accepted=False,
                message=INVALID_INPUT_MESSAGE,
                violations=report.violations,
            )

        logger.info("course_accepted", title=course.title, price=course.price)
        return FormResult(
            accepted=True,
            course={"title": course.title, "price": course.price},
        )

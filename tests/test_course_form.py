import math

import pytest
from structlog.testing import capture_logs

from fieldrules.exceptions import RegistryFrozenError
from fieldrules.models.course import Course
from fieldrules.services.course_form import (
    INVALID_INPUT_MESSAGE,
    CourseFormHandler,
    parse_price,
)
from fieldrules.validators import RuleKind, RuleRegistry


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("10", 10.0),
        (" 29.99 ", 29.99),
        ("-5", -5.0),
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
    ],
)
def test_parse_price(raw, expected):
    assert parse_price(raw) == expected


@pytest.mark.parametrize("raw", ["ten", "1,000", "$5", "1_000", "0x10"])
def test_parse_price_unparsable_is_nan(raw):
    assert math.isnan(parse_price(raw))


class TestCourseFormHandler:
    @pytest.fixture
    def handler(self):
        return CourseFormHandler()

    def test_valid_submission_accepted(self, handler):
        with capture_logs() as logs:
            result = handler.submit({"title": "TS", "price": "10"})

        assert result.accepted is True
        assert result.course == {"title": "TS", "price": 10.0}
        assert result.violations == []
        assert "course_accepted" in [entry["event"] for entry in logs]

    @pytest.mark.parametrize(
        "form,failed",
        [
            ({"title": "", "price": "10"}, ["title"]),
            ({"title": "TS", "price": "0"}, ["price"]),
            ({"title": "TS", "price": "-5"}, ["price"]),
            ({"title": "TS", "price": "abc"}, ["price"]),
            ({"title": "TS"}, ["price"]),
            ({}, ["title", "price"]),
        ],
    )
    def test_invalid_submission_rejected(self, handler, form, failed):
        with capture_logs() as logs:
            result = handler.submit(form)

        assert result.accepted is False
        assert result.message == INVALID_INPUT_MESSAGE
        assert result.course is None
        assert [v.field for v in result.violations] == failed

        rejected = next(entry for entry in logs if entry["event"] == "course_rejected")
        assert rejected["log_level"] == "warning"
        assert rejected["fields"] == failed

    def test_build_course(self, handler):
        assert handler.build_course({"title": "TS", "price": "12.5"}) == Course("TS", 12.5)

    def test_default_registry_is_frozen(self, handler):
        assert handler.registry.frozen is True
        with pytest.raises(RegistryFrozenError):
            handler.registry.attach(Course, "title", RuleKind.REQUIRED)

    def test_freeze_follows_settings(self, monkeypatch):
        monkeypatch.setenv("FIELDRULES_FREEZE_REGISTRY", "0")
        handler = CourseFormHandler()
        assert handler.registry.frozen is False

    def test_injected_registry(self):
        registry = RuleRegistry()
        registry.schema(Course).required("title")
        handler = CourseFormHandler(registry)

        result = handler.submit({"title": "TS", "price": "-1"})

        assert handler.registry is registry
        assert result.accepted is True

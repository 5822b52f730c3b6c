"""
Tests for the date capability and the date rules.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from modules.validation import DateParser, InputValidator, RuleContext
from modules.validation.core.dates import compile_format
from modules.validation.rules.date_rules import DateRule
from shared.utils.config import settings


def errors_for(data, rules):
    return InputValidator().collect_errors(data, rules)


class TestCompileFormat:

    def test_translates_tokens(self):
        assert compile_format("YYYY-MM-DD")[1] == "%Y-%m-%d"
        assert compile_format("MM/DD/YYYY")[1] == "%m/%d/%Y"
        assert compile_format("DD MMM YYYY HH:mm:ss")[1] == "%d %b %Y %H:%M:%S"
        assert compile_format("hh:mm A")[1] == "%I:%M %p"

    def test_bracketed_text_is_literal(self):
        pattern, strptime_fmt = compile_format("YYYY-MM-DD[T]HH:mm")
        assert strptime_fmt == "%Y-%m-%dT%H:%M"
        assert pattern.fullmatch("2024-01-31T10:15")

    def test_percent_is_escaped(self):
        assert compile_format("YYYY%")[1] == "%Y%%"


class TestDateParser:

    def test_strict_requires_exact_widths(self):
        parser = DateParser()
        assert parser.parse_strict("2000-01-01", "YYYY-MM-DD") == datetime(2000, 1, 1)
        assert parser.parse_strict("2000-1-1", "YYYY-MM-DD") is None
        assert parser.parse_strict("2000-01-01 ", "YYYY-MM-DD") is None

    def test_strict_rejects_impossible_dates(self):
        parser = DateParser()
        assert parser.parse_strict("2023-02-29", "YYYY-MM-DD") is None
        assert parser.parse_strict("2024-02-29", "YYYY-MM-DD") == datetime(2024, 2, 29)
        assert parser.parse_strict("2024-13-01", "YYYY-MM-DD") is None

    def test_strict_accepts_date_objects(self):
        parser = DateParser()
        assert parser.parse_strict(date(2020, 5, 1), "YYYY-MM-DD") == datetime(2020, 5, 1)
        assert parser.parse_strict(12345, "YYYY-MM-DD") is None

    def test_lenient_parse(self):
        parser = DateParser()
        assert parser.parse("2024-06-15") == datetime(2024, 6, 15)
        assert parser.parse("2024-06-15T10:00:00+00:00") == datetime(2024, 6, 15, 10, tzinfo=timezone.utc)
        assert parser.parse("June 15, 2024") == datetime(2024, 6, 15)
        assert parser.parse("not-a-date") is None
        assert parser.parse("") is None
        assert parser.parse(None) is None
        assert parser.parse(20240615.5) is None


class TestDateRule:

    def test_default_format(self):
        assert errors_for({"birthdate": "2000-01-01"}, {"birthdate": "date"}) == {}

    def test_invalid_date(self):
        assert errors_for({"birthdate": "not-a-date"}, {"birthdate": "date"}) == {
            "birthdate": "birthdate must be a valid date with format YYYY-MM-DD"
        }

    def test_custom_format(self):
        assert errors_for({"birthdate": "01/01/2000"}, {"birthdate": "date:MM/DD/YYYY"}) == {}
        assert errors_for({"birthdate": "2000-01-01"}, {"birthdate": "date:MM/DD/YYYY"}) == {
            "birthdate": "birthdate must be a valid date with format MM/DD/YYYY"
        }

    def test_format_with_colons(self):
        assert errors_for({"at": "09:30"}, {"at": "date:HH:mm"}) == {}
        assert errors_for({"at": "9:30"}, {"at": "date:HH:mm"}) == {
            "at": "at must be a valid date with format HH:mm"
        }

    def test_empty_param_uses_default_format(self):
        assert errors_for({"d": "2000-01-01"}, {"d": "date:"}) == {}

    def test_none_passes(self):
        assert errors_for({}, {"birthdate": "date"}) == {}

    def test_non_string_fails(self):
        assert "birthdate" in errors_for({"birthdate": 20000101}, {"birthdate": "date"})


class TestRelativeDates:

    def test_future_date_passes_future(self, frozen_validator):
        assert frozen_validator.collect_errors({"event": "2025-06-15"}, {"event": "future"}) == {}

    def test_past_date_fails_future(self, frozen_validator):
        assert frozen_validator.collect_errors({"event": "2023-06-15"}, {"event": "future"}) == {
            "event": "event must be a future date"
        }

    def test_past_date_passes_past(self, frozen_validator):
        assert frozen_validator.collect_errors({"birthdate": "2023-06-15"}, {"birthdate": "past"}) == {}

    def test_future_date_fails_past(self, frozen_validator):
        assert frozen_validator.collect_errors({"birthdate": "2025-06-15"}, {"birthdate": "past"}) == {
            "birthdate": "birthdate must be a past date"
        }

    def test_now_is_neither_future_nor_past(self, frozen_validator, frozen_clock):
        now = frozen_clock.isoformat()
        assert frozen_validator.collect_errors({"t": now}, {"t": "future"}) == {"t": "t must be a future date"}
        assert frozen_validator.collect_errors({"t": now}, {"t": "past"}) == {"t": "t must be a past date"}

    def test_aware_values_compare_in_utc(self, frozen_validator):
        assert frozen_validator.collect_errors({"t": "2024-06-15T13:00:00Z"}, {"t": "future"}) == {}
        assert frozen_validator.collect_errors({"t": "2024-06-15T11:00:00Z"}, {"t": "past"}) == {}

    def test_datetime_objects(self, frozen_validator, frozen_clock):
        later = frozen_clock + timedelta(minutes=1)
        assert frozen_validator.collect_errors({"t": later}, {"t": "future"}) == {}

    @pytest.mark.parametrize("spec", ["future", "past"])
    @pytest.mark.parametrize("value", ["not-a-date", None, 42])
    def test_unparseable_values_fail(self, frozen_validator, spec, value):
        assert frozen_validator.collect_errors({"t": value}, {"t": spec}) == {"t": "t is not a valid date"}

    @pytest.mark.parametrize("spec", ["nullable|future", "nullable|past"])
    def test_nullable_allows_absent_dates(self, frozen_validator, spec):
        assert frozen_validator.collect_errors({}, {"t": spec}) == {}

    def test_real_clock(self):
        now = datetime.now()
        tomorrow = (now + timedelta(days=365)).strftime("%Y-%m-%d")
        last_year = (now - timedelta(days=365)).strftime("%Y-%m-%d")
        assert errors_for({"a": tomorrow, "b": last_year}, {"a": "future", "b": "past"}) == {}

    def test_clock_belongs_to_the_validator(self, frozen_validator):
        # 2025-01-01 is ahead of the frozen clock but behind the real one
        data, rules = {"t": "2025-01-01"}, {"t": "future"}

        assert frozen_validator.collect_errors(data, rules) == {}
        assert InputValidator().collect_errors(data, rules) == {"t": "t must be a future date"}
        assert frozen_validator.collect_errors(data, rules) == {}


class TestRuleContext:

    def test_default_context_uses_settings_format(self):
        assert DateRule().value == settings.VALIDATION_DEFAULT_DATE_FORMAT

    def test_context_format_applies_without_parameter(self):
        context = RuleContext(default_date_format="DD/MM/YYYY")
        assert DateRule(None, context).value == "DD/MM/YYYY"
        assert DateRule("YYYY", context).value == "YYYY"

    def test_validator_passes_its_parser_to_rules(self):
        parser = DateParser()
        validator = InputValidator(date_parser=parser)
        assert validator.context.dates is parser

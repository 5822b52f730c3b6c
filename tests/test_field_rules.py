"""
Tests for presence, length, choice and type rules.
"""

import pytest

from modules.validation import InputValidator, RuleConfigurationError
from modules.validation.rules.field_rules import MinRule, RequiredRule


def errors_for(data, rules):
    return InputValidator().collect_errors(data, rules)


class TestPresence:

    @pytest.mark.parametrize("value", [None, ""])
    def test_required_fails_on_missing_values(self, value):
        assert errors_for({"name": value}, {"name": "required"}) == {"name": "name is required"}

    @pytest.mark.parametrize("value", ["John", 0, False, " ", []])
    def test_required_passes_on_anything_else(self, value):
        assert errors_for({"name": value}, {"name": "required"}) == {}

    def test_required_fails_on_absent_key(self):
        assert errors_for({}, {"name": "required"}) == {"name": "name is required"}

    def test_not_empty_only_rejects_empty_string(self):
        assert errors_for({"name": ""}, {"name": "not-empty"}) == {"name": "name cannot be blank"}
        assert errors_for({"name": None}, {"name": "not-empty"}) == {}

    def test_nullable_alone_never_fails(self):
        assert errors_for({"note": None}, {"note": "nullable"}) == {}
        assert errors_for({"note": 5}, {"note": "nullable"}) == {}

    def test_rule_result_shape(self):
        result = RequiredRule().evaluate("name", "", {"name": ""})
        assert result.passed is False
        assert result.rule_name == "required"
        assert result.field == "name"
        assert result.message == "name is required"

    def test_passing_result_has_no_message(self):
        assert RequiredRule().evaluate("name", "x", {}).message == ""


class TestLength:

    def test_min(self):
        assert errors_for({"username": "johndoe"}, {"username": "min:6"}) == {}
        assert errors_for({"username": "john"}, {"username": "min:6"}) == {
            "username": "username must be at least 6 characters long"
        }

    def test_max(self):
        assert errors_for({"username": "john"}, {"username": "max:10"}) == {}
        assert errors_for({"username": "johndoesmith"}, {"username": "max:10"}) == {
            "username": "username cannot be more than 10 characters long"
        }

    def test_digits(self):
        assert errors_for({"zipcode": "12345"}, {"zipcode": "digits:5"}) == {}
        assert errors_for({"zipcode": "123456"}, {"zipcode": "digits:5"}) == {
            "zipcode": "zipcode should be exactly 5 characters long"
        }

    @pytest.mark.parametrize("spec", ["min:3", "max:1", "digits:2"])
    def test_non_strings_are_not_checked(self, spec):
        assert errors_for({"code": 12345}, {"code": spec}) == {}
        assert errors_for({"code": None}, {"code": spec}) == {}

    def test_boundaries_are_inclusive(self):
        assert errors_for({"u": "abc"}, {"u": "min:3|max:3"}) == {}

    @pytest.mark.parametrize("param", [None, "", "abc", "3.5"])
    def test_malformed_length_param_is_a_configuration_error(self, param):
        with pytest.raises(RuleConfigurationError) as exc_info:
            MinRule(param)
        assert exc_info.value.rule_name == "min"


class TestChoice:

    def test_value_in_list(self):
        assert errors_for({"role": "admin"}, {"role": "in:admin,user,guest"}) == {}

    def test_value_not_in_list(self):
        assert errors_for({"role": "superuser"}, {"role": "in:admin,user,guest"}) == {
            "role": "role must be one of the following values: admin, user, guest"
        }

    def test_non_string_values_are_not_checked(self):
        assert errors_for({"role": 1}, {"role": "in:admin,user"}) == {}

    def test_missing_list_is_a_configuration_error(self):
        with pytest.raises(RuleConfigurationError):
            errors_for({"role": "admin"}, {"role": "in"})


class TestTypes:

    def test_string(self):
        assert errors_for({"name": "John"}, {"name": "string"}) == {}
        assert errors_for({"name": 123}, {"name": "string"}) == {"name": "name must be a string"}

    @pytest.mark.parametrize("value", [25, 0, -3, 25.0])
    def test_integer_accepts_whole_numbers(self, value):
        assert errors_for({"age": value}, {"age": "integer"}) == {}

    @pytest.mark.parametrize("value", ["25", 25.5, True, float("nan")])
    def test_integer_rejects_everything_else(self, value):
        assert errors_for({"age": value}, {"age": "integer"}) == {"age": "age must be an integer"}

    def test_boolean(self):
        assert errors_for({"active": True}, {"active": "boolean"}) == {}
        assert errors_for({"active": False}, {"active": "boolean"}) == {}
        assert errors_for({"active": "yes"}, {"active": "boolean"}) == {"active": "active must be a boolean"}
        assert errors_for({"active": 1}, {"active": "boolean"}) == {"active": "active must be a boolean"}

    @pytest.mark.parametrize("spec", ["string", "integer", "boolean"])
    def test_type_rules_ignore_none(self, spec):
        assert errors_for({"x": None}, {"x": spec}) == {}

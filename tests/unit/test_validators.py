"""
Unit tests for validation rules.

Includes property-based testing with hypothesis for validators.
"""

from types import MappingProxyType

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fieldrules.core.validators import (
    CustomValidator,
    InvalidParamError,
    MatchValidator,
    RegexValidator,
    RequiredFieldValidator,
    UnknownRuleError,
    ValidatorRegistry,
    default_registry,
)


@pytest.fixture
def rule(registry):
    """Look up a built-in validator by name"""
    return registry.get_validator


class TestRequiredFieldValidator:
    """Tests for RequiredFieldValidator"""

    def test_non_empty_value_passes(self):
        """Test validation passes for a non-empty value"""
        assert RequiredFieldValidator().validate("John Doe") is True

    def test_empty_string_fails(self):
        """Test validation fails for an empty string"""
        assert RequiredFieldValidator().validate("") is False

    def test_whitespace_only_fails(self):
        """Test validation fails for whitespace-only values"""
        assert RequiredFieldValidator().validate("  \t\n ") is False

    def test_default_message(self):
        assert RequiredFieldValidator().message() == "Field is required"

    @given(st.text(min_size=1).filter(lambda s: s.strip() != ""))
    def test_property_any_nonempty_string_passes(self, value):
        """Property test: any non-empty, non-whitespace string should pass"""
        assert RequiredFieldValidator().validate(value) is True


class TestLengthValidators:
    """Tests for eq, max and min"""

    def test_eq(self, rule):
        assert rule("eq").validate("abc", "3") is True
        assert rule("eq").validate("abcd", "3") is False

    def test_max_at_boundary(self, rule):
        assert rule("max").validate("abc", "3") is True
        assert rule("max").validate("abcd", "3") is False

    def test_min_at_boundary(self, rule):
        assert rule("min").validate("abcde", "5") is True
        assert rule("min").validate("abcd", "5") is False

    def test_messages_interpolate_param(self, rule):
        assert rule("eq").message("4") == "Field should be 4 characters"
        assert rule("max").message("10") == "Field can not exceed 10 characters"
        assert rule("min").message("5") == "Field should be 5 or more characters"

    @pytest.mark.parametrize("name", ["eq", "max", "min", "gt", "lt", "float"])
    @pytest.mark.parametrize("param", ["abc", "-1", "2.5", "", None])
    def test_non_numeric_param_raises_error(self, rule, name, param):
        """Test numeric rules reject malformed params instead of failing the value"""
        with pytest.raises(InvalidParamError) as exc_info:
            rule(name).validate("12", param)

        assert exc_info.value.rule_name == name
        assert "numeric" in str(exc_info.value)

    @given(st.text(max_size=20), st.integers(min_value=0, max_value=25))
    def test_property_min_max_agree_with_len(self, value, length):
        """Property test: min/max match len() comparisons"""
        registry = default_registry()
        assert registry["min"].validate(value, str(length)) is (len(value) >= length)
        assert registry["max"].validate(value, str(length)) is (len(value) <= length)


class TestRangeValidators:
    """Tests for gt and lt"""

    def test_greater_than(self, rule):
        assert rule("gt").validate("11", "10") is True
        assert rule("gt").validate("10", "10") is False
        assert rule("gt").validate("10.5", "10") is True

    def test_less_than(self, rule):
        assert rule("lt").validate("9", "10") is True
        assert rule("lt").validate("10", "10") is False
        assert rule("lt").validate("-5", "10") is True

    def test_non_numeric_value_fails(self, rule):
        """Test non-numeric values fail rather than raise"""
        assert rule("gt").validate("abc", "1") is False
        assert rule("lt").validate("abc", "1") is False
        assert rule("lt").validate("nan", "1") is False

    def test_messages(self, rule):
        assert rule("gt").message("17") == "Field must be greater than 17"
        assert rule("lt").message("100") == "Field must be less than 100"

    @given(st.integers(min_value=0, max_value=10_000), st.integers(min_value=0, max_value=10_000))
    def test_property_integer_comparisons(self, value, bound):
        """Property test: gt/lt agree with integer comparison"""
        registry = default_registry()
        assert registry["gt"].validate(str(value), str(bound)) is (value > bound)
        assert registry["lt"].validate(str(value), str(bound)) is (value < bound)

    @pytest.mark.parametrize("value", ["1_000", "infinity", "Infinity", "nan", "١٢", "1e", ".", ""])
    def test_non_decimal_notation_fails(self, rule, value):
        """Test values float() would accept but are not plain decimals fail both rules"""
        assert rule("gt").validate(value, "5") is False
        assert rule("lt").validate(value, "5") is False

    def test_decimal_notation_variants(self, rule):
        assert rule("gt").validate(" 12 ", "5") is True
        assert rule("gt").validate("1e3", "5") is True
        assert rule("lt").validate("+.5", "5") is True


class TestDecimalValidator:
    """Tests for float"""

    def test_exact_decimals_pass(self, rule):
        assert rule("float").validate("10.50", "2") is True

    def test_wrong_decimal_count_fails(self, rule):
        assert rule("float").validate("10.5", "2") is False
        assert rule("float").validate("10.500", "2") is False

    def test_missing_decimal_point_fails(self, rule):
        assert rule("float").validate("10", "2") is False

    def test_sign_not_accepted(self, rule):
        assert rule("float").validate("-1.00", "2") is False

    def test_message(self, rule):
        assert rule("float").message("2") == "Field must be numeric with 2 decimals"

    def test_large_param_fails_without_error(self, rule):
        assert rule("float").validate("1.5", "4294967296") is False
        assert rule("float").validate("1." + "0" * 70000, "70000") is True


class TestRegexValidator:
    """Tests for the pattern-based built-ins"""

    @pytest.mark.parametrize("value,expected", [
        ("abc123", True),
        ("1a", True),
        ("abc", False),
        ("123", False),
        ("abc-123", False),
    ])
    def test_alpha_numeric(self, rule, value, expected):
        assert rule("alpha-numeric").validate(value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("test@example.com", True),
        ("first.last@sub.example.org", True),
        ("test@example", False),
        ("te st@example.com", False),
        ("@example.com", False),
    ])
    def test_email(self, rule, value, expected):
        assert rule("email").validate(value) is expected

    def test_has_int(self, rule):
        assert rule("has-int").validate("abc1def") is True
        assert rule("has-int").validate("abcdef") is False

    def test_lower_and_upper(self, rule):
        assert rule("lower").validate("ABc") is True
        assert rule("lower").validate("ABC") is False
        assert rule("upper").validate("abC") is True
        assert rule("upper").validate("abc") is False

    def test_mixed_case(self, rule):
        assert rule("mixedCase").validate("aB") is True
        assert rule("mixedCase").validate("ab") is False
        assert rule("mixedCase").validate("AB") is False

    def test_numeric(self, rule):
        assert rule("numeric").validate("0123") is True
        assert rule("numeric").validate("12a") is False
        assert rule("numeric").validate("12.5") is False
        assert rule("numeric").validate("123\n") is False

    def test_phone(self, rule):
        assert rule("phone").validate("+11234567890") is True
        assert rule("phone").validate("+1123456789") is False
        assert rule("phone").validate("11234567890") is False
        assert rule("phone").validate("+441234567890") is False

    def test_symbol(self, rule):
        for value in ["abc!", "a b#", "x|y", "back\\slash", "tick`"]:
            assert rule("symbol").validate(value) is True
        assert rule("symbol").validate("abc 123") is False

    @pytest.mark.parametrize("value,expected", [
        ("123e4567-e89b-12d3-a456-426614174000", True),
        ("123E4567-E89B-12D3-A456-426614174000", True),
        ("123e4567-e89b-62d3-a456-426614174000", False),
        ("123e4567-e89b-12d3-c456-426614174000", False),
        ("123e4567e89b12d3a456426614174000", False),
        ("not-a-uuid", False),
    ])
    def test_uuid(self, rule, value, expected):
        assert rule("uuid").validate(value) is expected

    def test_param_is_ignored(self, rule):
        """Test rules without a param behave the same when given None"""
        assert rule("email").validate("test@example.com", None) is True
        assert rule("email").validate("test@example.com") is True

    def test_invalid_pattern_raises_error(self):
        with pytest.raises(ValueError, match="Invalid regex pattern"):
            RegexValidator("broken", "([a-z", "Broken")


class TestChoiceValidators:
    """Tests for in and match"""

    def test_in_exact_token(self, rule):
        assert rule("in").validate("green", "red,green,blue") is True
        assert rule("in").validate("Green", "red,green,blue") is False
        assert rule("in").validate("red,green", "red,green,blue") is False

    def test_in_message(self, rule):
        assert rule("in").message("a,b") == "Field must contain one of the following: `a,b`"

    def test_match_plain_param(self, rule):
        assert rule("match").validate("abc", "abc") is True
        assert rule("match").validate("abd", "abc") is False

    def test_match_cross_field(self, rule):
        assert rule("match").validate("secret", "Password|secret") is True
        assert rule("match").validate("secret", "Password|other") is False

    def test_match_value_may_contain_pipes(self, rule):
        assert rule("match").validate("a|b", "Token|a|b") is True

    def test_match_message_uses_label(self, rule):
        assert rule("match").message("Password|secret") == "Field must match with `Password`"
        assert rule("match").message("abc") == "Field must match with `abc`"

    @pytest.mark.parametrize("name", ["in", "match"])
    def test_missing_param_raises_error(self, rule, name):
        with pytest.raises(InvalidParamError):
            rule(name).validate("abc")

    def test_split_param(self):
        assert MatchValidator.split_param("Email|a@b.c") == ("Email", "a@b.c")
        assert MatchValidator.split_param("plain") == ("plain", "plain")


class TestCustomValidator:
    """Tests for CustomValidator"""

    def test_predicate_called_with_value_and_param(self):
        calls = []

        def starts_with(value, param):
            calls.append((value, param))
            return value.startswith(param)

        validator = CustomValidator("prefix", starts_with, "Field must start with {param}", requires_param=True)

        assert validator.validate("INV-001", "INV-") is True
        assert validator.validate("PO-001", "INV-") is False
        assert calls == [("INV-001", "INV-"), ("PO-001", "INV-")]
        assert validator.message("INV-") == "Field must start with INV-"

    def test_requires_param(self):
        validator = CustomValidator("prefix", lambda v, p: True, requires_param=True)
        with pytest.raises(InvalidParamError):
            validator.validate("abc")

    def test_non_callable_predicate_raises_error(self):
        with pytest.raises(ValueError, match="callable"):
            CustomValidator("broken", "not callable")

    def test_message_substitutes_only_param_placeholder(self):
        validator = CustomValidator("json", lambda v, p: False, "Must look like {a: 1}")

        assert validator.message() == "Must look like {a: 1}"
        assert validator.message("5") == "Must look like {a: 1}"

    def test_message_keeps_other_braces(self):
        validator = CustomValidator("keyed", lambda v, p: False, "Key {param} in {data}")
        assert validator.message("id") == "Key id in {data}"


class TestValidatorRegistry:
    """Tests for ValidatorRegistry"""

    def test_builtin_rules_registered(self, registry):
        assert sorted(registry) == sorted([
            "alpha-numeric", "email", "eq", "float", "gt", "has-int", "in",
            "lower", "lt", "match", "max", "min", "mixedCase", "numeric",
            "phone", "required", "symbol", "upper", "uuid",
        ])

    def test_unknown_rule_raises_error(self, registry):
        with pytest.raises(UnknownRuleError) as exc_info:
            registry.get_validator("emial")

        assert exc_info.value.rule_name == "emial"

    def test_registry_is_read_only(self, registry):
        with pytest.raises(TypeError):
            registry["email"] = None
        assert isinstance(registry._validators, MappingProxyType)

    def test_extend_returns_new_registry(self, registry):
        custom = CustomValidator("even", lambda v, p: int(v) % 2 == 0, "Field must be even")
        extended = registry.extend(custom)

        assert extended.get_validator("even") is custom
        assert "even" not in registry
        assert len(extended) == len(registry) + 1

    def test_extend_can_override_builtin(self, registry):
        strict = RegexValidator("email", r"^[a-z]+@example\.com\Z", "Use your example.com address")
        extended = registry.extend(strict)

        assert extended["email"] is strict
        assert registry["email"] is not strict

    def test_from_validators_keys_by_name(self):
        registry = ValidatorRegistry.from_validators(RequiredFieldValidator())
        assert list(registry) == ["required"]

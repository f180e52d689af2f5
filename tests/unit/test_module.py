"""
Unit tests for ValidationModule and the registration surface.

Covers:
  • apply_to_config_builder registers the same resolvers for fields and methods
  • pattern resolver only registered with INCLUDE_PATTERN_EXPRESSIONS
  • ConfigPart.resolve first-opinion-wins evaluation
  • ConfigBuilder.part_for dispatch on member shape
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from schema_constraints.annotations import DecimalMin, Email, NotBlank, Pattern, Size
from schema_constraints.members import FieldMember, MemberShape, MethodMember, pair_members
from schema_constraints.resolver import (
    ConfigBuilder,
    ConfigPart,
    ConstraintKeyword,
    ValidationModule,
    ValidationOption,
)

_ALWAYS_REGISTERED = [
    "with_nullable_check",
    "with_array_min_items_resolver",
    "with_array_max_items_resolver",
    "with_string_min_length_resolver",
    "with_string_max_length_resolver",
    "with_string_format_resolver",
    "with_number_inclusive_minimum_resolver",
    "with_number_exclusive_minimum_resolver",
    "with_number_inclusive_maximum_resolver",
    "with_number_exclusive_maximum_resolver",
]


@pytest.fixture
def mock_builder():
    builder = MagicMock()
    builder.for_fields.return_value = MagicMock(name="field_part")
    builder.for_methods.return_value = MagicMock(name="method_part")
    return builder


# ── Registration ──────────────────────────────────────────────────────────────

class TestApplyToConfigBuilder:
    def test_both_targets_requested_once(self, mock_builder):
        ValidationModule().apply_to_config_builder(mock_builder)
        mock_builder.for_fields.assert_called_once_with()
        mock_builder.for_methods.assert_called_once_with()

    @pytest.mark.parametrize("target", ["for_fields", "for_methods"])
    def test_default_registrations(self, mock_builder, target):
        ValidationModule().apply_to_config_builder(mock_builder)
        part = getattr(mock_builder, target).return_value
        for method in _ALWAYS_REGISTERED:
            getattr(part, method).assert_called_once()
        part.with_string_pattern_resolver.assert_not_called()

    @pytest.mark.parametrize("target", ["for_fields", "for_methods"])
    def test_pattern_registered_when_enabled(self, mock_builder, target):
        ValidationModule(ValidationOption.INCLUDE_PATTERN_EXPRESSIONS).apply_to_config_builder(mock_builder)
        part = getattr(mock_builder, target).return_value
        part.with_string_pattern_resolver.assert_called_once()

    def test_registered_callbacks_are_the_module_resolvers(self, mock_builder):
        module = ValidationModule()
        module.apply_to_config_builder(mock_builder)
        part = mock_builder.for_fields.return_value
        (callback,), _ = part.with_nullable_check.call_args
        assert callback == module.resolvers.is_nullable

    def test_idn_option_reaches_format_resolver(self, mock_builder):
        ValidationModule("prefer_idn_email_format").apply_to_config_builder(mock_builder)
        part = mock_builder.for_methods.return_value
        (callback,), _ = part.with_string_format_resolver.call_args
        assert callback(MethodMember("mail", str, [Email()])) == "idn-email"


# ── Reference registration surface ────────────────────────────────────────────

class TestConfigPart:
    def test_with_methods_chain(self):
        part = ConfigPart(MemberShape.FIELD)
        assert part.with_nullable_check(lambda m: None) is part

    def test_first_opinion_wins(self):
        part = ConfigPart(MemberShape.FIELD)
        part.with_string_max_length_resolver(lambda m: None)
        part.with_string_max_length_resolver(lambda m: 12)
        part.with_string_max_length_resolver(lambda m: 99)
        assert part.resolve(FieldMember("v", str)) == {"maxLength": 12}

    def test_keywords_without_opinion_omitted(self):
        part = ConfigPart(MemberShape.METHOD)
        part.with_string_format_resolver(lambda m: None)
        assert part.resolve(MethodMember("v", str)) == {}
        assert part.keywords == [ConstraintKeyword.FORMAT]


class TestConfigBuilder:
    def test_targets_are_stable(self):
        builder = ConfigBuilder()
        assert builder.for_fields() is builder.for_fields()
        assert builder.for_methods() is not builder.for_fields()

    def test_part_for_dispatches_on_shape(self):
        builder = ConfigBuilder()
        assert builder.part_for(FieldMember("a", int)) is builder.for_fields()
        assert builder.part_for(MethodMember("a", int)) is builder.for_methods()


class TestEndToEnd:
    @pytest.fixture
    def email_pair(self):
        fld = FieldMember("_email", str, [NotBlank(), Email(regexp=r".+@corp\.io")])
        acc = MethodMember("email", str, [Size(max=254)])
        pair_members(fld, acc)
        return fld, acc

    def test_default_module(self, email_pair):
        builder = ConfigBuilder()
        ValidationModule().apply_to_config_builder(builder)
        fld, acc = email_pair
        expected = {"nullable": False, "minLength": 1, "maxLength": 254, "format": "email"}
        assert builder.resolve(fld) == expected
        assert builder.resolve(acc) == expected

    def test_pattern_only_with_option(self, email_pair):
        fld, _ = email_pair
        plain, with_patterns = ConfigBuilder(), ConfigBuilder()
        ValidationModule().apply_to_config_builder(plain)
        ValidationModule(ValidationOption.INCLUDE_PATTERN_EXPRESSIONS).apply_to_config_builder(with_patterns)
        assert "pattern" not in plain.resolve(fld)
        assert with_patterns.resolve(fld)["pattern"] == r".+@corp\.io"

    def test_two_modules_first_registered_wins(self):
        builder = ConfigBuilder()
        ValidationModule().apply_to_config_builder(builder)
        ValidationModule(ValidationOption.PREFER_IDN_EMAIL_FORMAT).apply_to_config_builder(builder)
        assert builder.resolve(FieldMember("m", str, [Email()]))["format"] == "email"

    def test_numeric_member(self):
        builder = ConfigBuilder()
        ValidationModule().apply_to_config_builder(builder)
        member = FieldMember("rate", Decimal, [DecimalMin("0.25", inclusive=False), Pattern("ignored")])
        assert builder.resolve(member) == {"exclusiveMinimum": Decimal("0.25")}

"""
Unit tests for schema_constraints.annotations.

Covers:
  • Size defaults and explicit-bound helpers
  • Email pattern override detection
  • Min / Max integer validation
  • DecimalMin / DecimalMax exact parsing and malformed literals
"""

from decimal import Decimal

import pytest

from schema_constraints.annotations import (
    MATCH_ANYTHING,
    SIZE_UNBOUNDED,
    DecimalMax,
    DecimalMin,
    Email,
    Max,
    Min,
    NotNull,
    Pattern,
    Size,
)
from schema_constraints.exceptions import AnnotationValueError, SchemaConstraintsError


class TestSize:
    def test_defaults_are_not_explicit(self):
        s = Size()
        assert s.min == 0
        assert s.max == SIZE_UNBOUNDED
        assert not s.has_explicit_min
        assert not s.has_explicit_max

    def test_explicit_bounds(self):
        s = Size(min=10, max=20)
        assert s.has_explicit_min
        assert s.has_explicit_max

    def test_negative_min_rejected(self):
        with pytest.raises(AnnotationValueError):
            Size(min=-1)

    def test_non_int_max_rejected(self):
        with pytest.raises(AnnotationValueError):
            Size(max="20")

    def test_min_greater_than_max_is_accepted(self):
        # consistency between bounds is not checked
        s = Size(min=30, max=20)
        assert (s.min, s.max) == (30, 20)

    def test_annotations_are_hashable_and_comparable(self):
        assert Size(min=1) == Size(min=1)
        assert len({Size(min=1), Size(min=1), NotNull()}) == 2


class TestEmail:
    def test_default_regexp_matches_anything(self):
        assert Email().regexp == MATCH_ANYTHING
        assert not Email().has_pattern_override

    def test_custom_regexp_is_override(self):
        assert Email(regexp=r".+@example\.com").has_pattern_override


class TestPattern:
    def test_regexp_must_be_text(self):
        with pytest.raises(AnnotationValueError):
            Pattern(regexp=None)


class TestIntegerBounds:
    def test_min_bound_is_decimal(self):
        assert Min(-100).bound == Decimal(-100)

    def test_max_bound_is_decimal(self):
        assert Max(50).bound == Decimal(50)

    @pytest.mark.parametrize("value", [1.5, "5", True])
    def test_min_rejects_non_int(self, value):
        with pytest.raises(AnnotationValueError):
            Min(value)


class TestDecimalBounds:
    def test_parsed_exactly(self):
        d = DecimalMin("10.1")
        assert d.bound == Decimal("10.1")
        assert d.inclusive is True

    def test_exclusive_flag(self):
        assert DecimalMax("20.2", inclusive=False).inclusive is False

    def test_surrounding_whitespace_is_ignored(self):
        assert DecimalMax(" 3.25 ").bound == Decimal("3.25")

    @pytest.mark.parametrize("literal", ["ten", "", "1.2.3", "NaN", "Infinity", "1_000", "0.000_1"])
    def test_malformed_literal_raises(self, literal):
        with pytest.raises(AnnotationValueError):
            DecimalMin(literal)

    def test_float_literal_rejected(self):
        with pytest.raises(AnnotationValueError):
            DecimalMax(0.1)

    def test_error_is_part_of_project_hierarchy(self):
        with pytest.raises(SchemaConstraintsError):
            DecimalMin("abc")
        with pytest.raises(ValueError):
            DecimalMin("abc")

    def test_bound_not_part_of_equality(self):
        assert DecimalMin("1.0") != DecimalMin("1.00")
        assert DecimalMin("1.0") == DecimalMin("1.0")

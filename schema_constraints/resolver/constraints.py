"""
ConstraintResolvers — derive JSON Schema constraint values from validation metadata.

Every resolver takes one member and returns a value or None ("no opinion").
Annotations are looked up on the member first and on its paired dual second
(see ``find_annotation``).  When several annotation kinds could supply the
same keyword, the kinds are checked in a fixed order and the first one found
wins; values are never merged.

    keyword            checked in order
    ────────────────   ─────────────────────────────────────────────
    nullable           NotNull | NotBlank | NotEmpty → False, Null → True
    minItems           Size.min > 0, NotEmpty → 1              (containers)
    maxItems           Size.max < SIZE_UNBOUNDED               (containers)
    minLength          Size.min > 0, NotEmpty | NotBlank → 1   (text)
    maxLength          Size.max < SIZE_UNBOUNDED               (text)
    format             Email → "email" / "idn-email"           (text)
    pattern            Pattern.regexp, Email.regexp != ".*"    (text)
    minimum            Min, DecimalMin(inclusive), PositiveOrZero → 0
    exclusiveMinimum   DecimalMin(exclusive), Positive → 0
    maximum            Max, DecimalMax(inclusive), NegativeOrZero → 0
    exclusiveMaximum   DecimalMax(exclusive), Negative → 0

Numeric results are ``Decimal`` values built from ints or exact decimal text.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from schema_constraints.annotations.models import (
    DecimalMax,
    DecimalMin,
    Email,
    Max,
    Min,
    Negative,
    NegativeOrZero,
    NotBlank,
    NotEmpty,
    NotNull,
    Null,
    Pattern,
    Positive,
    PositiveOrZero,
    Size,
)
from schema_constraints.members.base import MemberScope

from .lookup import find_annotation
from .models import ModuleConfiguration

__all__ = ["ConstraintResolvers"]

_ZERO = Decimal(0)

_EMAIL_FORMAT     = "email"
_IDN_EMAIL_FORMAT = "idn-email"


class ConstraintResolvers:
    """
    The resolver functions of one validation module instance.

    The configuration is only read; instances are safe to share between
    threads.
    """

    def __init__(self, config: Optional[ModuleConfiguration] = None) -> None:
        self._config = config if config is not None else ModuleConfiguration()

    @property
    def config(self) -> ModuleConfiguration:
        return self._config

    # ── Nullability ───────────────────────────────────────────────────────

    def is_nullable(self, member: MemberScope) -> Optional[bool]:
        """
        False if the member is required to be present, True if it is
        explicitly nullable, otherwise None (the generator's default applies).
        """
        if (find_annotation(member, NotNull) is not None
                or find_annotation(member, NotBlank) is not None
                or find_annotation(member, NotEmpty) is not None):
            return False
        if find_annotation(member, Null) is not None:
            return True
        return None

    # ── Containers ────────────────────────────────────────────────────────

    def resolve_array_min_items(self, member: MemberScope) -> Optional[int]:
        if not member.is_container_type():
            return None
        size = find_annotation(member, Size)
        if size is not None and size.has_explicit_min:
            return size.min
        if find_annotation(member, NotEmpty) is not None:
            return 1
        return None

    def resolve_array_max_items(self, member: MemberScope) -> Optional[int]:
        if not member.is_container_type():
            return None
        return self._explicit_size_max(member)

    # ── Text ──────────────────────────────────────────────────────────────

    def resolve_string_min_length(self, member: MemberScope) -> Optional[int]:
        if not member.is_text_type():
            return None
        size = find_annotation(member, Size)
        if size is not None and size.has_explicit_min:
            return size.min
        if (find_annotation(member, NotEmpty) is not None
                or find_annotation(member, NotBlank) is not None):
            return 1
        return None

    def resolve_string_max_length(self, member: MemberScope) -> Optional[int]:
        if not member.is_text_type():
            return None
        return self._explicit_size_max(member)

    def resolve_string_format(self, member: MemberScope) -> Optional[str]:
        if not member.is_text_type():
            return None
        if find_annotation(member, Email) is None:
            return None
        if self._config.prefer_idn_email_format:
            return _IDN_EMAIL_FORMAT
        return _EMAIL_FORMAT

    def resolve_string_pattern(self, member: MemberScope) -> Optional[str]:
        """Only registered when INCLUDE_PATTERN_EXPRESSIONS is set."""
        if not member.is_text_type():
            return None
        pattern = find_annotation(member, Pattern)
        if pattern is not None:
            return pattern.regexp
        email = find_annotation(member, Email)
        if email is not None and email.has_pattern_override:
            return email.regexp
        return None

    # ── Numbers ───────────────────────────────────────────────────────────

    def resolve_number_inclusive_minimum(self, member: MemberScope) -> Optional[Decimal]:
        minimum = find_annotation(member, Min)
        if minimum is not None:
            return minimum.bound
        decimal_min = find_annotation(member, DecimalMin)
        if decimal_min is not None and decimal_min.inclusive:
            return decimal_min.bound
        if find_annotation(member, PositiveOrZero) is not None:
            return _ZERO
        return None

    def resolve_number_exclusive_minimum(self, member: MemberScope) -> Optional[Decimal]:
        decimal_min = find_annotation(member, DecimalMin)
        if decimal_min is not None and not decimal_min.inclusive:
            return decimal_min.bound
        if find_annotation(member, Positive) is not None:
            return _ZERO
        return None

    def resolve_number_inclusive_maximum(self, member: MemberScope) -> Optional[Decimal]:
        maximum = find_annotation(member, Max)
        if maximum is not None:
            return maximum.bound
        decimal_max = find_annotation(member, DecimalMax)
        if decimal_max is not None and decimal_max.inclusive:
            return decimal_max.bound
        if find_annotation(member, NegativeOrZero) is not None:
            return _ZERO
        return None

    def resolve_number_exclusive_maximum(self, member: MemberScope) -> Optional[Decimal]:
        decimal_max = find_annotation(member, DecimalMax)
        if decimal_max is not None and not decimal_max.inclusive:
            return decimal_max.bound
        if find_annotation(member, Negative) is not None:
            return _ZERO
        return None

    # ── Internal helpers ──────────────────────────────────────────────────

    @staticmethod
    def _explicit_size_max(member: MemberScope) -> Optional[int]:
        size = find_annotation(member, Size)
        if size is not None and size.has_explicit_max:
            return size.max
        return None

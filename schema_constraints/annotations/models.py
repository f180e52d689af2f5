"""
Validation metadata vocabulary — one immutable class per annotation kind.

Key concepts
────────────
ConstraintAnnotation — common base; the annotation *kind* is its class
Marker kinds         — NotNull, NotBlank, NotEmpty, Null, Positive,
                       PositiveOrZero, Negative, NegativeOrZero (no parameters)
Parameterised kinds  — Size, Email, Pattern, Min, Max, DecimalMin, DecimalMax

Bound literals are turned into exact ``Decimal`` values when the annotation
is constructed, so a malformed literal fails here and never inside a
resolver.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from schema_constraints.exceptions import AnnotationValueError

__all__ = [
    "SIZE_UNBOUNDED",
    "MATCH_ANYTHING",
    "ConstraintAnnotation",
    "NotNull",
    "NotBlank",
    "NotEmpty",
    "Null",
    "Size",
    "Email",
    "Pattern",
    "Min",
    "Max",
    "DecimalMin",
    "DecimalMax",
    "Positive",
    "PositiveOrZero",
    "Negative",
    "NegativeOrZero",
]

# Size.max default: the largest count a generator can represent, i.e. "no upper bound"
SIZE_UNBOUNDED = 2_147_483_647

# Email.regexp default
MATCH_ANYTHING = ".*"


@dataclass(frozen=True)
class ConstraintAnnotation:
    """Base class for all recognised metadata kinds."""

    @property
    def kind(self) -> str:
        return type(self).__name__


# ── Presence markers ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NotNull(ConstraintAnnotation):
    """The value must not be None."""


@dataclass(frozen=True)
class NotBlank(ConstraintAnnotation):
    """Text must contain at least one non-whitespace character."""


@dataclass(frozen=True)
class NotEmpty(ConstraintAnnotation):
    """Text or collection must not be empty."""


@dataclass(frozen=True)
class Null(ConstraintAnnotation):
    """The value is explicitly nullable (must be None)."""


# ── Sizes and text ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Size(ConstraintAnnotation):
    """Item count (collections) or character count (text) bounds, both inclusive."""
    min: int = 0
    max: int = SIZE_UNBOUNDED

    def __post_init__(self) -> None:
        for name in ("min", "max"):
            value = getattr(self, name)
            if not _is_integer(value):
                raise AnnotationValueError(f"Size.{name} must be an int, got {value!r}")
            if value < 0:
                raise AnnotationValueError(f"Size.{name} must not be negative, got {value}")

    @property
    def has_explicit_min(self) -> bool:
        return self.min > 0

    @property
    def has_explicit_max(self) -> bool:
        return self.max < SIZE_UNBOUNDED


@dataclass(frozen=True)
class Email(ConstraintAnnotation):
    """Text must be an email address; ``regexp`` optionally narrows it further."""
    regexp: str = MATCH_ANYTHING

    @property
    def has_pattern_override(self) -> bool:
        return self.regexp != MATCH_ANYTHING


@dataclass(frozen=True)
class Pattern(ConstraintAnnotation):
    """Text must match the regular expression ``regexp``."""
    regexp: str

    def __post_init__(self) -> None:
        if not isinstance(self.regexp, str):
            raise AnnotationValueError(f"Pattern.regexp must be a str, got {self.regexp!r}")


# ── Numeric bounds ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Min(ConstraintAnnotation):
    """Inclusive integer lower bound."""
    value: int

    def __post_init__(self) -> None:
        if not _is_integer(self.value):
            raise AnnotationValueError(f"Min.value must be an int, got {self.value!r}")

    @property
    def bound(self) -> Decimal:
        return Decimal(self.value)


@dataclass(frozen=True)
class Max(ConstraintAnnotation):
    """Inclusive integer upper bound."""
    value: int

    def __post_init__(self) -> None:
        if not _is_integer(self.value):
            raise AnnotationValueError(f"Max.value must be an int, got {self.value!r}")

    @property
    def bound(self) -> Decimal:
        return Decimal(self.value)


@dataclass(frozen=True)
class DecimalMin(ConstraintAnnotation):
    """
    Lower bound given as decimal text, e.g. ``DecimalMin("10.1")``.

    ``inclusive=False`` turns it into an exclusive bound.
    """
    value: str
    inclusive: bool = True
    bound: Decimal = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bound", _parse_decimal("DecimalMin", self.value))


@dataclass(frozen=True)
class DecimalMax(ConstraintAnnotation):
    """Upper bound given as decimal text; see DecimalMin."""
    value: str
    inclusive: bool = True
    bound: Decimal = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bound", _parse_decimal("DecimalMax", self.value))


# ── Sign markers ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Positive(ConstraintAnnotation):
    """Strictly greater than zero."""


@dataclass(frozen=True)
class PositiveOrZero(ConstraintAnnotation):
    """Greater than or equal to zero."""


@dataclass(frozen=True)
class Negative(ConstraintAnnotation):
    """Strictly less than zero."""


@dataclass(frozen=True)
class NegativeOrZero(ConstraintAnnotation):
    """Less than or equal to zero."""


# ── Helpers ───────────────────────────────────────────────────────────────────

def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_decimal(kind: str, literal) -> Decimal:
    """Parse bound text exactly. Floats are refused: they are already rounded."""
    if not isinstance(literal, str):
        raise AnnotationValueError(
            f"{kind}.value must be decimal text, got {type(literal).__name__} {literal!r}"
        )
    if "_" in literal:
        raise AnnotationValueError(f"{kind}.value is not a decimal number: {literal!r}")
    try:
        parsed = Decimal(literal.strip())
    except InvalidOperation as exc:
        raise AnnotationValueError(f"{kind}.value is not a decimal number: {literal!r}") from exc
    if not parsed.is_finite():
        raise AnnotationValueError(f"{kind}.value must be finite, got {literal!r}")
    return parsed

"""Validation metadata vocabulary attached to fields and accessors."""

from .models import (
    MATCH_ANYTHING,
    SIZE_UNBOUNDED,
    ConstraintAnnotation,
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

__all__ = [
    "MATCH_ANYTHING",
    "SIZE_UNBOUNDED",
    "ConstraintAnnotation",
    "DecimalMax",
    "DecimalMin",
    "Email",
    "Max",
    "Min",
    "Negative",
    "NegativeOrZero",
    "NotBlank",
    "NotEmpty",
    "NotNull",
    "Null",
    "Pattern",
    "Positive",
    "PositiveOrZero",
    "Size",
]

"""
Data models for the resolver module.

Key concepts
────────────
ValidationOption     — optional features of the validation module
ModuleConfiguration  — the immutable option set one module instance runs with
ConstraintKeyword    — the JSON Schema keyword each resolver contributes to
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from schema_constraints.exceptions import ConfigurationError

__all__ = [
    "ValidationOption",
    "ModuleConfiguration",
    "ConstraintKeyword",
]


class ValidationOption(str, Enum):
    """
    Optional features; everything not listed is always on.

    INCLUDE_PATTERN_EXPRESSIONS
        Register the string "pattern" resolver (``Pattern`` and non-default
        ``Email`` regular expressions).  Off by default because validator
        regex dialects are not always valid ECMA-262 patterns.

    PREFER_IDN_EMAIL_FORMAT
        Emit ``"idn-email"`` instead of ``"email"`` for ``Email``.
    """
    INCLUDE_PATTERN_EXPRESSIONS = "include_pattern_expressions"
    PREFER_IDN_EMAIL_FORMAT     = "prefer_idn_email_format"


@dataclass(frozen=True)
class ModuleConfiguration:
    """Immutable option set, fixed when the module is constructed."""
    options: frozenset = field(default_factory=frozenset)

    @classmethod
    def of(cls, *options: Union[ValidationOption, str]) -> "ModuleConfiguration":
        """
        Build from zero or more options; duplicates collapse.

        Accepts enum members or their string values.

        Raises:
            ConfigurationError: An option is not a ValidationOption.
        """
        return cls(frozenset(_coerce(o) for o in options))

    def includes(self, option: ValidationOption) -> bool:
        return option in self.options

    @property
    def include_pattern_expressions(self) -> bool:
        return self.includes(ValidationOption.INCLUDE_PATTERN_EXPRESSIONS)

    @property
    def prefer_idn_email_format(self) -> bool:
        return self.includes(ValidationOption.PREFER_IDN_EMAIL_FORMAT)

    def __str__(self) -> str:
        names = ", ".join(sorted(o.value for o in self.options)) or "none"
        return f"ModuleConfiguration({names})"


class ConstraintKeyword(str, Enum):
    """JSON Schema keyword produced by each resolver."""
    NULLABLE          = "nullable"
    MIN_ITEMS         = "minItems"
    MAX_ITEMS         = "maxItems"
    MIN_LENGTH        = "minLength"
    MAX_LENGTH        = "maxLength"
    FORMAT            = "format"
    PATTERN           = "pattern"
    MINIMUM           = "minimum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"
    MAXIMUM           = "maximum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"


def _coerce(option) -> ValidationOption:
    if isinstance(option, ValidationOption):
        return option
    try:
        return ValidationOption(option)
    except ValueError:
        pass
    if isinstance(option, str) and option.upper() in ValidationOption.__members__:
        return ValidationOption[option.upper()]
    known = ", ".join(o.value for o in ValidationOption)
    raise ConfigurationError(f"Unknown validation option {option!r} (known: {known})")

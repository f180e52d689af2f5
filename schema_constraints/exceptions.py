"""
Project-wide custom exception hierarchy.
All modules raise subclasses of SchemaConstraintsError — never bare Exception.

Resolver functions never raise: these errors surface while metadata, members
or the module configuration are being built.
"""

__all__ = [
    "SchemaConstraintsError",
    "AnnotationError",
    "AnnotationValueError",
    "DuplicateAnnotationError",
    "MemberError",
    "MemberPairingError",
    "IntrospectionError",
    "ConfigurationError",
]


class SchemaConstraintsError(Exception):
    """Root exception for all schema-constraints errors."""


# ── Annotations ───────────────────────────────────────────────────────────────

class AnnotationError(SchemaConstraintsError):
    """Base class for metadata annotation errors."""


class AnnotationValueError(AnnotationError, ValueError):
    """Raised when an annotation parameter is malformed (e.g. a bound literal that is not a number)."""


class DuplicateAnnotationError(AnnotationError):
    """Raised when a member is given two annotations of the same kind."""


# ── Members ───────────────────────────────────────────────────────────────────

class MemberError(SchemaConstraintsError):
    """Base class for member model errors."""


class MemberPairingError(MemberError):
    """Raised when a field/accessor pair cannot be linked."""


class IntrospectionError(MemberError):
    """Raised when a class's members cannot be enumerated (e.g. unresolvable type hints)."""


# ── Configuration ─────────────────────────────────────────────────────────────

class ConfigurationError(SchemaConstraintsError, ValueError):
    """Raised when the module is constructed with an unknown option."""

"""
Reference registration surface — where a generator collects resolver callbacks.

A generator exposes one ConfigPart for stored fields and one for accessor
methods (``ConfigBuilder.for_fields()`` / ``for_methods()``).  Modules attach
callbacks through the ``with_*`` methods; the generator later asks the part
for the constraint values of each member it visits.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from schema_constraints.members.base import MemberScope, MemberShape

from .models import ConstraintKeyword

__all__ = ["ConfigPart", "ConfigBuilder", "Resolver"]

logger = logging.getLogger(__name__)

Resolver = Callable[[MemberScope], Optional[Any]]


class ConfigPart:
    """
    Resolver callbacks for one member shape, grouped by JSON Schema keyword.

    Several callbacks may be registered for the same keyword (e.g. by
    different modules); ``resolve`` uses the first one with an opinion.
    """

    def __init__(self, shape: MemberShape) -> None:
        self.shape = shape
        self._resolvers: dict[ConstraintKeyword, list[Resolver]] = {}

    # ── Registration ──────────────────────────────────────────────────────

    def with_nullable_check(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.NULLABLE, resolver)

    def with_array_min_items_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.MIN_ITEMS, resolver)

    def with_array_max_items_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.MAX_ITEMS, resolver)

    def with_string_min_length_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.MIN_LENGTH, resolver)

    def with_string_max_length_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.MAX_LENGTH, resolver)

    def with_string_format_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.FORMAT, resolver)

    def with_string_pattern_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.PATTERN, resolver)

    def with_number_inclusive_minimum_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.MINIMUM, resolver)

    def with_number_exclusive_minimum_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.EXCLUSIVE_MINIMUM, resolver)

    def with_number_inclusive_maximum_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.MAXIMUM, resolver)

    def with_number_exclusive_maximum_resolver(self, resolver: Resolver) -> "ConfigPart":
        return self._register(ConstraintKeyword.EXCLUSIVE_MAXIMUM, resolver)

    # ── Evaluation ────────────────────────────────────────────────────────

    @property
    def keywords(self) -> list[ConstraintKeyword]:
        """Keywords with at least one registered callback, in registration order."""
        return list(self._resolvers)

    def resolve(self, member: MemberScope) -> dict[str, Any]:
        """
        Evaluate every keyword for ``member``.

        Returns {keyword: value} for keywords where some callback returned a
        value; keywords without an opinion are left out.
        """
        result: dict[str, Any] = {}
        for keyword, resolvers in self._resolvers.items():
            for resolver in resolvers:
                value = resolver(member)
                if value is not None:
                    result[keyword.value] = value
                    break
        return result

    def _register(self, keyword: ConstraintKeyword, resolver: Resolver) -> "ConfigPart":
        self._resolvers.setdefault(keyword, []).append(resolver)
        return self

    def __repr__(self) -> str:
        kws = ", ".join(k.value for k in self._resolvers)
        return f"ConfigPart({self.shape.value}: {kws})"


class ConfigBuilder:
    """Holds the field and method registration targets of one generator."""

    def __init__(self) -> None:
        self._parts = {
            MemberShape.FIELD:  ConfigPart(MemberShape.FIELD),
            MemberShape.METHOD: ConfigPart(MemberShape.METHOD),
        }

    def for_fields(self) -> ConfigPart:
        return self._parts[MemberShape.FIELD]

    def for_methods(self) -> ConfigPart:
        return self._parts[MemberShape.METHOD]

    def part_for(self, member: MemberScope) -> ConfigPart:
        """The target matching the member's shape."""
        return self._parts[member.shape]

    def resolve(self, member: MemberScope) -> dict[str, Any]:
        return self.part_for(member).resolve(member)

"""
Build paired members from a Python class.

Metadata is declared with ``typing.Annotated``::

    @dataclass
    class Account:
        _email: Annotated[str, NotBlank(), Email()]
        tags: Annotated[list[str], Size(max=10)] = field(default_factory=list)

        @property
        def email(self) -> Annotated[str, Size(max=254)]:
            return self._email

Stored fields come from the class's type hints, accessors from its
``property`` objects.  A field named ``x`` or ``_x`` is paired with the
property ``x``; the public name wins when both exist.
"""

from __future__ import annotations

import inspect
import logging
import types
from typing import Annotated, ClassVar, Union, get_args, get_origin, get_type_hints

from schema_constraints.annotations.models import ConstraintAnnotation
from schema_constraints.exceptions import IntrospectionError

from .base import MemberScope
from .models import FieldMember, MethodMember, pair_members

__all__ = ["members_of"]

logger = logging.getLogger(__name__)


def members_of(cls: type) -> list[MemberScope]:
    """
    Enumerate the fields and accessors of ``cls`` as paired members.

    Order: fields in type-hint order, each immediately followed by its
    paired accessor, then the unpaired accessors in definition order.

    Raises:
        IntrospectionError: ``cls`` is not a class, or a type hint cannot be
            evaluated.
    """
    if not isinstance(cls, type):
        raise IntrospectionError(f"Expected a class, got {cls!r}")

    fields = _collect_fields(cls)
    accessors = _collect_accessors(cls)

    members: list[MemberScope] = []
    paired: set[str] = set()
    for name, fld in fields.items():
        members.append(fld)
        accessor = _accessor_for(name, fields, accessors)
        if accessor is not None:
            pair_members(fld, accessor)
            members.append(accessor)
            paired.add(accessor.name)
    members.extend(m for name, m in accessors.items() if name not in paired)

    logger.debug(
        "Introspected %s: %d fields, %d accessors (%d paired)",
        cls.__qualname__, len(fields), len(accessors), len(paired),
    )
    return members


# ── Internal helpers ──────────────────────────────────────────────────────────

def _collect_fields(cls: type) -> dict[str, FieldMember]:
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as exc:
        raise IntrospectionError(f"Cannot resolve type hints of {cls.__qualname__}: {exc}") from exc

    fields: dict[str, FieldMember] = {}
    for name, hint in hints.items():
        if hint is ClassVar or get_origin(hint) is ClassVar:
            continue
        value_type, metadata = _split_annotated(hint)
        fields[name] = FieldMember(name, value_type, metadata)
    return fields


def _collect_accessors(cls: type) -> dict[str, MethodMember]:
    # Walk bases first so that the nearest definition replaces inherited ones
    props: dict[str, property] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and attr.fget is not None:
                props[name] = attr

    accessors: dict[str, MethodMember] = {}
    for name, prop in props.items():
        # Getters built from callables such as operator.attrgetter carry no hints
        if not inspect.isfunction(prop.fget) and not inspect.ismethod(prop.fget):
            continue
        try:
            hints = get_type_hints(prop.fget, include_extras=True)
        except (NameError, TypeError) as exc:
            raise IntrospectionError(
                f"Cannot resolve return type of {cls.__qualname__}.{name}: {exc}"
            ) from exc
        if "return" not in hints:
            continue
        value_type, metadata = _split_annotated(hints["return"])
        accessors[name] = MethodMember(name, value_type, metadata)
    return accessors


def _accessor_for(field_name, fields, accessors):
    """Accessor paired with ``field_name``, honouring public-over-underscored precedence."""
    if field_name in accessors:
        return accessors[field_name]
    if field_name.startswith("_"):
        public = field_name[1:]
        if public in accessors and public not in fields:
            return accessors[public]
    return None


def _split_annotated(hint) -> tuple[object, list[ConstraintAnnotation]]:
    """
    Separate ``Annotated`` metadata from the value type.

    Handles ``Annotated[T, ...]`` and ``Optional[Annotated[T, ...]]``;
    metadata items that are not constraint annotations are ignored.
    """
    metadata: list[ConstraintAnnotation] = []
    value_type = hint

    if get_origin(hint) is Annotated:
        value_type, *extras = get_args(hint)
        metadata.extend(extras)
    elif get_origin(hint) is Union or get_origin(hint) is types.UnionType:
        for arg in get_args(hint):
            if get_origin(arg) is Annotated:
                metadata.extend(get_args(arg)[1:])

    return value_type, [m for m in metadata if isinstance(m, ConstraintAnnotation)]

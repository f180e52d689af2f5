"""
Reference member model — fields and accessor methods with attached metadata.

FieldMember   — a stored attribute
MethodMember  — an accessor (property getter) exposing a value
pair_members  — links a field and its accessor as each other's paired dual
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, TypeVar

from schema_constraints.annotations.models import ConstraintAnnotation
from schema_constraints.exceptions import (
    AnnotationValueError,
    DuplicateAnnotationError,
    MemberPairingError,
)

from .base import MemberScope, MemberShape

__all__ = ["FieldMember", "MethodMember", "pair_members"]

A = TypeVar("A")


@dataclass(eq=False)
class _DeclaredMember(MemberScope):
    name:        str
    value_type:  object
    annotations: Iterable[ConstraintAnnotation] = ()

    _by_kind: dict = field(init=False, repr=False, default_factory=dict)
    _dual:    Optional["_DeclaredMember"] = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        self.annotations = tuple(self.annotations)
        for annotation in self.annotations:
            if not isinstance(annotation, ConstraintAnnotation):
                raise AnnotationValueError(
                    f"{self.name}: {annotation!r} is not a recognised constraint annotation"
                )
            kind = type(annotation)
            if kind in self._by_kind:
                raise DuplicateAnnotationError(
                    f"{self.name}: more than one {kind.__name__} annotation"
                )
            self._by_kind[kind] = annotation

    def get_annotation(self, kind: type[A]) -> Optional[A]:
        return self._by_kind.get(kind)

    def find_paired_dual(self) -> Optional[MemberScope]:
        return self._dual

    def __str__(self) -> str:
        kinds = ", ".join(a.kind for a in self.annotations) or "-"
        return f"{type(self).__name__}({self.name} [{kinds}])"


@dataclass(eq=False)
class FieldMember(_DeclaredMember):
    """A stored attribute; its paired dual (if any) is the accessor."""

    @property
    def shape(self) -> MemberShape:
        return MemberShape.FIELD

    @property
    def accessor(self) -> Optional["MethodMember"]:
        return self._dual


@dataclass(eq=False)
class MethodMember(_DeclaredMember):
    """An accessor method; its paired dual (if any) is the backing field."""

    @property
    def shape(self) -> MemberShape:
        return MemberShape.METHOD

    @property
    def backing_field(self) -> Optional[FieldMember]:
        return self._dual


def pair_members(field_member: FieldMember, accessor: MethodMember) -> None:
    """
    Make ``field_member`` and ``accessor`` each other's paired dual.

    Re-pairing the same two members is a no-op.

    Raises:
        MemberPairingError: wrong member shapes, or either side is already
            paired with a different partner.
    """
    if not isinstance(field_member, FieldMember) or not isinstance(accessor, MethodMember):
        raise MemberPairingError(
            f"Expected (FieldMember, MethodMember), got "
            f"({type(field_member).__name__}, {type(accessor).__name__})"
        )
    for member, partner in ((field_member, accessor), (accessor, field_member)):
        if member._dual is not None and member._dual is not partner:
            raise MemberPairingError(
                f"{member.name} is already paired with {member._dual.name}"
            )
    field_member._dual = accessor
    accessor._dual = field_member

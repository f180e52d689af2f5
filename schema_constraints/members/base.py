"""Abstract member interface consumed by the constraint resolvers."""

from __future__ import annotations

import collections.abc
import types
from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Optional, TypeVar, Union, get_args, get_origin

__all__ = [
    "MemberShape",
    "MemberScope",
    "is_container_type",
    "is_text_type",
    "unwrap_type",
]

A = TypeVar("A")

# Collection-like runtime classes that are not item containers
_NON_CONTAINER_CLASSES = (str, bytes, bytearray, memoryview, collections.abc.Mapping)


class MemberShape(str, Enum):
    """Which representation of a logical property a member is."""
    FIELD  = "field"
    METHOD = "method"


class MemberScope(ABC):
    """
    One logical property of a type, seen through either its stored field or
    its accessor method.

    Implementations are owned by whatever reflection layer produced them;
    the resolvers only read from them.

    Attributes
    ----------
    name       : declared name of the field or accessor
    value_type : declared value type, a class or a typing construct
                 such as ``list[str]``
    """

    name:       str
    value_type: object

    @property
    @abstractmethod
    def shape(self) -> MemberShape:
        """FIELD or METHOD."""

    @abstractmethod
    def get_annotation(self, kind: type[A]) -> Optional[A]:
        """
        Return the annotation of exactly this kind attached directly to the
        member, or None. Must not look at the paired dual.
        """

    @abstractmethod
    def find_paired_dual(self) -> Optional["MemberScope"]:
        """
        Return the other representation of the same property (a field's
        accessor, an accessor's backing field), or None if there is none.
        """

    # ── Type classification ───────────────────────────────────────────────

    def is_container_type(self) -> bool:
        return is_container_type(self.value_type)

    def is_text_type(self) -> bool:
        return is_text_type(self.value_type)


# ── Type helpers ──────────────────────────────────────────────────────────────

def unwrap_type(tp: object) -> object:
    """
    Strip ``Annotated[...]`` and ``Optional[...]`` wrappers.

    ``Optional[list[int]]`` → ``list[int]``; unions of several non-None
    types are returned as they are.
    """
    origin = get_origin(tp)
    if origin is Annotated:
        return unwrap_type(get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return unwrap_type(args[0])
    return tp


def _runtime_class(tp: object) -> Optional[type]:
    tp = unwrap_type(tp)
    origin = get_origin(tp)
    candidate = origin if origin is not None else tp
    return candidate if isinstance(candidate, type) else None


def is_container_type(tp: object) -> bool:
    """True for sized collections (lists, tuples, sets, deques, …), never for text, bytes or mappings."""
    cls = _runtime_class(tp)
    if cls is None or issubclass(cls, _NON_CONTAINER_CLASSES):
        return False
    return issubclass(cls, collections.abc.Collection)


def is_text_type(tp: object) -> bool:
    """True for ``str`` and its subclasses."""
    cls = _runtime_class(tp)
    return cls is not None and issubclass(cls, str)

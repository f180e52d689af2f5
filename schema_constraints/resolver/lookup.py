"""Annotation lookup across a member and its paired dual."""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from schema_constraints.members.base import MemberScope

__all__ = ["find_annotation"]

logger = logging.getLogger(__name__)

A = TypeVar("A")


def find_annotation(member: MemberScope, kind: type[A]) -> Optional[A]:
    """
    Return the ``kind`` annotation from ``member``, or else from its paired dual.

    A field falls back to its accessor, an accessor to its backing field.
    At most these two sources are consulted; the dual's own dual is never
    followed.  Returns None when neither carries the annotation.
    """
    annotation = member.get_annotation(kind)
    if annotation is not None:
        return annotation

    dual = member.find_paired_dual()
    if dual is None:
        return None

    annotation = dual.get_annotation(kind)
    if annotation is not None:
        logger.debug("%s: %s taken from paired %s", member.name, kind.__name__, dual.name)
    return annotation

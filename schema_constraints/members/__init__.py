"""
members — the fields and accessors constraint resolution works on.

Public API
──────────
MemberScope   — abstract member interface (name, type, annotations, dual)
FieldMember   — stored attribute
MethodMember  — accessor method
pair_members  — link a field and its accessor
members_of    — build paired members from an annotated Python class
"""

from .base import MemberScope, MemberShape, is_container_type, is_text_type, unwrap_type
from .introspect import members_of
from .models import FieldMember, MethodMember, pair_members

__all__ = [
    "MemberScope",
    "MemberShape",
    "FieldMember",
    "MethodMember",
    "pair_members",
    "members_of",
    "is_container_type",
    "is_text_type",
    "unwrap_type",
]

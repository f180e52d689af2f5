"""
schema-constraints — JSON Schema constraint values from validation metadata.

Typical use::

    builder = ConfigBuilder()
    ValidationModule(ValidationOption.INCLUDE_PATTERN_EXPRESSIONS).apply_to_config_builder(builder)
    for member in members_of(Account):
        print(member.name, builder.resolve(member))
"""

from schema_constraints.members import FieldMember, MemberScope, MethodMember, members_of, pair_members
from schema_constraints.resolver import (
    ConfigBuilder,
    ConfigPart,
    ConstraintKeyword,
    ConstraintResolvers,
    ModuleConfiguration,
    ValidationModule,
    ValidationOption,
    find_annotation,
)

__version__ = "0.1.0"

__all__ = [
    "FieldMember",
    "MemberScope",
    "MethodMember",
    "members_of",
    "pair_members",
    "ConfigBuilder",
    "ConfigPart",
    "ConstraintKeyword",
    "ConstraintResolvers",
    "ModuleConfiguration",
    "ValidationModule",
    "ValidationOption",
    "find_annotation",
]

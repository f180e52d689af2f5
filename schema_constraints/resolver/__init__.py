"""
Constraint resolution — turns validation metadata on members into JSON Schema
keyword values (nullable, minItems, maxLength, format, minimum, …).
"""

from .constraints import ConstraintResolvers
from .lookup import find_annotation
from .models import ConstraintKeyword, ModuleConfiguration, ValidationOption
from .module import ValidationModule
from .registry import ConfigBuilder, ConfigPart

__all__ = [
    "ConstraintResolvers",
    "find_annotation",
    "ConstraintKeyword",
    "ModuleConfiguration",
    "ValidationOption",
    "ValidationModule",
    "ConfigBuilder",
    "ConfigPart",
]

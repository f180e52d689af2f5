"""ValidationModule — attaches the constraint resolvers to a generator configuration."""

from __future__ import annotations

import logging
from typing import Union

from .constraints import ConstraintResolvers
from .models import ModuleConfiguration, ValidationOption

__all__ = ["ValidationModule"]

logger = logging.getLogger(__name__)


class ValidationModule:
    """
    Schema generation module driven by validation metadata.

    * nullability from NotNull / NotBlank / NotEmpty / Null
    * "minItems" / "maxItems" for containers
    * "minLength", "maxLength" and "format" for text
    * optionally "pattern" for text
    * "minimum" / "exclusiveMinimum" / "maximum" / "exclusiveMaximum" for numbers

    The same resolvers are registered for stored fields and for accessor
    methods.
    """

    def __init__(self, *options: Union[ValidationOption, str]) -> None:
        self.config = ModuleConfiguration.of(*options)
        self.resolvers = ConstraintResolvers(self.config)

    def apply_to_config_builder(self, builder) -> None:
        """
        Register on ``builder.for_fields()`` and ``builder.for_methods()``.

        ``builder`` is any object providing those two methods whose results
        offer the ``with_*`` registration methods of ConfigPart.
        """
        self._apply_to_config_part(builder.for_fields())
        self._apply_to_config_part(builder.for_methods())

    def _apply_to_config_part(self, part) -> None:
        r = self.resolvers
        part.with_nullable_check(r.is_nullable)
        part.with_array_min_items_resolver(r.resolve_array_min_items)
        part.with_array_max_items_resolver(r.resolve_array_max_items)
        part.with_string_min_length_resolver(r.resolve_string_min_length)
        part.with_string_max_length_resolver(r.resolve_string_max_length)
        part.with_string_format_resolver(r.resolve_string_format)
        part.with_number_inclusive_minimum_resolver(r.resolve_number_inclusive_minimum)
        part.with_number_exclusive_minimum_resolver(r.resolve_number_exclusive_minimum)
        part.with_number_inclusive_maximum_resolver(r.resolve_number_inclusive_maximum)
        part.with_number_exclusive_maximum_resolver(r.resolve_number_exclusive_maximum)

        if self.config.include_pattern_expressions:
            part.with_string_pattern_resolver(r.resolve_string_pattern)

        logger.debug("Registered validation resolvers on %r (%s)", part, self.config)

    def __repr__(self) -> str:
        return f"ValidationModule({self.config})"

"""Chainable field-rendering configuration for Django forms.

`FieldConfiguration` accumulates rendering intent for one form control and
`FieldConfiguration.to_readonly()` freezes it into a
`ReadonlyFieldConfiguration` consumed by a renderer.
"""

from __future__ import annotations

from .configuration import FieldConfiguration
from .display import DisplayType
from .exceptions import FieldConfigurationError, MisconfigurationError
from .readonly import ReadonlyFieldConfiguration

__all__ = [
    "DisplayType",
    "FieldConfiguration",
    "FieldConfigurationError",
    "MisconfigurationError",
    "ReadonlyFieldConfiguration",
]

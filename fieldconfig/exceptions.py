"""Errors raised while freezing a field configuration."""

from __future__ import annotations


class FieldConfigurationError(Exception):
    """Base class for field configuration errors."""


class MisconfigurationError(FieldConfigurationError):
    """Raised when a configuration is frozen without any field content source."""

    def __init__(self, *, field_name: str | None) -> None:
        """Initialize the error.

        Args:
            field_name: Field name the configuration was seeded with, if any.
        """

        label = repr(field_name) if field_name else "<unnamed field>"
        super().__init__(
            f"No field content was supplied for {label}: call set_field_content() "
            "or override_field_html() before to_readonly()."
        )
        self.field_name = field_name

"""Immutable snapshot of a field configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attributes import AttributeMap
from .bag import ReadonlyExtensionBag
from .display import DisplayType


@dataclass(frozen=True, slots=True)
class ReadonlyFieldConfiguration:
    """Read-only view of a `FieldConfiguration`, produced by `to_readonly()`.

    All containers are copies taken at freeze time, so chained calls made on
    the builder afterwards never change what a renderer sees.

    Args:
        field_name: Name the builder was seeded with, if any.
        attributes: Merged HTML attributes for the control.
        label: Label content (may be set even when `has_label` is False).
        has_label: Whether a label should be rendered.
        inline_label: Inline label content, e.g. for a single checkbox.
        has_inline_label: Whether the inline label should be rendered.
        inline_label_wraps_element: Whether the inline label wraps the control.
        hint: Hint content shown alongside the field.
        prepended_html: Fragments rendered before the field, in call order.
        appended_html: Fragments rendered after the field, in call order.
        display_type: Requested display variant for choice-valued fields.
        true_string: Rendering of a true value.
        false_string: Rendering of a false value.
        none_string: Rendering of an absent value.
        format_string: `str.format` pattern for value interpolation.
        hide_empty_item: Whether choice fields omit the empty option.
        excluded_enum_values: Enum values omitted from option lists.
        label_classes: Class names for the label element.
        field_container_classes: Class names for the field container.
        validation_classes: Class names for the validation message element.
        field_html: Resolved markup of the control itself.
        bag: Extension data copied from the builder.
    """

    field_name: str | None
    attributes: AttributeMap
    label: Any
    has_label: bool
    inline_label: Any
    has_inline_label: bool
    inline_label_wraps_element: bool
    hint: Any
    prepended_html: tuple[Any, ...]
    appended_html: tuple[Any, ...]
    display_type: DisplayType
    true_string: str
    false_string: str
    none_string: str
    format_string: str | None
    hide_empty_item: bool
    excluded_enum_values: tuple[Any, ...]
    label_classes: str
    field_container_classes: str
    validation_classes: str
    field_html: Any
    bag: ReadonlyExtensionBag

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        """Return an attribute value by case-insensitive name."""

        return self.attributes.get(name, default)

    def format_value(self, value: Any) -> str:
        """Format a field value using the configured strings.

        Booleans and None use the tri-state strings; other values go through
        `format_string` when one is set.
        """

        if value is None:
            return self.none_string
        if value is True:
            return self.true_string
        if value is False:
            return self.false_string
        if self.format_string:
            return self.format_string.format(value)
        return str(value)

    def as_dict(self) -> dict[str, Any]:
        """Encode the snapshot into a JSON-friendly dictionary for debugging.

        Markup values are converted with `str()`; enum values are emitted as
        their `.value` when they have one.
        """

        return {
            "field_name": self.field_name,
            "attributes": self.attributes.as_dict(),
            "label": _text(self.label),
            "has_label": self.has_label,
            "inline_label": _text(self.inline_label),
            "has_inline_label": self.has_inline_label,
            "inline_label_wraps_element": self.inline_label_wraps_element,
            "hint": _text(self.hint),
            "prepended_html": [str(fragment) for fragment in self.prepended_html],
            "appended_html": [str(fragment) for fragment in self.appended_html],
            "display_type": self.display_type.value,
            "true_string": self.true_string,
            "false_string": self.false_string,
            "none_string": self.none_string,
            "format_string": self.format_string,
            "hide_empty_item": self.hide_empty_item,
            "excluded_enum_values": [getattr(value, "value", value) for value in self.excluded_enum_values],
            "label_classes": self.label_classes,
            "field_container_classes": self.field_container_classes,
            "validation_classes": self.validation_classes,
            "field_html": _text(self.field_html),
            "bag": {key: _json_value(value) for key, value in self.bag.items()},
        }


def _text(value: Any) -> str | None:
    return None if value is None else str(value)


def _json_value(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)

"""Chainable builder describing how one form control should be rendered.

Example:
    >>> config = (
    ...     FieldConfiguration(field_name="age")
    ...     .set_id("age")
    ...     .add_class("form-control")
    ...     .append("years")
    ...     .set_field_content("42")
    ... )
    >>> snapshot = config.to_readonly()
    >>> snapshot.attributes.as_dict()
    {'id': 'age', 'class': 'form-control'}

Every mutator changes the builder in place and returns the same instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .attributes import AttributeMap, AttributeSet, ClassList, keyword_attribute_name
from .bag import _MISSING, ExtensionBag
from .content import FieldContent
from .defaults import tri_state_defaults
from .display import DisplayType
from .readonly import ReadonlyFieldConfiguration

logger = logging.getLogger(__name__)


class FieldConfiguration:
    """Mutable, chainable configuration for rendering a single form field.

    Args:
        field_name: Optional name of the field being configured. Collaborators
            such as `fieldconfig.boundfield.configure_bound_field` use it to seed
            defaults; the builder itself only carries it into the snapshot.
    """

    def __init__(self, field_name: str | None = None) -> None:
        defaults = tri_state_defaults()
        self.field_name = field_name
        self._attributes = AttributeSet()
        self._content = FieldContent()
        self._bag = ExtensionBag()

        self._label: Any = None
        self._has_label = True
        self._inline_label: Any = None
        self._has_inline_label = True
        self._inline_label_wraps_element = False
        self._hint: Any = None

        self._prepended: list[Any] = []
        self._appended: list[Any] = []

        self._display_type = DisplayType.default
        self._true_string = defaults.true_string
        self._false_string = defaults.false_string
        self._none_string = defaults.none_string
        self._format_string: str | None = None
        self._hide_empty_item = False
        self._excluded_enum_values: list[Any] = []

        self._label_classes = ClassList()
        self._field_container_classes = ClassList()
        self._validation_classes = ClassList()

    def __repr__(self) -> str:
        return f"FieldConfiguration(field_name={self.field_name!r})"

    # Attributes

    def set_id(self, id: str) -> FieldConfiguration:
        self._attributes.set_dedicated("id", id)
        return self

    def add_class(self, class_names: str | Iterable[str]) -> FieldConfiguration:
        """Append one or more space-separated class names to the `class` attribute."""

        self._attributes.add_class(class_names)
        return self

    def set_attribute(self, key: str, value: Any) -> FieldConfiguration:
        """Set a single HTML attribute.

        Names compare case-insensitively and a repeated name overwrites the
        earlier value. `class` appends instead, and names with a dedicated
        method (`id`, `rows`, `cols`, `placeholder`, `disabled`, `readonly`,
        `required`) behave exactly like calling that method.

        Args:
            key: Attribute name.
            value: Attribute value. None (or False) removes the attribute.
        """

        self._attributes.set(key, value)
        return self

    def set_attributes(self, attributes: Mapping[str, Any] | None = None, **kwargs: Any) -> FieldConfiguration:
        """Set several attributes at once.

        Keyword names are translated for Python: `class_="x"` sets `class` and
        `data_field_id="3"` sets `data-field-id`. Mapping keys are used as-is.
        Mapping entries are applied first, then keywords, each in order.
        """

        for key, value in (attributes or {}).items():
            self._attributes.set(key, value)
        for key, value in kwargs.items():
            self._attributes.set(keyword_attribute_name(key), value)
        return self

    @property
    def attributes(self) -> AttributeMap:
        """Current merged attributes, as a snapshot would expose them right now."""

        return self._attributes.merged()

    def set_rows(self, rows: int) -> FieldConfiguration:
        self._attributes.set_dedicated("rows", rows)
        return self

    def set_cols(self, cols: int) -> FieldConfiguration:
        self._attributes.set_dedicated("cols", cols)
        return self

    def set_disabled(self, disabled: bool = True) -> FieldConfiguration:
        self._attributes.set_flag("disabled", disabled)
        return self

    def set_readonly(self, readonly: bool = True) -> FieldConfiguration:
        self._attributes.set_flag("readonly", readonly)
        return self

    def set_required(self, required: bool = True) -> FieldConfiguration:
        self._attributes.set_flag("required", required)
        return self

    def set_placeholder(self, placeholder: str) -> FieldConfiguration:
        self._attributes.set_dedicated("placeholder", placeholder)
        return self

    # Labels and hint

    def set_label(self, label: Any) -> FieldConfiguration:
        """Set the label content and re-enable the label if it was removed."""

        self._label = label
        self._has_label = True
        return self

    def without_label(self) -> FieldConfiguration:
        """Suppress the label; previously set content is kept but not rendered."""

        self._has_label = False
        return self

    def set_inline_label(self, label: Any) -> FieldConfiguration:
        """Set the inline label content and re-enable it if it was removed."""

        self._inline_label = label
        self._has_inline_label = True
        return self

    def without_inline_label(self) -> FieldConfiguration:
        self._has_inline_label = False
        return self

    def inline_label_wraps_element(self, wraps: bool = True) -> FieldConfiguration:
        self._inline_label_wraps_element = wraps
        return self

    def with_hint(self, hint: Any) -> FieldConfiguration:
        self._hint = hint
        return self

    # Display

    @property
    def display_type(self) -> DisplayType:
        return self._display_type

    def as_radio_list(self) -> FieldConfiguration:
        self._display_type = DisplayType.radio_list
        return self

    def as_checkbox_list(self) -> FieldConfiguration:
        self._display_type = DisplayType.checkbox_list
        return self

    def as_drop_down(self) -> FieldConfiguration:
        self._display_type = DisplayType.drop_down
        return self

    def with_true_as(self, text: str) -> FieldConfiguration:
        self._true_string = text
        return self

    def with_false_as(self, text: str) -> FieldConfiguration:
        self._false_string = text
        return self

    def with_none_as(self, text: str) -> FieldConfiguration:
        self._none_string = text
        return self

    def with_format_string(self, format_string: str) -> FieldConfiguration:
        """Set a `str.format` pattern, e.g. `"{:.2f}"`, used when displaying the value."""

        self._format_string = format_string
        return self

    def hide_empty_item(self) -> FieldConfiguration:
        self._hide_empty_item = True
        return self

    @property
    def excluded_enum_values(self) -> tuple[Any, ...]:
        return tuple(self._excluded_enum_values)

    @property
    def empty_item_hidden(self) -> bool:
        return self._hide_empty_item

    def exclude_enum_values(self, *values: Any) -> FieldConfiguration:
        """Exclude enum members from option lists; repeated calls add to the set."""

        for value in values:
            if value not in self._excluded_enum_values:
                self._excluded_enum_values.append(value)
        return self

    # Class accumulators kept apart from the main `class` attribute

    def add_label_class(self, class_names: str | Iterable[str]) -> FieldConfiguration:
        self._label_classes.add(class_names)
        return self

    def add_field_container_class(self, class_names: str | Iterable[str]) -> FieldConfiguration:
        self._field_container_classes.add(class_names)
        return self

    def add_validation_class(self, class_names: str | Iterable[str]) -> FieldConfiguration:
        self._validation_classes.add(class_names)
        return self

    # Decorations and field markup

    def prepend(self, content: Any) -> FieldConfiguration:
        self._prepended.append(content)
        return self

    def append(self, content: Any) -> FieldConfiguration:
        self._appended.append(content)
        return self

    def set_field_content(self, content: Any) -> FieldConfiguration:
        """Supply the field's own markup, or a zero-argument callable producing it.

        A callable is not invoked here; it runs once per `to_readonly()` call,
        so every snapshot gets markup built from the state at that moment. An
        explicit value takes precedence over a
        callable, and `override_field_html()` takes precedence over both
        regardless of call order.
        """

        self._content.set(content)
        return self

    def override_field_html(self, html: Any) -> FieldConfiguration:
        self._content.override(html)
        return self

    # Extension bag

    @property
    def bag(self) -> ExtensionBag:
        return self._bag

    def set_bag_data(self, key: str, value: Any) -> FieldConfiguration:
        self._bag.set(key, value)
        return self

    def get_bag_data(self, key: str, expected_type: type | None = None, default: Any = _MISSING) -> Any:
        """Read extension data, falling back to a default on a miss or type mismatch.

        Args:
            key: Bag key.
            expected_type: Required type of the stored value, or None for any.
            default: Returned when the key is missing or has the wrong type.
                When omitted, the zero value of `expected_type` is used (None
                when no type is given).
        """

        return self._bag.get_typed(key, expected_type, default)

    # Freezing

    def to_readonly(self) -> ReadonlyFieldConfiguration:
        """Freeze the current state into a `ReadonlyFieldConfiguration`.

        Field content is resolved here, before anything is copied, so a
        deferred resolver sees the attributes as they stand now.

        Raises:
            MisconfigurationError: When no field content source was supplied.
        """

        field_html = self._content.resolve(field_name=self.field_name)
        snapshot = ReadonlyFieldConfiguration(
            field_name=self.field_name,
            attributes=self._attributes.merged(),
            label=self._label,
            has_label=self._has_label,
            inline_label=self._inline_label,
            has_inline_label=self._has_inline_label,
            inline_label_wraps_element=self._inline_label_wraps_element,
            hint=self._hint,
            prepended_html=tuple(self._prepended),
            appended_html=tuple(self._appended),
            display_type=self._display_type,
            true_string=self._true_string,
            false_string=self._false_string,
            none_string=self._none_string,
            format_string=self._format_string,
            hide_empty_item=self._hide_empty_item,
            excluded_enum_values=tuple(self._excluded_enum_values),
            label_classes=str(self._label_classes),
            field_container_classes=str(self._field_container_classes),
            validation_classes=str(self._validation_classes),
            field_html=field_html,
            bag=self._bag.freeze(),
        )
        logger.debug("Froze field configuration for %s", self.field_name or "<unnamed field>")
        return snapshot

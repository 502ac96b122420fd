"""Builders seeded from Django bound form fields.

`configure_bound_field()` is the usual entry point from a view or template
helper. The returned builder renders the field's widget lazily, when the
configuration is frozen, so attribute and display changes chained after this
call still reach the widget.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from functools import partial
from typing import Any

from django import forms
from django.forms.boundfield import BoundField
from django.utils.safestring import SafeString

from .configuration import FieldConfiguration
from .display import DisplayType

logger = logging.getLogger(__name__)

Choice = tuple[Any, Any]


def configure_bound_field(bound_field: BoundField) -> FieldConfiguration:
    """Create a `FieldConfiguration` pre-seeded from a Django `BoundField`.

    The id, label and hint come from the bound field, and the field content is
    a deferred call to `render_bound_field`.

    Args:
        bound_field: Field from a bound or unbound Django form.

    Returns:
        A builder ready for further chained calls.
    """

    config = FieldConfiguration(field_name=bound_field.name)
    if bound_field.auto_id:
        config.set_id(bound_field.auto_id)
    if bound_field.label:
        config.set_label(bound_field.label)
    if bound_field.help_text:
        config.with_hint(bound_field.help_text)
    config.set_field_content(partial(render_bound_field, bound_field, config))
    return config


def render_bound_field(bound_field: BoundField, config: FieldConfiguration) -> SafeString:
    """Render the widget of `bound_field` using the builder's current state.

    Args:
        bound_field: Field whose widget is rendered.
        config: Builder supplying attributes, display variant and choice filters.

    Returns:
        Widget markup.
    """

    widget = build_widget(bound_field, config)
    logger.debug(
        "Rendering %s widget for field %s",
        type(widget or bound_field.field.widget).__name__,
        bound_field.name,
    )
    return bound_field.as_widget(widget=widget, attrs=config.attributes.as_dict())


def build_widget(bound_field: BoundField, config: FieldConfiguration) -> forms.Widget | None:
    """Return a replacement widget for choice fields, or None to keep the field's own.

    The display variant picks Django's radio, checkbox or select widget; the
    choices passed to it drop excluded enum values and, when requested, the
    empty item.
    """

    field = bound_field.field
    raw_choices = getattr(field, "choices", None)
    if raw_choices is None:
        return None
    choices = list(raw_choices)
    filtered = filter_choices(
        choices,
        excluded=config.excluded_enum_values,
        hide_empty=config.empty_item_hidden,
    )

    display_type = config.display_type
    if display_type == DisplayType.radio_list:
        return forms.RadioSelect(choices=filtered)
    if display_type == DisplayType.checkbox_list:
        return forms.CheckboxSelectMultiple(choices=filtered)
    if display_type == DisplayType.drop_down:
        if getattr(field.widget, "allow_multiple_selected", False):
            return forms.SelectMultiple(choices=filtered)
        return forms.Select(choices=filtered)
    if filtered == choices:
        return None
    widget = copy.deepcopy(field.widget)
    widget.choices = filtered
    return widget


def filter_choices(choices: Iterable[Choice], *, excluded: Iterable[Any], hide_empty: bool) -> list[Choice]:
    """Drop excluded values (and optionally the empty item) from Django choices.

    Enum members are compared by their `.value`. Option groups are filtered
    recursively and dropped when they end up empty.

    Args:
        choices: Django-style `(value, label)` pairs, possibly grouped.
        excluded: Values or enum members to remove.
        hide_empty: Whether to remove choices whose value is "" or None.

    Returns:
        The remaining choices, in their original order.
    """

    excluded_keys = {str(getattr(value, "value", value)) for value in excluded}
    filtered: list[Choice] = []
    for value, label in choices:
        if isinstance(label, (list, tuple)):
            group = filter_choices(label, excluded=excluded_keys, hide_empty=hide_empty)
            if group:
                filtered.append((value, group))
            continue
        if hide_empty and value in ("", None):
            continue
        if str(getattr(value, "value", value)) in excluded_keys:
            continue
        filtered.append((value, label))
    return filtered

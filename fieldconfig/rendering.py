"""Markup rendering for frozen field configurations.

Renderers only ever read a `ReadonlyFieldConfiguration`. `DefaultFieldRenderer`
produces plain, framework-neutral markup:

    <div class="{container classes}">
      <label for="{id}" class="{label classes}">{label}</label>
      {prepended}{field}{appended}
      <span class="{validation classes}">{error}</span>
      <p class="hint">{hint}</p>
    </div>
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from django.forms.utils import flatatt
from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString

from .readonly import ReadonlyFieldConfiguration


@runtime_checkable
class FieldRenderer(Protocol):
    """Turns a frozen field configuration into markup."""

    def render(self, config: ReadonlyFieldConfiguration, *, errors: Iterable[str] = ()) -> SafeString: ...


class DefaultFieldRenderer:
    """Minimal renderer used by the demo views and tests."""

    container_tag = "div"
    hint_class = "hint"

    def render(self, config: ReadonlyFieldConfiguration, *, errors: Iterable[str] = ()) -> SafeString:
        """Render label, decorations, field, validation messages and hint.

        Args:
            config: Frozen configuration.
            errors: Validation messages for the field, escaped on output.

        Returns:
            Safe markup for the whole field block.
        """

        parts: list[SafeString] = []
        if config.has_label and config.label:
            parts.append(self.render_label(config))
        parts.append(self.render_control(config))
        for error in errors:
            parts.append(format_html("<span{}>{}</span>", _class_attr(config.validation_classes), error))
        if config.hint:
            parts.append(format_html('<p class="{}">{}</p>', self.hint_class, config.hint))
        return format_html(
            "<{}{}>{}</{}>",
            self.container_tag,
            _class_attr(config.field_container_classes),
            _join(parts),
            self.container_tag,
        )

    def render_label(self, config: ReadonlyFieldConfiguration) -> SafeString:
        attrs = {}
        field_id = config.get_attribute("id")
        if field_id:
            attrs["for"] = field_id
        if config.label_classes:
            attrs["class"] = config.label_classes
        return format_html("<label{}>{}</label>", flatatt(attrs), config.label)

    def render_control(self, config: ReadonlyFieldConfiguration) -> SafeString:
        """Render decorations around the field, wrapping it in the inline label if asked."""

        field = format_html("{}", config.field_html)
        if config.has_inline_label and config.inline_label:
            if config.inline_label_wraps_element:
                field = format_html("<label>{} {}</label>", field, config.inline_label)
            else:
                field_id = config.get_attribute("id")
                label_attrs = flatatt({"for": field_id}) if field_id else ""
                field = format_html("{} <label{}>{}</label>", field, label_attrs, config.inline_label)
        return _join([*config.prepended_html, field, *config.appended_html])


def _class_attr(class_names: str) -> str:
    return flatatt({"class": class_names}) if class_names else ""


def _join(fragments: Iterable[object]) -> SafeString:
    return format_html_join("", "{}", ((fragment,) for fragment in fragments))

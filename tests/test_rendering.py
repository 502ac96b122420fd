"""Tests for the default markup renderer."""

from __future__ import annotations

import pytest
from django.utils.html import format_html

from fieldconfig import FieldConfiguration
from fieldconfig.rendering import DefaultFieldRenderer, FieldRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> DefaultFieldRenderer:
    return DefaultFieldRenderer()


def test_default_renderer_satisfies_protocol(renderer: DefaultFieldRenderer) -> None:
    """The default renderer implements the FieldRenderer protocol."""

    assert isinstance(renderer, FieldRenderer)


def test_renders_label_decorations_hint_and_errors_in_order(renderer: DefaultFieldRenderer) -> None:
    """Output follows label, prepended, field, appended, errors, hint."""

    snapshot = (
        FieldConfiguration(field_name="price")
        .set_id("price")
        .set_label("Price")
        .add_label_class("lbl")
        .add_field_container_class("field")
        .add_validation_class("err")
        .prepend(format_html("<span>{}</span>", "$"))
        .append("& up")
        .with_hint("Whole dollars")
        .set_field_content(format_html('<input id="{}">', "price"))
        .to_readonly()
    )
    html = renderer.render(snapshot, errors=["Too <low>"])

    assert html == (
        '<div class="field">'
        '<label class="lbl" for="price">Price</label>'
        '<span>$</span><input id="price">&amp; up'
        '<span class="err">Too &lt;low&gt;</span>'
        '<p class="hint">Whole dollars</p>'
        "</div>"
    )


def test_without_label_omits_label_element(renderer: DefaultFieldRenderer) -> None:
    """A suppressed label is not rendered even though its content is kept."""

    snapshot = FieldConfiguration().set_label("Age").without_label().set_field_content("x").to_readonly()
    assert "<label" not in renderer.render(snapshot)


def test_plain_text_field_content_is_escaped(renderer: DefaultFieldRenderer) -> None:
    """Unsafe strings are escaped; only SafeString passes through."""

    snapshot = FieldConfiguration().set_field_content("<b>").to_readonly()
    assert renderer.render(snapshot) == "<div>&lt;b&gt;</div>"


def test_inline_label_wrapping(renderer: DefaultFieldRenderer) -> None:
    """The inline label either wraps the control or follows it."""

    field = format_html('<input type="checkbox" id="{}">', "news")
    config = FieldConfiguration().set_id("news").set_inline_label("Subscribe").set_field_content(field)

    assert renderer.render(config.to_readonly()) == (
        '<div><input type="checkbox" id="news"> <label for="news">Subscribe</label></div>'
    )
    assert renderer.render(config.inline_label_wraps_element().to_readonly()) == (
        '<div><label><input type="checkbox" id="news"> Subscribe</label></div>'
    )
    assert renderer.render(config.without_inline_label().to_readonly()) == (
        '<div><input type="checkbox" id="news"></div>'
    )

"""Views for the field configuration demo."""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.utils.html import format_html

from core.forms import Colour, ProfileForm
from fieldconfig import FieldConfiguration
from fieldconfig.boundfield import configure_bound_field
from fieldconfig.rendering import DefaultFieldRenderer

FIELD_RENDERER = DefaultFieldRenderer()


def configure_profile_fields(form: ProfileForm) -> list[FieldConfiguration]:
    """Return one configured builder per profile form field, in display order."""

    def field(name: str) -> FieldConfiguration:
        return (
            configure_bound_field(form[name])
            .add_field_container_class("field")
            .add_label_class("field-label")
            .add_validation_class("field-error")
        )

    return [
        field("name").add_class("form-control").set_placeholder("Jane Doe"),
        field("age")
        .add_class("form-control")
        .set_attributes(inputmode="numeric", data_unit="years")
        .append(format_html(' <span class="unit">{}</span>', "years")),
        field("bio").add_class("form-control").set_rows(4).set_cols(40),
        field("colour").as_radio_list().exclude_enum_values(Colour.other),
        field("newsletter")
        .without_label()
        .set_inline_label("Send me the newsletter")
        .inline_label_wraps_element(),
    ]


def profile(request: HttpRequest) -> HttpResponse:
    """Render the demo profile form, validating it on POST."""

    form = ProfileForm(request.POST or None)
    saved = request.method == "POST" and form.is_valid()
    rendered_fields = [
        FIELD_RENDERER.render(config.to_readonly(), errors=form[config.field_name].errors)
        for config in configure_profile_fields(form)
    ]
    return render(
        request,
        "core/profile.html",
        {
            "rendered_fields": rendered_fields,
            "saved": saved,
            "saved_name": form.cleaned_data.get("name") if saved else "",
        },
    )

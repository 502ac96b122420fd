"""Forms used by the field configuration demo page."""

from __future__ import annotations

from enum import StrEnum

from django import forms


class Colour(StrEnum):
    """Favourite colour choices; `other` is excluded from the demo option list."""

    red = "red"
    green = "green"
    blue = "blue"
    other = "other"


class ProfileForm(forms.Form):
    """Validate a small user profile."""

    name = forms.CharField(
        label="Name",
        max_length=80,
        help_text="As it should appear on your badge.",
    )
    age = forms.IntegerField(
        label="Age",
        min_value=0,
        required=False,
    )
    bio = forms.CharField(
        label="About you",
        required=False,
        widget=forms.Textarea,
    )
    colour = forms.ChoiceField(
        label="Favourite colour",
        required=False,
        choices=[(colour.value, colour.name.title()) for colour in Colour],
    )
    newsletter = forms.BooleanField(
        label="Newsletter",
        required=False,
    )

    def clean_name(self) -> str:
        """Reject names made only of whitespace.

        Returns:
            The trimmed name.
        """

        name = (self.cleaned_data.get("name") or "").strip()
        if not name:
            raise forms.ValidationError("Enter a name.")
        return name

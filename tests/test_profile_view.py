"""Integration tests for the demo profile page."""

from __future__ import annotations

import pytest
from django.urls import reverse

pytestmark = pytest.mark.integration


def test_profile_page_renders_configured_fields(client) -> None:
    """GET renders every field through its configuration."""

    response = client.get(reverse("core:profile"))
    assert response.status_code == 200

    html = response.content.decode("utf-8")
    assert 'placeholder="Jane Doe"' in html
    assert 'data-unit="years"' in html
    assert '<span class="unit">years</span>' in html
    assert 'rows="4"' in html
    assert html.count('type="radio"') == 3
    assert 'value="other"' not in html
    assert "Send me the newsletter</label>" in html
    assert '<label for="id_newsletter"' not in html
    assert '<div class="field">' in html


def test_profile_post_shows_validation_messages(client) -> None:
    """Invalid submissions render errors with the validation classes."""

    response = client.post(reverse("core:profile"), data={"name": "   ", "age": "-1"})
    assert response.status_code == 200

    html = response.content.decode("utf-8")
    assert '<span class="field-error">' in html
    assert "Saved" not in html


def test_profile_post_accepts_valid_data(client) -> None:
    """Valid submissions are acknowledged."""

    response = client.post(reverse("core:profile"), data={"name": "Ada", "colour": "red"})
    assert response.status_code == 200
    assert "Saved Ada." in response.content.decode("utf-8")

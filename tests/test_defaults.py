"""Tests for project-level tri-state defaults read from Django settings."""

from __future__ import annotations

import pytest

from fieldconfig import FieldConfiguration
from fieldconfig.defaults import tri_state_defaults

pytestmark = pytest.mark.unit


def test_project_settings_change_builder_defaults(settings) -> None:
    """FIELD_CONFIGURATION overrides apply to new builders."""

    settings.FIELD_CONFIGURATION = {"TRUE_STRING": "Oui", "FALSE_STRING": "Non"}
    snapshot = FieldConfiguration().set_field_content("").to_readonly()
    assert (snapshot.true_string, snapshot.false_string, snapshot.none_string) == ("Oui", "Non", "")


def test_missing_setting_falls_back_to_module_defaults(settings) -> None:
    """Without FIELD_CONFIGURATION the built-in strings are used."""

    del settings.FIELD_CONFIGURATION
    defaults = tri_state_defaults()
    assert (defaults.true_string, defaults.false_string, defaults.none_string) == ("Yes", "No", "")


def test_per_field_overrides_beat_project_defaults(settings) -> None:
    """with_true_as() still wins over the project setting."""

    settings.FIELD_CONFIGURATION = {"TRUE_STRING": "Oui"}
    snapshot = FieldConfiguration().with_true_as("Yes please").set_field_content("").to_readonly()
    assert snapshot.true_string == "Yes please"

"""Pytest fixtures shared across the field configuration tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from fieldconfig import FieldConfiguration


@pytest.fixture
def config() -> FieldConfiguration:
    """Return a fresh builder seeded with a field name."""

    return FieldConfiguration(field_name="age")


@pytest.fixture
def content_config(config: FieldConfiguration) -> FieldConfiguration:
    """Return a builder that already has field content, so it can be frozen."""

    return config.set_field_content("<input>")


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite must be runnable by intent:
    - `unit`: pure, fast tests with no request cycle.
    - `integration`: tests touching Django forms, templates, views or the test client.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )

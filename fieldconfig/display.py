"""Display variants for choice-valued fields."""

from __future__ import annotations

from enum import StrEnum


class DisplayType(StrEnum):
    """Rendering strategy requested for a choice-valued field.

    Values are stable identifiers a renderer can switch on.
    """

    default = "default"
    radio_list = "radio_list"
    checkbox_list = "checkbox_list"
    drop_down = "drop_down"

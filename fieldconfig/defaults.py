"""Project-level defaults read from Django settings.

Projects may define a `FIELD_CONFIGURATION` dictionary in settings to change
the human-readable strings used for true/false/none values:

    FIELD_CONFIGURATION = {"TRUE_STRING": "Oui", "FALSE_STRING": "Non"}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from django.conf import settings

DEFAULT_TRUE_STRING: Final[str] = "Yes"
DEFAULT_FALSE_STRING: Final[str] = "No"
DEFAULT_NONE_STRING: Final[str] = ""


@dataclass(frozen=True, slots=True)
class TriStateStrings:
    """Human-readable renderings of true, false and absent values."""

    true_string: str
    false_string: str
    none_string: str


def tri_state_defaults() -> TriStateStrings:
    """Return the tri-state strings configured for this project.

    Returns:
        TriStateStrings built from `settings.FIELD_CONFIGURATION`, falling back
        to the module defaults for missing keys or unconfigured settings.
    """

    overrides: dict[str, object] = {}
    if settings.configured:
        overrides = getattr(settings, "FIELD_CONFIGURATION", None) or {}
    return TriStateStrings(
        true_string=str(overrides.get("TRUE_STRING", DEFAULT_TRUE_STRING)),
        false_string=str(overrides.get("FALSE_STRING", DEFAULT_FALSE_STRING)),
        none_string=str(overrides.get("NONE_STRING", DEFAULT_NONE_STRING)),
    )

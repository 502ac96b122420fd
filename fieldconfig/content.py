"""Resolution of a field's own markup.

A field's markup comes from one of three sources, in order of precedence:

1. an override installed with `override_field_html()`,
2. an explicit value installed with `set_field_content(value)`,
3. a deferred callable installed with `set_field_content(callable)`.

The deferred callable runs only when the configuration is frozen, exactly once
per freeze, so each snapshot sees the builder state at its own freeze time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .exceptions import MisconfigurationError

logger = logging.getLogger(__name__)

FieldResolver = Callable[[], Any]

_UNSET: Any = object()


class FieldContent:
    """Holds the sources of a field's markup and resolves them on demand."""

    __slots__ = ("_value", "_resolver", "_override")

    def __init__(self) -> None:
        self._value: Any = _UNSET
        self._resolver: FieldResolver | None = None
        self._override: Any = _UNSET

    def set(self, content: Any) -> None:
        """Install an explicit value, or a deferred resolver when `content` is callable.

        Passing None clears the explicit value.
        """

        if content is None:
            self._value = _UNSET
        elif callable(content):
            self._resolver = content
        else:
            self._value = content

    def override(self, content: Any) -> None:
        self._override = _UNSET if content is None else content

    def resolve(self, *, field_name: str | None = None) -> Any:
        """Return the authoritative markup for the field.

        Args:
            field_name: Used only in the error message.

        Returns:
            The override, the explicit value, or the result of a fresh call
            to the deferred resolver, whichever is set first in that order.

        Raises:
            MisconfigurationError: When no source was ever installed.
        """

        if self._override is not _UNSET:
            return self._override
        if self._value is not _UNSET:
            return self._value
        if self._resolver is not None:
            logger.debug("Resolving deferred field content for %s", field_name or "<unnamed field>")
            # Exceptions from the resolver propagate unchanged.
            return self._resolver()
        logger.warning("Field configuration for %s has no field content source", field_name or "<unnamed field>")
        raise MisconfigurationError(field_name=field_name)

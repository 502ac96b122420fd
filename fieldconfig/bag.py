"""Open-ended extension data attached to a field configuration.

Third-party renderers can stash values they need without changing the core
configuration type:

    >>> config.bag.tooltip = "Shown on hover"
    >>> config.bag.tooltip
    'Shown on hover'
    >>> config.get_bag_data("tooltip_delay", int)
    0
"""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


def zero_value(expected_type: type[T] | None) -> T | None:
    """Return the zero value of a type: `int()` -> 0, `str()` -> "", etc.

    Types that cannot be constructed without arguments yield None.
    """

    if expected_type is None:
        return None
    try:
        return expected_type()
    except TypeError:
        return None


def _typed_lookup(data: Mapping[str, Any], key: str, expected_type: type[T] | None, default: Any) -> Any:
    fallback = zero_value(expected_type) if default is _MISSING else default
    if key not in data:
        return fallback
    value = data[key]
    if expected_type is not None and not isinstance(value, expected_type):
        return fallback
    return value


class ReadonlyExtensionBag(Mapping[str, Any]):
    """Frozen copy of an `ExtensionBag`, carried by a snapshot.

    Attribute reads of missing keys return None rather than raising.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        object.__setattr__(self, "_data", MappingProxyType(dict(data or {})))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._data.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"ReadonlyExtensionBag({dict(self._data)!r})"

    def get_typed(self, key: str, expected_type: type[T] | None = None, default: Any = _MISSING) -> Any:
        """Return `key` if present and of `expected_type`, else the default.

        Args:
            key: Bag key.
            expected_type: Required type of the stored value, or None for any.
            default: Value returned on a miss or type mismatch. When omitted,
                the zero value of `expected_type` is returned.
        """

        return _typed_lookup(self._data, key, expected_type, default)


class ExtensionBag:
    """Mutable key/value store for caller-defined field metadata.

    Values can be written and read as attributes (`bag.foo = 1`) or through
    `set`/`get`/`get_typed`. Reading a missing attribute returns None.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        object.__setattr__(self, "_data", {})

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._data.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            raise AttributeError(f"Bag keys cannot start with an underscore: {name!r}")
        self._data[name] = value

    def __delattr__(self, name: str) -> None:
        self._data.pop(name, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ExtensionBag({self._data!r})"

    def set(self, key: str, value: Any) -> None:
        self._data[str(key)] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def get_typed(self, key: str, expected_type: type[T] | None = None, default: Any = _MISSING) -> Any:
        """Return `key` if present and of `expected_type`, else the default.

        See `ReadonlyExtensionBag.get_typed`.
        """

        return _typed_lookup(self._data, key, expected_type, default)

    def freeze(self) -> ReadonlyExtensionBag:
        """Return a read-only deep copy of the current contents.

        Mutable values (lists, dicts) are copied too, so changing them through
        the builder afterwards does not reach the frozen bag.
        """

        return ReadonlyExtensionBag(copy.deepcopy(self._data))

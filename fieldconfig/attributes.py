"""HTML attribute accumulation and merge rules for a single form control.

Attribute names compare case-insensitively while the case of the latest write
is kept for output. Every key overwrites on a repeated write except `class`,
which appends whitespace-separated tokens.

A handful of attributes have dedicated accessors on `FieldConfiguration`
(`id`, `rows`, `cols`, `placeholder` and the boolean attributes). Writing one
of them through the generic path is routed to the same dedicated slot, and the
dedicated slots are applied over the generic entries when the attributes are
merged.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Final

CLASS_ATTRIBUTE: Final[str] = "class"
BOOLEAN_ATTRIBUTES: Final[frozenset[str]] = frozenset({"disabled", "readonly", "required"})
DEDICATED_ATTRIBUTES: Final[tuple[str, ...]] = (
    "id",
    "rows",
    "cols",
    "placeholder",
    "disabled",
    "readonly",
    "required",
)


def normalize_key(key: str) -> str:
    """Return the comparison form of an attribute name."""

    return str(key).strip().lower()


def keyword_attribute_name(name: str) -> str:
    """Translate a Python keyword argument name into an HTML attribute name.

    A trailing underscore is dropped so reserved words can be passed
    (`class_` -> `class`) and inner underscores become hyphens
    (`data_field_id` -> `data-field-id`).

    Args:
        name: Keyword argument name.

    Returns:
        HTML attribute name.
    """

    return name.rstrip("_").replace("_", "-")


def split_class_names(class_names: str | Iterable[str] | None) -> list[str]:
    """Split space-separated class names into individual tokens.

    Args:
        class_names: A string such as `"a b"`, an iterable of such strings, or None.

    Returns:
        Tokens in the order given; empty input yields an empty list.
    """

    if class_names is None:
        return []
    if isinstance(class_names, str):
        return class_names.split()
    tokens: list[str] = []
    for chunk in class_names:
        tokens.extend(str(chunk).split())
    return tokens


def is_enabled(value: Any) -> bool:
    """Return whether a value written to a boolean attribute switches it on.

    Only None and False switch a boolean attribute off. Any other value,
    including the string "false", enables it, matching how browsers treat the
    mere presence of a boolean attribute.
    """

    return value is not None and value is not False


class ClassList:
    """Ordered accumulator of CSS class tokens.

    Tokens are appended in call order and never de-duplicated.
    """

    __slots__ = ("_tokens",)

    def __init__(self) -> None:
        self._tokens: list[str] = []

    def add(self, class_names: str | Iterable[str] | None) -> None:
        self._tokens.extend(split_class_names(class_names))

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __str__(self) -> str:
        return " ".join(self._tokens)

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._tokens)


class AttributeMap(Mapping[str, str]):
    """Read-only, case-insensitive mapping of HTML attribute names to values.

    Iteration yields attribute names in the case they were last written, in
    insertion order. Lookups and membership tests ignore case.

    Example:
        >>> attrs = AttributeMap([("ID", "age"), ("class", "form-control")])
        >>> attrs["id"]
        'age'
        >>> list(attrs)
        ['ID', 'class']
    """

    __slots__ = ("_entries",)

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        entries: dict[str, tuple[str, str]] = {}
        for key, value in items:
            entries[normalize_key(key)] = (key, value)
        self._entries = entries

    def __getitem__(self, key: str) -> str:
        return self._entries[normalize_key(key)][1]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _value in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._entries

    def __repr__(self) -> str:
        return f"AttributeMap({self.as_dict()!r})"

    def as_dict(self) -> dict[str, str]:
        """Return a plain (mutable) copy, e.g. for Django's `flatatt` or `as_widget`."""

        return {original: value for original, value in self._entries.values()}


class AttributeSet:
    """Mutable attribute state owned by a `FieldConfiguration`.

    Holds three separate stores: generic attributes keyed by normalized name,
    dedicated attribute slots (see `DEDICATED_ATTRIBUTES`), and the main class
    accumulator. `merged()` combines them into an `AttributeMap`.
    """

    __slots__ = ("_generic", "_dedicated", "_classes")

    def __init__(self) -> None:
        self._generic: dict[str, tuple[str, Any]] = {}
        self._dedicated: dict[str, tuple[str, Any]] = {}
        self._classes = ClassList()

    def set(self, key: str, value: Any) -> None:
        """Write one attribute, routing `class` and dedicated names.

        Args:
            key: Attribute name, any case.
            value: Attribute value. None removes a generic attribute; True and
                False switch boolean-style attributes on and off.
        """

        normalized = normalize_key(key)
        if not normalized:
            return
        if normalized == CLASS_ATTRIBUTE:
            self.add_class(None if value is None else str(value))
            return
        written = str(key).strip()
        if normalized in BOOLEAN_ATTRIBUTES:
            self.set_flag(normalized, is_enabled(value), written=written)
            return
        if normalized in DEDICATED_ATTRIBUTES:
            self.set_dedicated(normalized, value, written=written)
            return
        if value is None or value is False:
            self._generic.pop(normalized, None)
            return
        self._generic[normalized] = (written, value)

    def set_dedicated(self, name: str, value: Any, *, written: str | None = None) -> None:
        """Fill a dedicated slot; None or False empties it.

        `written` is the attribute name as the caller spelled it and is used
        for output; dedicated methods pass nothing and get the lowercase name.
        """

        if value is None or value is False:
            self._dedicated.pop(name, None)
        else:
            self._dedicated[name] = (written or name, value)

    def set_flag(self, name: str, flag: bool, *, written: str | None = None) -> None:
        if flag:
            self._dedicated[name] = (written or name, name)
        else:
            self._dedicated.pop(name, None)

    def add_class(self, class_names: str | Iterable[str] | None) -> None:
        self._classes.add(class_names)

    def merged(self) -> AttributeMap:
        """Merge generic, dedicated and class state into a fresh `AttributeMap`.

        Generic attributes have the lowest precedence, dedicated slots replace
        any same-named generic entry, and `class` is emitted last when at least
        one class token was added.

        Returns:
            A new map; later mutation of this set does not affect it.
        """

        merged: dict[str, tuple[str, str]] = {}
        for normalized, (original, value) in self._generic.items():
            merged[normalized] = (original, _stringify(original, value))
        for name in DEDICATED_ATTRIBUTES:
            if name in self._dedicated:
                written, value = self._dedicated[name]
                merged[name] = (written, str(value))
        if self._classes:
            merged[CLASS_ATTRIBUTE] = (CLASS_ATTRIBUTE, str(self._classes))
        return AttributeMap(merged.values())


def _stringify(name: str, value: Any) -> str:
    """Render a generic attribute value; True becomes the canonical `name="name"` form."""

    if value is True:
        return normalize_key(name)
    return str(value)

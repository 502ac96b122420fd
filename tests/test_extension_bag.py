"""Unit tests for the extension bag."""

from __future__ import annotations

import pytest

from fieldconfig import FieldConfiguration
from fieldconfig.bag import ExtensionBag, ReadonlyExtensionBag, zero_value

pytestmark = pytest.mark.unit


def test_attribute_style_access(config: FieldConfiguration) -> None:
    """Bag values can be written and read as attributes; misses read as None."""

    config.bag.tooltip = "Shown on hover"
    assert config.bag.tooltip == "Shown on hover"
    assert config.bag.missing is None
    assert "tooltip" in config.bag


def test_method_style_access(config: FieldConfiguration) -> None:
    """set_bag_data and get_bag_data share storage with attribute access."""

    config.set_bag_data("delay", 250)
    assert config.bag.delay == 250
    assert config.get_bag_data("delay") == 250
    assert config.get_bag_data("delay", int) == 250


@pytest.mark.parametrize(
    ("expected_type", "zero"),
    [(int, 0), (str, ""), (bool, False), (list, []), (None, None)],
)
def test_typed_miss_returns_zero_value(config: FieldConfiguration, expected_type, zero) -> None:
    """A missing key returns the zero value of the requested type."""

    assert config.get_bag_data("absent", expected_type) == zero


def test_type_mismatch_returns_default_instead_of_raising(config: FieldConfiguration) -> None:
    """A value of the wrong type yields the default."""

    config.set_bag_data("delay", "slow")
    assert config.get_bag_data("delay", int) == 0
    assert config.get_bag_data("delay", int, default=100) == 100


def test_explicit_default_on_miss(config: FieldConfiguration) -> None:
    """An explicit default beats the zero value."""

    assert config.get_bag_data("absent", str, default="n/a") == "n/a"


def test_zero_value_for_types_without_default_constructor() -> None:
    """Types that need constructor arguments have no zero value."""

    class NeedsArgs:
        def __init__(self, value: int) -> None:
            self.value = value

    assert zero_value(NeedsArgs) is None


def test_underscore_keys_are_rejected_as_attributes() -> None:
    """Attribute writes cannot clobber private state."""

    bag = ExtensionBag()
    with pytest.raises(AttributeError):
        bag._data = {}


def test_deleting_an_attribute_removes_the_key() -> None:
    """`del bag.key` drops the key and tolerates misses."""

    bag = ExtensionBag()
    bag.flag = True
    del bag.flag
    del bag.never_set
    assert len(bag) == 0


def test_frozen_bag_is_a_read_only_copy() -> None:
    """Freezing copies the contents and supports typed reads."""

    bag = ExtensionBag()
    bag.count = 3
    frozen = bag.freeze()
    bag.count = 4

    assert isinstance(frozen, ReadonlyExtensionBag)
    assert frozen["count"] == 3
    assert frozen.count == 3
    assert frozen.missing is None
    assert frozen.get_typed("count", str) == ""
    assert dict(frozen) == {"count": 3}
    with pytest.raises(AttributeError):
        frozen.count = 5


def test_frozen_bag_deep_copies_mutable_values() -> None:
    """Nested lists and dicts are copied, so in-place edits stay on the live bag."""

    bag = ExtensionBag()
    bag.items = [1]
    bag.set("options", {"tags": ["a"]})
    frozen = bag.freeze()

    bag.items.append(2)
    bag.get("options")["tags"].append("b")

    assert frozen["items"] == [1]
    assert frozen["options"] == {"tags": ["a"]}
    assert bag.items == [1, 2]

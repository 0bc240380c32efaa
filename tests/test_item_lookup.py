"""Tests for the item lookup."""

import pytest

from api_reference_index.content_items import Callout, Category, Specification
from api_reference_index.errors import (
    ContentLookupError,
    ItemTypeMismatchError,
    MissingItemError,
)
from api_reference_index.item_lookup import ItemLookup


@pytest.fixture
def items() -> ItemLookup:
    """Fixture providing a lookup with a few items of different types."""
    return ItemLookup(
        {
            "spec_b": Specification("spec_b", "b", "B", "1", (), ""),
            "cat": Category("cat", "Category", "", ()),
            "spec_a": Specification("spec_a", "a", "A", "1", (), ""),
            "note": Callout("note", "<p>Note</p>", "info"),
        }
    )


def test_resolve_returns_expected_type(items: ItemLookup) -> None:
    """Verify a codename resolves to its item when the type matches."""
    category = items.resolve("cat", Category)
    assert category.name == "Category"


def test_resolve_missing_codename(items: ItemLookup) -> None:
    """Verify a missing codename raises a lookup error."""
    with pytest.raises(MissingItemError) as exc_info:
        items.resolve("nope", Category)
    assert exc_info.value.codename == "nope"
    assert isinstance(exc_info.value, ContentLookupError)
    assert isinstance(exc_info.value, KeyError)
    assert "nope" in str(exc_info.value)


def test_resolve_wrong_type(items: ItemLookup) -> None:
    """Verify resolving to another variant raises a type mismatch."""
    with pytest.raises(ItemTypeMismatchError) as exc_info:
        items.resolve("note", Category)
    assert exc_info.value.expected == "zapi_category"
    assert exc_info.value.actual == "callout"


def test_mapping_protocol(items: ItemLookup) -> None:
    """Verify the lookup behaves as a read-only mapping."""
    assert len(items) == 4
    assert "cat" in items
    assert "nope" not in items
    assert items.get("nope") is None
    with pytest.raises(TypeError):
        items["new"] = Callout("new", "", "info")  # type: ignore[index]


def test_lookup_is_a_snapshot() -> None:
    """Verify later changes to the source dict do not leak into the lookup."""
    source = {"cat": Category("cat", "Category", "", ())}
    items = ItemLookup(source)
    source["other"] = Category("other", "Other", "", ())
    assert "other" not in items


def test_of_type_sorted_by_codename(items: ItemLookup) -> None:
    """Verify items of one variant are listed in codename order."""
    assert [s.codename for s in items.of_type(Specification)] == ["spec_a", "spec_b"]

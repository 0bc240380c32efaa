"""Tests for description-item and code-sample extraction."""

import pytest

from api_reference_index.code_sample_items import (
    get_code_sample_items_from_code_samples,
)
from api_reference_index.content_items import (
    Callout,
    CodeSample,
    CodeSamples,
    ContentChunk,
    ContentItem,
    Response,
)
from api_reference_index.description_items import get_description_items
from api_reference_index.errors import (
    ContentLookupError,
    CyclicReferenceError,
    ItemTypeMismatchError,
    MissingItemError,
)
from api_reference_index.item_lookup import ItemLookup


def embed(codename: str) -> str:
    """Return the rich-text markup embedding an item."""
    return (
        '<object type="application/kenticocloud" data-type="item" '
        f'data-codename="{codename}"></object>'
    )


def lookup(*items: ContentItem) -> ItemLookup:
    """Build an item lookup from items."""
    return ItemLookup({it.codename: it for it in items})


def test_code_samples_expand_in_order() -> None:
    """Verify a container yields its samples in declared order."""
    items = lookup(
        CodeSamples("samples", ("js", "curl")),
        CodeSample("curl", "curl x", "shell", "rest"),
        CodeSample("js", "x()", "javascript", "js"),
    )
    samples = get_code_sample_items_from_code_samples(items["samples"], items)
    assert [s.codename for s in samples] == ["js", "curl"]


def test_code_samples_require_code_sample_items() -> None:
    """Verify a container referencing another variant fails."""
    items = lookup(
        CodeSamples("samples", ("note",)),
        Callout("note", "<p>Hi</p>", "info"),
    )
    with pytest.raises(ItemTypeMismatchError):
        get_code_sample_items_from_code_samples(items["samples"], items)


def test_description_items_flatten_chunks_and_samples() -> None:
    """Verify chunks are followed by their nested items and containers expand."""
    items = lookup(
        Callout("note", "<p>Note</p>", "info"),
        ContentChunk("chunk", "<p>Chunk</p>" + embed("nested")),
        Callout("nested", "<p>Nested</p>", "warning"),
        CodeSamples("samples", ("sample",)),
        CodeSample("sample", "x()", "javascript", "js"),
    )
    rich_text = embed("note") + embed("chunk") + embed("samples")
    assert [it.codename for it in get_description_items(rich_text, items)] == [
        "note",
        "chunk",
        "nested",
        "sample",
    ]


def test_description_items_skip_non_description_types() -> None:
    """Verify embedded items that are not description items are skipped."""
    items = lookup(
        Response("r200", "200", "application/json", "<p>Ok</p>"),
        Callout("note", "<p>Note</p>", "info"),
    )
    rich_text = embed("r200") + embed("note")
    assert [it.codename for it in get_description_items(rich_text, items)] == [
        "note"
    ]


def test_description_items_missing_reference() -> None:
    """Verify a dangling reference in rich text is a lookup failure."""
    with pytest.raises(MissingItemError):
        get_description_items(embed("ghost"), lookup())


def test_description_items_of_empty_rich_text() -> None:
    """Verify empty rich text has no description items."""
    assert get_description_items("", lookup()) == []


def test_description_items_cyclic_chunks() -> None:
    """Verify chunks embedding each other raise a lookup error."""
    items = lookup(
        ContentChunk("a", embed("b")),
        ContentChunk("b", embed("a")),
    )
    with pytest.raises(ContentLookupError) as exc_info:
        get_description_items(embed("a"), items)
    assert isinstance(exc_info.value, CyclicReferenceError)
    assert exc_info.value.path == ("a", "b", "a")


def test_description_items_repeated_chunk_is_not_a_cycle() -> None:
    """Verify the same chunk embedded twice side by side is expanded twice."""
    items = lookup(
        ContentChunk("outer", embed("shared") + embed("inner")),
        ContentChunk("inner", embed("shared")),
        ContentChunk("shared", "<p>Shared</p>"),
    )
    assert [it.codename for it in get_description_items(embed("outer"), items)] == [
        "outer",
        "shared",
        "inner",
        "shared",
    ]

"""Logic for mapping raw exported items onto the content item variants."""

from collections.abc import Callable, Iterable
from typing import Any

from api_reference_index.as_text import as_text, element_value
from api_reference_index.content_items import (
    Callout,
    Category,
    CodeSample,
    CodeSamples,
    ContentChunk,
    ContentItem,
    PathOperation,
    Response,
    Specification,
)
from api_reference_index.errors import ContentModelError
from api_reference_index.item_lookup import ItemLookup


def _rich_text(value: object) -> str:
    """Return rich-text HTML unchanged apart from element unwrapping."""
    value = element_value(value)
    return value if isinstance(value, str) else ""


def _codenames(value: object) -> tuple[str, ...]:
    """Normalize a linked-items field to a tuple of codenames."""
    value = element_value(value)
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(
        str(x.get("codename") if isinstance(x, dict) else x) for x in value if x
    )


def _specification(codename: str, it: dict[str, Any]) -> Specification:
    return Specification(
        codename=codename,
        id=as_text(it.get("id")) or codename,
        title=as_text(it.get("title")),
        version=as_text(it.get("version")),
        categories=_codenames(it.get("categories")),
        description=_rich_text(it.get("description")),
    )


def _category(codename: str, it: dict[str, Any]) -> Category:
    return Category(
        codename=codename,
        name=as_text(it.get("name")),
        description=_rich_text(it.get("description")),
        path_operations=_codenames(it.get("path_operations")),
    )


def _path_operation(codename: str, it: dict[str, Any]) -> PathOperation:
    return PathOperation(
        codename=codename,
        name=as_text(it.get("name")),
        description=_rich_text(it.get("description")),
        code_samples=_codenames(it.get("code_samples")),
        responses=_rich_text(it.get("responses")),
    )


def _response(codename: str, it: dict[str, Any]) -> Response:
    return Response(
        codename=codename,
        http_status_code=as_text(it.get("http_status_code")),
        media_type=as_text(it.get("media_type")),
        description=_rich_text(it.get("description")),
    )


def _code_samples(codename: str, it: dict[str, Any]) -> CodeSamples:
    return CodeSamples(
        codename=codename,
        code_samples=_codenames(it.get("code_samples")),
    )


def _code_sample(codename: str, it: dict[str, Any]) -> CodeSample:
    return CodeSample(
        codename=codename,
        code=_rich_text(it.get("code")),
        programming_language=as_text(it.get("programming_language")),
        platform=as_text(it.get("platform")),
    )


def _callout(codename: str, it: dict[str, Any]) -> Callout:
    return Callout(
        codename=codename,
        content=_rich_text(it.get("content")),
        callout_type=as_text(it.get("callout_type")) or "info",
    )


def _content_chunk(codename: str, it: dict[str, Any]) -> ContentChunk:
    return ContentChunk(codename=codename, content=_rich_text(it.get("content")))


BUILDERS: dict[str, Callable[[str, dict[str, Any]], ContentItem]] = {
    "zapi_specification": _specification,
    "zapi_category": _category,
    "zapi_path_operation": _path_operation,
    "zapi_response": _response,
    "code_samples": _code_samples,
    "code_sample": _code_sample,
    "callout": _callout,
    "content_chunk": _content_chunk,
}


def build_item(codename: str, it: dict[str, Any]) -> ContentItem:
    """Build the content item variant selected by the raw item's ``type``."""
    item_type = str(it.get("type") or "").strip()
    builder = BUILDERS.get(item_type)
    if builder is None:
        msg = f"Unknown content type {item_type!r} for item {codename!r}"
        raise ContentModelError(msg)
    return builder(codename, it)


def build_items(raw_items: Iterable[tuple[str, dict[str, Any]]]) -> ItemLookup:
    """Build the item lookup from ``(codename, raw_item)`` pairs."""
    items: dict[str, ContentItem] = {}
    for codename, it in raw_items:
        if codename in items:
            msg = f"Duplicate codename: {codename!r}"
            raise ContentModelError(msg)
        items[codename] = build_item(codename, it)
    return ItemLookup(items)

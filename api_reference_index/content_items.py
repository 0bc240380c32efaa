"""Data models for the content items that make up an API reference."""

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class Specification:
    """Root of an API reference; its id and title are shared by every record."""

    codename: str
    id: str
    title: str
    version: str
    categories: tuple[str, ...]
    description: str  # rich text
    item_type: Literal["zapi_specification"] = field(
        default="zapi_specification", init=False
    )


@dataclass(frozen=True)
class Category:
    """Groups path operations under a named section of the reference."""

    codename: str
    name: str
    description: str  # rich text
    path_operations: tuple[str, ...]
    item_type: Literal["zapi_category"] = field(default="zapi_category", init=False)


@dataclass(frozen=True)
class PathOperation:
    """A single endpoint, e.g. ``GET /items/{codename}``."""

    codename: str
    name: str
    description: str  # rich text
    code_samples: tuple[str, ...]
    responses: str  # rich text embedding Response items
    item_type: Literal["zapi_path_operation"] = field(
        default="zapi_path_operation", init=False
    )


@dataclass(frozen=True)
class Response:
    """A documented response of a path operation."""

    codename: str
    http_status_code: str
    media_type: str
    description: str  # rich text
    item_type: Literal["zapi_response"] = field(default="zapi_response", init=False)


@dataclass(frozen=True)
class CodeSamples:
    """Container grouping the same sample written for several platforms."""

    codename: str
    code_samples: tuple[str, ...]
    item_type: Literal["code_samples"] = field(default="code_samples", init=False)


@dataclass(frozen=True)
class CodeSample:
    """A single code sample."""

    codename: str
    code: str
    programming_language: str
    platform: str
    item_type: Literal["code_sample"] = field(default="code_sample", init=False)


@dataclass(frozen=True)
class Callout:
    """An info/warning box embedded in a description."""

    codename: str
    content: str  # rich text
    callout_type: str
    item_type: Literal["callout"] = field(default="callout", init=False)


@dataclass(frozen=True)
class ContentChunk:
    """A reusable piece of rich text, possibly embedding other items."""

    codename: str
    content: str  # rich text
    item_type: Literal["content_chunk"] = field(default="content_chunk", init=False)


ContentItem = (
    Specification
    | Category
    | PathOperation
    | Response
    | CodeSamples
    | CodeSample
    | Callout
    | ContentChunk
)

# Items that can be indexed as fragments of a description.
DescriptionItem = Callout | CodeSample | ContentChunk

# Items whose own rich-text description is indexed as a record.
DescribedItem = Specification | Category | PathOperation | Response

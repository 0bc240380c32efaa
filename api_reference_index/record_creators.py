"""Functions building partial records from content items."""

from collections.abc import Callable

from api_reference_index.content_items import (
    Callout,
    CodeSample,
    ContentChunk,
    DescribedItem,
    DescriptionItem,
    PathOperation,
    Response,
    Specification,
)
from api_reference_index.records import PartialRecord
from api_reference_index.rich_text import rich_text_to_plain_text

OBJECT_ID_SEPARATOR = "#"

DescriptionRecordCreator = Callable[[DescriptionItem], PartialRecord]


def object_id_for(*codenames: str) -> str:
    """Build a stable index key from the codenames identifying a record."""
    return OBJECT_ID_SEPARATOR.join(codenames)


def description_item_content(item: DescriptionItem) -> str:
    """Return the indexable text of a description item."""
    if isinstance(item, CodeSample):
        return item.code.strip()
    if isinstance(item, (Callout, ContentChunk)):
        return rich_text_to_plain_text(item.content)
    msg = f"Unsupported description item type: {item.item_type}"
    raise TypeError(msg)


def create_generic_record_from_description_content(
    owner: DescribedItem, heading: str
) -> PartialRecord:
    """Create the record holding the plain text of an item's own description."""
    return PartialRecord(
        codename=owner.codename,
        content=rich_text_to_plain_text(owner.description),
        heading=heading,
        object_id=object_id_for(owner.codename),
    )


def create_generic_description_record(
    owner: DescribedItem, location: DescribedItem | None = None
) -> DescriptionRecordCreator:
    """Return a creator attributing description items to the given owner.

    ``location`` is the item whose rich text embeds the description items when
    it differs from the owner, e.g. a response of the owning path operation.
    Its codename becomes part of the object id.
    """
    heading = _heading_of(owner)
    scope = (owner.codename, location.codename) if location else (owner.codename,)

    def create(item: DescriptionItem) -> PartialRecord:
        return PartialRecord(
            codename=owner.codename,
            content=description_item_content(item),
            heading=heading,
            object_id=object_id_for(*scope, item.codename),
        )

    return create


def create_specification_description_record(
    specification: Specification,
) -> DescriptionRecordCreator:
    """Return a creator attributing description items to a specification."""

    def create(item: DescriptionItem) -> PartialRecord:
        return PartialRecord(
            codename=specification.codename,
            content=description_item_content(item),
            heading=specification.title,
            object_id=object_id_for(specification.codename, item.codename),
        )

    return create


def create_response_description_content_record(
    response: Response, path_operation: PathOperation
) -> PartialRecord:
    """Create the record for a response, attributed to its path operation."""
    return PartialRecord(
        codename=path_operation.codename,
        content=rich_text_to_plain_text(response.description),
        heading=response_heading(response, path_operation),
        object_id=object_id_for(path_operation.codename, response.codename),
    )


def response_heading(response: Response, path_operation: PathOperation) -> str:
    """Return e.g. ``List items 200 response``."""
    parts = [path_operation.name, response.http_status_code.strip(), "response"]
    return " ".join(p for p in parts if p)


def _heading_of(owner: DescribedItem) -> str:
    if isinstance(owner, Specification):
        return owner.title
    if isinstance(owner, Response):
        return owner.http_status_code
    return owner.name

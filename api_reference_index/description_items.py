"""Logic for extracting indexable items embedded in rich text."""

import logging

from api_reference_index.code_sample_items import (
    get_code_sample_items_from_code_samples,
)
from api_reference_index.content_items import (
    Callout,
    CodeSample,
    CodeSamples,
    ContentChunk,
    DescriptionItem,
)
from api_reference_index.errors import CyclicReferenceError
from api_reference_index.item_lookup import ItemLookup
from api_reference_index.rich_text import get_child_codenames_from_rich_text

logger = logging.getLogger(__name__)


def get_description_items(
    rich_text: str | None,
    items: ItemLookup,
    _expanding: tuple[str, ...] = (),
) -> list[DescriptionItem]:
    """Return the description items embedded in rich text, depth first.

    ``_expanding`` holds the chain of content chunks currently being
    expanded; a chunk that embeds one of them raises CyclicReferenceError.
    """
    description_items: list[DescriptionItem] = []
    for codename in get_child_codenames_from_rich_text(rich_text):
        item = items[codename]
        if isinstance(item, (Callout, CodeSample)):
            description_items.append(item)
        elif isinstance(item, CodeSamples):
            description_items.extend(
                get_code_sample_items_from_code_samples(item, items)
            )
        elif isinstance(item, ContentChunk):
            if codename in _expanding:
                raise CyclicReferenceError((*_expanding, codename))
            description_items.append(item)
            # Chunks may embed further callouts and samples
            description_items.extend(
                get_description_items(item.content, items, (*_expanding, codename))
            )
        else:
            logger.debug(
                "Skipping embedded %s %r: not a description item",
                item.item_type,
                codename,
            )
    return description_items

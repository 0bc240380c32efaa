"""Read-only lookup of content items by codename."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TypeVar

from api_reference_index.content_items import ContentItem
from api_reference_index.errors import ItemTypeMismatchError, MissingItemError

T = TypeVar("T")


class ItemLookup(Mapping[str, ContentItem]):
    """Maps codenames to content items and resolves them to an expected variant."""

    def __init__(self, items: Mapping[str, ContentItem]) -> None:
        """Initialize the lookup with a snapshot of the given items."""
        self._items = MappingProxyType(dict(items))

    def __getitem__(self, codename: str) -> ContentItem:
        try:
            return self._items[codename]
        except KeyError:
            raise MissingItemError(codename) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def resolve(self, codename: str, expected_type: type[T]) -> T:
        """Return the item for a codename, failing if it is of another variant."""
        item = self[codename]
        if not isinstance(item, expected_type):
            raise ItemTypeMismatchError(
                codename,
                expected=expected_type.item_type,  # type: ignore[attr-defined]
                actual=item.item_type,
            )
        return item

    def of_type(self, expected_type: type[T]) -> list[T]:
        """Return all items of one variant, sorted by codename."""
        return [
            item
            for _, item in sorted(self._items.items(), key=lambda kv: kv[0])
            if isinstance(item, expected_type)
        ]

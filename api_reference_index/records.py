"""Data models for search-index records."""

from dataclasses import dataclass, replace
from typing import Any

API_SECTION = "API"


@dataclass(frozen=True)
class PartialRecord:
    """A record before the specification-level fields are stamped on it."""

    codename: str
    content: str
    heading: str
    object_id: str  # unique index key, serialized as objectID


@dataclass(frozen=True)
class FinalRecord:
    """A record ready to be uploaded to the search index."""

    id: str
    section: str
    title: str
    codename: str
    content: str
    heading: str
    object_id: str

    @classmethod
    def from_partial(
        cls, record: PartialRecord, *, id: str, title: str, section: str = API_SECTION
    ) -> "FinalRecord":
        """Stamp the shared specification fields onto a partial record."""
        return cls(
            id=id,
            section=section,
            title=title,
            codename=record.codename,
            content=record.content,
            heading=record.heading,
            object_id=record.object_id,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the record in the shape expected by the search index."""
        return {
            "id": self.id,
            "section": self.section,
            "title": self.title,
            "codename": self.codename,
            "content": self.content,
            "heading": self.heading,
            "objectID": self.object_id,
        }


def with_unique_object_ids(records: list[PartialRecord]) -> list[PartialRecord]:
    """Suffix repeated object ids with an ordinal (``-2``, ``-3``...).

    The first occurrence keeps its id. Ordinals follow traversal order, so
    they are stable for unchanged content.
    """
    seen: set[str] = set()
    counts: dict[str, int] = {}
    unique: list[PartialRecord] = []
    for record in records:
        object_id = record.object_id
        while object_id in seen:
            counts[record.object_id] = counts.get(record.object_id, 1) + 1
            object_id = f"{record.object_id}-{counts[record.object_id]}"
        seen.add(object_id)
        if object_id != record.object_id:
            record = replace(record, object_id=object_id)
        unique.append(record)
    return unique

"""Collects the records of an indexing run and writes them as JSON."""

import json
from pathlib import Path
from typing import Any

from api_reference_index.content_items import Specification
from api_reference_index.records import FinalRecord

SCHEMA_VERSION = 1


class IndexReport:
    """Accumulates records per specification for a single run."""

    def __init__(self, config_hash: str) -> None:
        """Initialize an empty report for the given configuration hash."""
        self.config_hash = config_hash
        self.records: list[FinalRecord] = []
        self.record_counts: dict[str, int] = {}

    def add_records(
        self, specification: Specification, records: list[FinalRecord]
    ) -> None:
        """Append the records produced for one specification."""
        self.records.extend(records)
        self.record_counts[specification.codename] = len(records)

    def to_dict(self) -> dict[str, Any]:
        """Return the report document.

        There is no timestamp in the document so that two runs over the same
        content produce identical files.
        """
        return {
            "meta": {
                "config_hash": self.config_hash,
                "schema_version": SCHEMA_VERSION,
                "total_records": len(self.records),
            },
            "records": [r.to_dict() for r in self.records],
            "stats": {"record_counts": dict(sorted(self.record_counts.items()))},
        }

    def write(
        self, path: Path, *, indent: int | None = 2, ensure_ascii: bool = False
    ) -> None:
        """Write the report to disk, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(self.to_dict(), indent=indent, ensure_ascii=ensure_ascii)
        path.write_text(text + "\n", encoding="utf-8")

"""Logic for loading a content export from a YAML or JSON file."""

import logging
from pathlib import Path
from typing import Any

import yaml

from api_reference_index.build_items import build_items
from api_reference_index.item_lookup import ItemLookup
from api_reference_index.iter_raw_items import iter_raw_items

logger = logging.getLogger(__name__)


def load_export(path: Path) -> dict[str, Any]:
    """Load and parse an export file; JSON is read as a YAML subset."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    return doc or {}


def load_content_items(path: Path) -> ItemLookup:
    """Load the item lookup from an export file."""
    items = build_items(iter_raw_items(load_export(path)))
    logger.info("Loaded %d content items from %s", len(items), path)
    return items

"""Orchestration logic for turning a content export into search records."""

import argparse
import logging
from typing import Any

from api_reference_index.api_reference_processor import ApiReferenceProcessor
from api_reference_index.compute_config_hash import compute_config_hash
from api_reference_index.content_items import Specification
from api_reference_index.errors import ContentLookupError, ContentModelError
from api_reference_index.index_report import IndexReport
from api_reference_index.item_lookup import ItemLookup
from api_reference_index.load_content_items import load_content_items

logger = logging.getLogger(__name__)


def run_indexing(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Execute the full indexing pipeline with an already loaded config."""
    if not args.content_file.is_file():
        msg = f"Content export not found: {args.content_file}"
        raise SystemExit(msg)

    config = _apply_overrides(config, args)
    try:
        items = load_content_items(args.content_file)
    except ContentModelError as exc:
        msg = f"Invalid content export {args.content_file}: {exc}"
        raise SystemExit(msg) from exc

    report = IndexReport(compute_config_hash(config))
    processor = ApiReferenceProcessor(items)

    try:
        specifications = select_specifications(items, config["specifications"])
        if not specifications:
            msg = f"No specifications found in: {args.content_file}"
            raise SystemExit(msg)

        for specification in specifications:
            records = processor.process_specification(specification)
            report.add_records(specification, records)
            print(f"  {specification.codename}: {len(records)} records")
    except ContentLookupError as exc:
        # Nothing is written when any specification fails
        msg = f"Indexing aborted: {exc}"
        raise SystemExit(msg) from exc

    if args.dry_run:
        print(f"Dry run complete. {len(report.records)} records were not written.")
        return 0

    out_file = args.out_file.resolve()
    report.write(
        out_file,
        indent=config["output"].get("indent"),
        ensure_ascii=bool(config["output"].get("ensure_ascii")),
    )
    print(
        f"Wrote {len(report.records)} records for {len(specifications)} "
        f"specifications into: {out_file}"
    )
    return 0


def select_specifications(
    items: ItemLookup, codenames: list[str]
) -> list[Specification]:
    """Return the requested specifications, or all of them by codename."""
    if codenames:
        return [items.resolve(codename, Specification) for codename in codenames]
    return items.of_type(Specification)


def _apply_overrides(
    config: dict[str, Any], args: argparse.Namespace
) -> dict[str, Any]:
    """Apply command-line overrides to the loaded configuration."""
    config = dict(config)
    if args.specification:
        config["specifications"] = list(args.specification)
    logger.debug("Using configuration hash %s", compute_config_hash(config))
    return config

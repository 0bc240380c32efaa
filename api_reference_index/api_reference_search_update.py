"""Build search-index records from an exported API reference.

Reads a YAML or JSON export of the content items that make up one or more
API reference specifications and writes the flattened search records to a
JSON file, ready for upload by a separate step.
"""

import argparse
import logging
from pathlib import Path
from typing import Any

from api_reference_index.load_config import load_config
from api_reference_index.run_indexing import run_indexing


def configure_logging(config: dict[str, Any], *, verbose: bool) -> None:
    """Configure root logging from the loaded config or the verbose flag."""
    level_name = "DEBUG" if verbose else config["logging"]["level"]
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Run the indexing process."""
    ap = argparse.ArgumentParser(
        description="Convert an API reference content export to search records.",
    )
    ap.add_argument(
        "content_file",
        type=Path,
        help="YAML or JSON export containing an 'items' collection",
    )
    ap.add_argument(
        "out_file",
        type=Path,
        help="Output JSON file for the generated records",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--specification",
        action="append",
        metavar="CODENAME",
        help="Only index this specification (repeatable; default: all)",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the records without writing the output file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    config = load_config(args.config)
    configure_logging(config, verbose=args.verbose)
    return run_indexing(args, config)


if __name__ == "__main__":
    raise SystemExit(main())

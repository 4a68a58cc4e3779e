"""Interface for ``python -m form_tree``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .errors import FormTreeError
from .key_mapping import DEFAULT_SEPARATOR
from .tree import TreeBuilder


__all__ = ["main"]

logger = logging.getLogger(__name__)


def _read_input(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with Path(source).open(encoding="utf-8") as handle:
        return json.load(handle)


def main(args: Sequence[str] | None = None) -> None:
    """Read flat form record(s) as JSON and print the nested field trees."""
    parser = ArgumentParser(prog="form_tree", description=main.__doc__)
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("input", nargs="?", default="-", help="JSON file with one record or a list of records")
    _ = parser.add_argument("--sep", default=DEFAULT_SEPARATOR, help="composite key separator")
    _ = parser.add_argument("--indent", type=int, default=2, help="JSON output indentation")
    _ = parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level",
    )
    options = parser.parse_args(args)

    logging.basicConfig(level=options.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        payload = _read_input(options.input)
    except (OSError, ValueError) as exc:
        parser.exit(1, f"error: cannot read {options.input}: {exc}\n")

    records = payload if isinstance(payload, list) else [payload]
    if not all(isinstance(record, dict) for record in records):
        parser.exit(1, "error: input must be a JSON object or a list of objects\n")

    builder = TreeBuilder(options.sep)
    logger.info("building %d record(s)", len(records))
    try:
        trees = builder.build_records(records)
    except FormTreeError as exc:
        parser.exit(1, f"error: {exc}\n")

    output: Any = [[node.to_dict() for node in tree] for tree in trees]
    if not isinstance(payload, list):
        output = output[0]

    json.dump(output, sys.stdout, indent=options.indent)
    _ = sys.stdout.write("\n")


if __name__ == "__main__":
    main()

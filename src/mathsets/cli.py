"""Command line front end for subset enumeration."""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from collections.abc import Sequence

from mathsets.combinatorics import (
    ElementNotFoundError,
    InvalidArgumentError,
    count_subsets_of_size,
    iter_subsets_of_size_containing,
)
from mathsets.config import EnumerationConfig, load_config
from mathsets.logging import setup_logging
from mathsets.sets import Set

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print every fixed-size subset of a set of elements."
    )
    parser.add_argument("elements", nargs="*", help="Elements of the set (duplicates collapse).")
    parser.add_argument("-n", "--size", type=int, default=None, help="Subset size.")
    parser.add_argument(
        "-r",
        "--require",
        action="append",
        default=None,
        help="Element every subset must contain. Repeat for several.",
    )
    parser.add_argument("--limit", type=int, default=None, help="Print at most this many subsets.")
    parser.add_argument("--count", action="store_true", help="Print only the number of subsets.")
    parser.add_argument("--config", default=None, help="YAML or JSON config file.")
    parser.add_argument("--log-level", default=None, help="Logging level name.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EnumerationConfig:
    """Merge a config file (if any) with command line overrides."""
    base = load_config(args.config) if args.config else EnumerationConfig()
    overrides: dict[str, object] = {}
    if args.elements:
        overrides["elements"] = list(args.elements)
    if args.size is not None:
        overrides["subset_size"] = args.size
    if args.require is not None:
        overrides["required"] = list(args.require)
    if args.limit is not None:
        overrides["limit"] = args.limit
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return EnumerationConfig.model_validate({**base.model_dump(), **overrides})


def run(config: EnumerationConfig, *, count_only: bool = False) -> list[str]:
    """Return the output lines for one enumeration."""
    source = Set(config.elements)
    if count_only:
        total = count_subsets_of_size(source, config.subset_size, config.required)
        return [str(total)]

    subsets = iter_subsets_of_size_containing(source, config.subset_size, config.required)
    if config.limit is not None:
        subsets = itertools.islice(subsets, config.limit)
    return [str(subset) for subset in subsets]


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    setup_logging(config.log_level)
    logger.info(
        "Enumerating %d-subsets of %d elements", config.subset_size, len(config.elements)
    )
    try:
        lines = run(config, count_only=args.count)
    except (InvalidArgumentError, ElementNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0

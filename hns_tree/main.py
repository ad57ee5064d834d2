"""CLI entry point for the namespace tree utility."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import IO

from .config import Config, OutputFormat, default_kubeconfig
from .exceptions import HnsTreeError
from .fetch import fetch_namespaces
from .forest import build_forest
from .renderer import print_forest

logger = logging.getLogger(__name__)


def _output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_args(argv: Sequence[str] | None = None) -> Config:
    """Parse command-line arguments into a Config."""
    parser = argparse.ArgumentParser(
        prog="hns-tree",
        description="Show the hierarchy of namespaces in a Kubernetes cluster.",
    )
    kubeconfig = default_kubeconfig()
    parser.add_argument(
        "--kubeconfig",
        default=kubeconfig,
        help=(
            "(optional) absolute path to the kubeconfig file"
            if kubeconfig
            else "absolute path to the kubeconfig file"
        ),
    )
    parser.add_argument(
        "--output",
        "-o",
        type=_output_format,
        default=OutputFormat.TREE,
        help="output format: tree, json, or yaml (default: tree)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="log debug messages to stderr",
    )
    args = parser.parse_args(argv)
    return Config(
        kubeconfig=args.kubeconfig,
        output_format=args.output,
        verbose=args.verbose,
    )


def run(cfg: Config, stream: IO[str] | None = None) -> None:
    """Fetch namespaces, build the forest and print it."""
    resources = fetch_namespaces(cfg.kubeconfig)
    roots = build_forest(resources)
    logger.debug("Built forest with %d roots", len(roots))
    print_forest(roots, cfg.output_format, stream)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments, render the namespace tree and exit."""
    cfg = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if cfg.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        run(cfg)
    except HnsTreeError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

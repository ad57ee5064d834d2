"""Tree, JSON and YAML rendering for namespace forests."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import IO

import yaml

from .config import OutputFormat
from .exceptions import SerializationError
from .models import Node


def render_tree(roots: Sequence[Node]) -> str:
    """Render every root and its descendants as an indented tree."""
    lines: list[str] = []
    for root in roots:
        lines.append(root.name)
        for i, child in enumerate(root.children):
            lines.extend(_render_subtree(child, "", i == len(root.children) - 1))
    return "".join(line + "\n" for line in lines)


def _render_subtree(node: Node, prefix: str, is_last: bool) -> list[str]:
    """Recursively render a subtree as tree lines."""
    connector = "└── " if is_last else "├── "
    lines = [prefix + connector + node.name]
    extension = "    " if is_last else "│   "
    child_prefix = prefix + extension
    for i, child in enumerate(node.children):
        lines.extend(
            _render_subtree(child, child_prefix, i == len(node.children) - 1)
        )
    return lines


def render_json(roots: Sequence[Node]) -> str:
    """Render the forest as a JSON array with two-space indentation."""
    try:
        return json.dumps([root.to_dict() for root in roots], indent=2)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to encode JSON: {e}") from e


def render_yaml(roots: Sequence[Node]) -> str:
    """Render the forest as a block-style YAML sequence."""
    try:
        return yaml.safe_dump(
            [root.to_dict() for root in roots],
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise SerializationError(f"failed to encode YAML: {e}") from e


def render(roots: Sequence[Node], output_format: OutputFormat) -> str:
    """Render the forest in the given output format."""
    if output_format is OutputFormat.JSON:
        return render_json(roots) + "\n"
    if output_format is OutputFormat.YAML:
        return render_yaml(roots)
    return render_tree(roots)


def print_tree(roots: Sequence[Node], stream: IO[str] | None = None) -> None:
    _write(render(roots, OutputFormat.TREE), stream)


def print_json(roots: Sequence[Node], stream: IO[str] | None = None) -> None:
    _write(render(roots, OutputFormat.JSON), stream)


def print_yaml(roots: Sequence[Node], stream: IO[str] | None = None) -> None:
    _write(render(roots, OutputFormat.YAML), stream)


def print_forest(
    roots: Sequence[Node], output_format: OutputFormat, stream: IO[str] | None = None
) -> None:
    """Render the forest and write it to ``stream`` (stdout by default)."""
    _write(render(roots, output_format), stream)


def _write(text: str, stream: IO[str] | None) -> None:
    (stream or sys.stdout).write(text)

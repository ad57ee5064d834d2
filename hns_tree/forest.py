"""Forest building from flat parent references."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .models import Node, Resource

logger = logging.getLogger(__name__)


@dataclass
class _WorkingNode:
    node: Node
    parent_name: str | None


def build_forest(resources: Iterable[Resource]) -> list[Node]:
    """Assemble resources into a forest of root nodes sorted by name.

    A resource whose parent is missing from the input is dropped, and so are
    resources caught in a parent cycle, since neither kind is a root nor
    reachable from one. Children lists and the returned roots are sorted by
    name regardless of input order.
    """
    nodes: dict[str, _WorkingNode] = {}
    for resource in resources:
        nodes[resource.name] = _WorkingNode(
            node=Node(name=resource.name),
            parent_name=resource.parent_name if resource.has_parent else None,
        )

    roots: list[Node] = []
    for working in nodes.values():
        if working.parent_name is None:
            roots.append(working.node)
            continue
        parent = nodes.get(working.parent_name)
        if parent is None:
            logger.debug(
                "Dropping %s: parent %s not found", working.node.name, working.parent_name
            )
            continue
        parent.node.children.append(working.node)

    for working in nodes.values():
        working.node.children.sort(key=lambda n: n.name)
    roots.sort(key=lambda n: n.name)
    return roots

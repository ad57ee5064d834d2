"""
Data models for namespace hierarchies.

A Resource is the flat input (a name plus an optional parent name); a Node
is one entry of the assembled forest.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Resource:
    """A named resource with an optional reference to its parent by name."""

    name: str
    parent_name: str | None = None

    @property
    def has_parent(self) -> bool:
        return bool(self.parent_name)


@dataclass
class Node:
    """A node in the namespace hierarchy."""

    name: str
    children: list[Node] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a serializable dict, leaving out ``children`` on leaves."""
        data: dict[str, Any] = {"name": self.name}
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Node:
        """Rebuild a Node from the shape produced by ``to_dict``."""
        return cls(
            name=data["name"],
            children=[cls.from_dict(child) for child in data.get("children") or []],
        )

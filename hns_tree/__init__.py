"""Namespace hierarchy discovery and rendering."""

from .exceptions import FetchError, HnsTreeError, SerializationError
from .forest import build_forest
from .models import Node, Resource
from .renderer import (
    print_forest,
    print_json,
    print_tree,
    print_yaml,
    render,
    render_json,
    render_tree,
    render_yaml,
)

__all__ = [
    "FetchError",
    "HnsTreeError",
    "SerializationError",
    "Node",
    "Resource",
    "build_forest",
    "print_forest",
    "print_json",
    "print_tree",
    "print_yaml",
    "render",
    "render_json",
    "render_tree",
    "render_yaml",
]

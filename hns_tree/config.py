"""Run configuration for hns-tree."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class OutputFormat(Enum):
    """Supported output formats."""
    TREE = "tree"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def parse(cls, value: str) -> OutputFormat:
        """Parse a format name case-insensitively."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"invalid output format {value!r} (choose from {choices})") from None

    def __str__(self) -> str:
        return self.value


def default_kubeconfig() -> str | None:
    """Return ``~/.kube/config`` when a home directory is known, else None."""
    home = os.path.expanduser("~")
    if not home or home == "~":
        return None
    return os.path.join(home, ".kube", "config")


@dataclass
class Config:
    """Options for a single run."""
    kubeconfig: str | None = None
    output_format: OutputFormat = OutputFormat.TREE
    verbose: bool = False

"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class TouchCommand:
    """Create an empty file."""

    path: str
    command: Literal["touch"] = "touch"


@dataclass(frozen=True)
class MkdirCommand:
    """Create a directory, optionally with missing parents."""

    path: str
    parents: bool = False
    command: Literal["mkdir"] = "mkdir"


@dataclass(frozen=True)
class LsCommand:
    """List direct children of a directory."""

    path: str
    command: Literal["ls"] = "ls"


@dataclass(frozen=True)
class ExistsCommand:
    """Check whether a path exists."""

    path: str
    command: Literal["exists"] = "exists"


@dataclass(frozen=True)
class StatCommand:
    """Show metadata of a path."""

    path: str
    command: Literal["stat"] = "stat"


CommandRequest = Union[TouchCommand, MkdirCommand, LsCommand, ExistsCommand, StatCommand]

"""Data models for the tsk reference catalog and site docs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

OptionType = Literal["string", "boolean", "number"]
SyntaxType = Literal["string", "array", "table", "boolean", "number"]


@dataclass(frozen=True, slots=True)
class CommandOption:
    """A flag accepted by a tsk CLI command."""

    name: str
    description: str
    type: OptionType
    shorthand: str | None = None
    default: str | bool | int | float | None = None
    valid_values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Command:
    """A tsk CLI command with its usage and examples."""

    name: str
    description: str
    usage: str
    examples: tuple[str, ...] = ()
    options: tuple[CommandOption, ...] = ()


@dataclass(frozen=True, slots=True)
class SyntaxElement:
    """A tasks.toml grammar element.

    Keys are dotted and may contain a ``*`` wildcard segment
    (``tasks.*.cmds``).
    """

    key: str
    type: SyntaxType
    description: str
    required: bool = False
    examples: tuple[str, ...] = ()
    valid_values: tuple[str, ...] = ()

    @property
    def root(self) -> str:
        """First dot-delimited segment of the key."""
        return self.key.split(".", 1)[0]


@dataclass(frozen=True, slots=True)
class Example:
    """A complete tasks.toml example."""

    name: str
    description: str
    content: str


@dataclass
class SiteDoc:
    """A remote documentation page.

    ``content`` is None until the page has been fetched. A failed bulk
    fetch stores a diagnostic string instead of leaving it None. Empty
    content counts as not fetched.
    """

    url: str
    title: str | None = None
    content: str | None = None
    last_fetched: datetime | None = field(default=None, compare=False)

    @property
    def is_fetched(self) -> bool:
        return bool(self.content)

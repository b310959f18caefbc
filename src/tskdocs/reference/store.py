"""Read-only access to the tsk reference catalog."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tskdocs.reference.models import Command, Example, SyntaxElement


def syntax_matches(query: str, key: str) -> bool:
    """Whether a syntax lookup for ``query`` should surface ``key``.

    Matches the exact key, any key containing the query, and any key whose
    root segment appears in the query. This lets short queries like ``env``
    reach wildcard keys such as ``tasks.*.env``.
    """
    return key == query or query in key or key.split(".", 1)[0] in query


@dataclass(frozen=True)
class ReferenceStore:
    """Immutable catalog of commands, syntax elements and examples.

    Lookups never raise; a miss is an empty result or None.
    """

    commands: tuple[Command, ...]
    syntax: tuple[SyntaxElement, ...]
    examples: tuple[Example, ...]

    @classmethod
    def from_seed(
        cls,
        commands: Sequence[Command] | None = None,
        syntax: Sequence[SyntaxElement] | None = None,
        examples: Sequence[Example] | None = None,
    ) -> ReferenceStore:
        """Build a store from the built-in data, optionally replacing parts of it."""
        from tskdocs.reference import data

        return cls(
            commands=tuple(data.COMMANDS if commands is None else commands),
            syntax=tuple(data.SYNTAX if syntax is None else syntax),
            examples=tuple(data.EXAMPLES if examples is None else examples),
        )

    def find_command(self, name: str) -> Command | None:
        for command in self.commands:
            if command.name == name:
                return command
        return None

    def all_commands(self) -> list[Command]:
        return list(self.commands)

    def command_names(self) -> list[str]:
        return [c.name for c in self.commands]

    def find_syntax(self, key: str) -> list[SyntaxElement]:
        """All elements matching ``key``, in catalog order (not deduplicated)."""
        return [s for s in self.syntax if syntax_matches(key, s.key)]

    def all_syntax(self) -> list[SyntaxElement]:
        return list(self.syntax)

    def syntax_keys(self) -> list[str]:
        return [s.key for s in self.syntax]

    def find_examples(self, category: str) -> list[Example]:
        """Examples whose name contains ``category`` (case-insensitive).

        ``all`` returns every example.
        """
        if category == "all":
            return list(self.examples)
        needle = category.lower()
        return [e for e in self.examples if needle in e.name.lower()]

    def all_examples(self) -> list[Example]:
        return list(self.examples)

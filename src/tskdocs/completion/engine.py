"""Context-aware completion suggestions for tasks.toml."""

from __future__ import annotations

import structlog

from tskdocs.completion.classifier import Location, classify
from tskdocs.completion.models import CompletionResult, CompletionSuggestion
from tskdocs.reference.models import SyntaxElement
from tskdocs.reference.store import ReferenceStore

log = structlog.get_logger(__name__)

# Curated starter tasks offered under a bare [tasks] table
TASK_STUBS: tuple[tuple[str, str, str], ...] = (
    (
        "build",
        '[tasks.build]\ndesc = "Build the project"\ncmds = ["make build"]',
        "Build task skeleton",
    ),
    (
        "test",
        '[tasks.test]\ndesc = "Run the tests"\ncmds = ["make test"]',
        "Test task skeleton",
    ),
    (
        "clean",
        '[tasks.clean]\ndesc = "Remove build artifacts"\ncmds = ["rm -rf build"]',
        "Clean task skeleton",
    ),
)

TASK_PROPERTIES: tuple[str, ...] = ("desc", "cmds", "deps", "env", "dotenv", "dir", "pre", "post")

ROOT_KEY_SNIPPETS: tuple[tuple[str, str], ...] = (
    ("env", '[env]\nKEY = "value"'),
    ("dotenv", 'dotenv = ".env"'),
    ("tasks", '[tasks.name]\ndesc = ""\ncmds = [""]'),
)


class CompletionEngine:
    """Produces suggestions in fixed candidate order for a classified location."""

    def __init__(self, store: ReferenceStore) -> None:
        self._store = store

    def complete(self, context: str, line_prefix: str = "") -> CompletionResult:
        location = classify(context, line_prefix)
        if location is Location.TASK_NAME_ROOT:
            suggestions = self._task_stubs()
        elif location is Location.INSIDE_TASK_BODY:
            suggestions = self._task_properties()
        else:
            suggestions = self._root_keys()

        log.debug("completion", location=location.value, suggestions=len(suggestions))
        return CompletionResult(suggestions=suggestions, context=context)

    def _task_stubs(self) -> list[CompletionSuggestion]:
        return [
            CompletionSuggestion(label=name, insert_text=snippet, description=desc, kind="task")
            for name, snippet, desc in TASK_STUBS
        ]

    def _task_property_element(self, name: str) -> SyntaxElement | None:
        """Syntax for a task property, preferring the ``tasks.*.<name>`` form."""
        matches = self._store.find_syntax(name)
        if not matches:
            return None
        wildcard_key = f"tasks.*.{name}"
        for element in matches:
            if element.key == wildcard_key:
                return element
        return matches[0]

    def _task_properties(self) -> list[CompletionSuggestion]:
        suggestions: list[CompletionSuggestion] = []
        for name in TASK_PROPERTIES:
            element = self._task_property_element(name)
            if element is None:
                continue
            suggestions.append(
                CompletionSuggestion(
                    label=name,
                    insert_text=f"{name} = ",
                    description=element.description,
                    kind="property",
                )
            )
        return suggestions

    def _root_keys(self) -> list[CompletionSuggestion]:
        suggestions: list[CompletionSuggestion] = []
        for key, snippet in ROOT_KEY_SNIPPETS:
            element = next((s for s in self._store.all_syntax() if s.key == key), None)
            if element is None:
                continue
            suggestions.append(
                CompletionSuggestion(
                    label=key,
                    insert_text=snippet,
                    description=element.description,
                    kind="property",
                )
            )
        return suggestions

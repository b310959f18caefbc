"""Classify a partial tasks.toml context into a grammar location.

This is a shallow heuristic over the text before the cursor, not a TOML
parser. Rules are checked in order and the first match wins.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

TASKS_TABLE_HEADER = "[tasks]"
TASK_HEADER_PREFIX = "[tasks."


class Location(StrEnum):
    """Where the cursor sits in a tasks file."""

    TASK_LIST_ROOT = "task_list_root"
    TASK_NAME_ROOT = "task_name_root"
    INSIDE_TASK_BODY = "inside_task_body"
    DOCUMENT_ROOT = "document_root"


Rule = tuple[Callable[[str, str], bool], Location]

RULES: tuple[Rule, ...] = (
    # Bare [tasks] table: offer task stubs
    (lambda context, _prefix: TASKS_TABLE_HEADER in context, Location.TASK_NAME_ROOT),
    # [tasks.<name>] already in the context
    (lambda context, _prefix: TASK_HEADER_PREFIX in context, Location.INSIDE_TASK_BODY),
    # Header still being typed on the current line
    (
        lambda _context, prefix: prefix.lstrip().startswith(TASK_HEADER_PREFIX),
        Location.INSIDE_TASK_BODY,
    ),
)


def classify(context: str, line_prefix: str = "") -> Location:
    """Map the text before the cursor to a grammar location."""
    for predicate, location in RULES:
        if predicate(context, line_prefix):
            return location
    return Location.DOCUMENT_ROOT

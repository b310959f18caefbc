"""tsk reference catalog - commands, tasks.toml syntax, examples and site doc seeds."""

from tskdocs.reference.models import (
    Command,
    CommandOption,
    Example,
    SiteDoc,
    SyntaxElement,
)
from tskdocs.reference.store import ReferenceStore, syntax_matches

__all__ = [
    "Command",
    "CommandOption",
    "Example",
    "ReferenceStore",
    "SiteDoc",
    "SyntaxElement",
    "syntax_matches",
]

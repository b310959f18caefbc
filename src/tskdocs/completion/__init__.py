"""tasks.toml completion - context classification and suggestions."""

from tskdocs.completion.classifier import Location, classify
from tskdocs.completion.engine import CompletionEngine
from tskdocs.completion.models import CompletionResult, CompletionSuggestion

__all__ = [
    "CompletionEngine",
    "CompletionResult",
    "CompletionSuggestion",
    "Location",
    "classify",
]

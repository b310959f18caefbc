"""Completion result models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SuggestionKind = Literal["property", "value", "task", "command"]


class CompletionSuggestion(BaseModel):
    """A single completion candidate.

    Serialized with the wire names editors expect (``insertText``, ``type``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str
    insert_text: str = Field(alias="insertText")
    description: str
    kind: SuggestionKind = Field(alias="type")


class CompletionResult(BaseModel):
    """Ordered suggestions plus the context they were computed for."""

    suggestions: list[CompletionSuggestion] = Field(default_factory=list)
    context: str

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)

"""Base classes for tool parameters."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseParams(BaseModel):
    """Base class for all tool parameters.

    Uses extra="forbid" to reject unknown fields with clear errors.
    """

    model_config = ConfigDict(extra="forbid")


def drop_non_string(value: Any) -> str | None:
    """Before-validator for lenient optional filters: non-strings count as absent."""
    return value if isinstance(value, str) else None

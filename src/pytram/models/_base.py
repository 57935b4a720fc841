"""Base model shared by every pytram value type.

All models are frozen: a snapshot handed out by a controller can be kept,
compared or logged without any risk of it changing underneath the caller.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

StopId = int | str
"""Identifier of a tram stop (numeric or symbolic)."""


class TramBaseModel(BaseModel):
    """Immutable pydantic base with strict field names."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

"""Base model for artpacker value types.

Value types are frozen Pydantic models: validation runs exactly once at
construction, instances are immutable, and equality/hashing compare field
values so instances work as dictionary keys.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ArtPackerBaseModel(BaseModel):
    """Frozen, strict-shaped base for artpacker models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

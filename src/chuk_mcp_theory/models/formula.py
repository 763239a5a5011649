"""
Formula model - a chord or scale shape as semitone offsets from a root.

A major triad is (0, 4, 7); a major scale is (0, 2, 4, 5, 7, 9, 11).
Offsets are cumulative from the root, not stacked, and their order is
meaningful: position i is the formula degree reported by fingerings.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Formula(BaseModel):
    """A named, ordered list of semitone offsets. Element 0 is the root."""

    name: str = Field(..., description="Formula name, e.g. 'major' or 'minor 7'")
    offsets: tuple[int, ...] = Field(..., description="Semitone offsets from the root")

    model_config = {"frozen": True}

    @field_validator("offsets")
    @classmethod
    def validate_offsets(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if not v:
            raise ValueError("Formula needs at least one offset")
        if v[0] != 0:
            raise ValueError(f"Formula must start at the root (0), got {v[0]}")
        negative = [o for o in v if o < 0]
        if negative:
            raise ValueError(f"Formula offsets must be non-negative, got {negative}")
        return v

    def __len__(self) -> int:
        return len(self.offsets)

    def __str__(self) -> str:
        return f"{self.name} {list(self.offsets)}"

"""Data models for course validation."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..course.models import Bridge, BridgeRange


class ValidationError(BaseModel):
    """A single validation error. Reported, never raised."""
    code: str
    message: str
    span_index: Optional[int] = None
    island_index: Optional[int] = None
    cascade_level: int = 0  # 0=FATAL, 1=SHAPE, 2=PLACEMENT, 3=BRIDGE

    def __str__(self) -> str:
        if self.span_index is not None:
            return f"Span {self.span_index}: {self.message}"
        if self.island_index is not None:
            return f"Island {self.island_index}: {self.message}"
        return self.message


class ValidationResult(BaseModel):
    """Result of course/island validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    bridges: List[Bridge] = Field(default_factory=list)
    ranges: List[BridgeRange] = Field(default_factory=list)  # parallel to bridges

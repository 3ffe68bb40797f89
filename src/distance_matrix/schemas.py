"""
Result models.

Pydantic models for what the client hands back to callers. The decoder in
``response.py`` normalizes both JSON and XML payloads to these.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

#: Duration/distance text used for pairs the service could not route.
NOT_AVAILABLE = "N/A"


class DistanceResult(BaseModel):
    """Travel duration and distance for one origin/destination pair."""

    model_config = ConfigDict(frozen=True)

    origin: str = Field(..., description="Origin address as resolved by the service")
    destination: str = Field(..., description="Destination address as resolved by the service")
    duration: str = Field(default=NOT_AVAILABLE, description="Human-readable travel time")
    distance: str = Field(default=NOT_AVAILABLE, description="Human-readable travel distance")

    @property
    def is_available(self) -> bool:
        """False when the service found no route for this pair."""
        return not (self.duration == NOT_AVAILABLE and self.distance == NOT_AVAILABLE)

    def as_string(self) -> str:
        return (
            f"Origin     : {self.origin}\n"
            f"Destination: {self.destination}\n"
            f"Duration   : {self.duration}\n"
            f"Distance   : {self.distance}"
        )

    def __str__(self) -> str:
        return self.as_string()

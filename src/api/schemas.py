"""Pydantic response schemas for the REST API."""

from __future__ import annotations

from pydantic import BaseModel


class DistanceResponse(BaseModel):
    meter: float
    km: str

    @classmethod
    def from_meters(cls, meters: float) -> "DistanceResponse":
        """Build the payload; ``km`` is fixed to two decimals."""
        return cls(meter=meters, km=f"{meters / 1000.0:.2f}")

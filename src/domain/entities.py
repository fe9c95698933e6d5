"""Domain value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A point in decimal degrees.  Ranges are not checked."""

    latitude: float
    longitude: float

"""
Distance endpoint
=================

GET /distance?lat1=..&lon1=..&lat2=..&lon2=.. -- great-circle distance

Success is a JSON body ``{"meter": <float>, "km": "<2 decimals>"}``.
Invalid input yields 400 with a plain-text message naming the first bad
parameter (see ``src.domain.parsing``).  Non-finite input (``nan``, ``inf``)
parses but cannot be encoded as JSON, which yields 500.
"""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request, Response

from src.api.schemas import DistanceResponse
from src.domain.distance import distance_between
from src.domain.errors import ResponseSerializationError
from src.domain.parsing import parse_points

logger = logging.getLogger(__name__)

router = APIRouter(tags=["distance"])


def render_json(payload: DistanceResponse) -> bytes:
    """Encode *payload* strictly; non-finite floats are an error."""
    try:
        return json.dumps(payload.model_dump(), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise ResponseSerializationError(str(exc)) from exc


@router.get(
    "/distance",
    summary="Great-circle distance between two points",
)
async def get_distance(request: Request):
    origin, destination = parse_points(request.query_params)

    meters = distance_between(origin, destination)
    logger.debug("Distance %s -> %s: %.1f m", origin, destination, meters)
    body = render_json(DistanceResponse.from_meters(meters))

    return Response(content=body, status_code=200, media_type="application/json")

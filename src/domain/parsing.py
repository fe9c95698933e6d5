"""
Query-parameter parsing
=======================

Parameters are checked in a fixed order -- ``lat1``, ``lon1``, ``lat2``,
``lon2`` -- and the first one that fails aborts the request.  When several
parameters are bad at once, only the first is reported.

A repeated parameter is read from its first occurrence.
"""

from __future__ import annotations

import math
from typing import Mapping

from .entities import Coordinate
from .errors import InvalidParameterError

# (query name, error message) in validation order
COORDINATE_PARAMS: tuple[tuple[str, str], ...] = (
    ("lat1", "Invalid latitude for point 1"),
    ("lon1", "Invalid longitude for point 1"),
    ("lat2", "Invalid latitude for point 2"),
    ("lon2", "Invalid longitude for point 2"),
)

_NON_FINITE = {"inf", "infinity", "nan"}


def parse_coordinate_param(raw: str) -> float:
    """Parse *raw* as a 64-bit float.

    Stricter than ``float()``: non-ASCII digits, surrounding whitespace,
    ``_`` digit separators and decimal literals that overflow to infinity
    are rejected with ``ValueError``.  Hex floats need a ``p`` exponent
    (``0x1p-2``).  ``nan`` / ``inf`` / ``infinity`` parse (any case; only
    the infinities may carry a sign).
    """
    if not raw or not raw.isascii() or raw != raw.strip() or "_" in raw:
        raise ValueError(f"not a float: {raw!r}")

    lowered = raw.lower()
    unsigned = lowered.lstrip("+-")
    if len(lowered) - len(unsigned) > 1:
        raise ValueError(f"not a float: {raw!r}")

    if unsigned in _NON_FINITE:
        if unsigned == "nan" and unsigned != lowered:
            raise ValueError(f"not a float: {raw!r}")
        return float(lowered)

    if unsigned.startswith("0x"):
        if "p" not in unsigned:
            raise ValueError(f"hex float needs an exponent: {raw!r}")
        try:
            value = float.fromhex(raw)
        except OverflowError:
            raise ValueError(f"out of range: {raw!r}") from None
    else:
        value = float(raw)

    if math.isinf(value):
        raise ValueError(f"out of range: {raw!r}")
    return value


def _first_value(params: Mapping[str, str], name: str) -> str:
    # multi-dicts (starlette QueryParams) expose every occurrence
    getlist = getattr(params, "getlist", None)
    if getlist is not None:
        values = getlist(name)
        return values[0] if values else ""
    return params.get(name, "")


def parse_query(params: Mapping[str, str]) -> tuple[float, float, float, float]:
    """Return ``(lat1, lon1, lat2, lon2)`` or raise ``InvalidParameterError``.

    *params* is a plain mapping or a multi-dict such as starlette's
    ``QueryParams``.  A missing parameter is read as the empty string and
    therefore fails.
    """
    values: list[float] = []
    for name, message in COORDINATE_PARAMS:
        try:
            values.append(parse_coordinate_param(_first_value(params, name)))
        except ValueError:
            raise InvalidParameterError(name, message) from None
    lat1, lon1, lat2, lon2 = values
    return lat1, lon1, lat2, lon2


def parse_points(params: Mapping[str, str]) -> tuple[Coordinate, Coordinate]:
    lat1, lon1, lat2, lon2 = parse_query(params)
    return Coordinate(lat1, lon1), Coordinate(lat2, lon2)

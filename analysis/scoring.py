"""Habitability and terraformability score fallbacks.

Two policies live here and must stay separate:

* ``INGESTION`` runs server side while the CSV is loaded. Missing scores are
  taken from ``ESI`` or drawn uniformly at random, so repeated loads of the
  same row may differ.
* ``DISPLAY`` is a deterministic last-resort estimate from equilibrium
  temperature and radius, used when a caller hands us planet data without
  any score.

Scores are on a [0, 1] scale; :func:`to_percent` converts for rendering.
"""

import math
import random
from enum import Enum
from typing import Any, Dict, Optional

from config.settings import (
    DISPLAY_HABITABILITY_BASELINE,
    DISPLAY_SCORE_BOUNDS,
    DISPLAY_TERRAFORMABILITY_BASELINE,
    HABITABILITY_FALLBACK_RANGE,
    TERRAFORMABILITY_FALLBACK_RANGE,
)

HABITABILITY = "habitability_score"
TERRAFORMABILITY = "terraformability_score"


class FallbackPolicy(Enum):
    INGESTION = "ingestion"
    DISPLAY = "display"


def _number(val: Any) -> Optional[float]:
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        return None
    return float(val) if math.isfinite(val) else None


def _coerce(val: Any) -> Optional[float]:
    # Client payloads may carry numbers as strings
    num = _number(val)
    if num is not None or not isinstance(val, str):
        return num
    try:
        num = float(val.strip())
    except ValueError:
        return None
    return num if math.isfinite(num) else None


def _clamp(score: float) -> float:
    lo, hi = DISPLAY_SCORE_BOUNDS
    return min(max(score, lo), hi)


def ingestion_scores(record: Dict[str, Any], rng: Optional[random.Random] = None) -> Dict[str, Any]:
    rng = rng or random.Random()
    if _number(record.get(HABITABILITY)) is None:
        esi = _number(record.get("ESI"))
        if esi is not None:
            record[HABITABILITY] = esi
        else:
            record[HABITABILITY] = rng.uniform(*HABITABILITY_FALLBACK_RANGE)
    if _number(record.get(TERRAFORMABILITY)) is None:
        record[TERRAFORMABILITY] = rng.uniform(*TERRAFORMABILITY_FALLBACK_RANGE)
    return record


def display_habitability(record: Dict[str, Any]) -> float:
    existing = _coerce(record.get(HABITABILITY))
    if existing is not None:
        return existing
    score = DISPLAY_HABITABILITY_BASELINE
    esi = _coerce(record.get("ESI"))
    temp = _coerce(record.get("pl_eqt"))
    if esi:
        score = esi
    elif temp:
        if 200 < temp < 320:
            score += 0.2
        elif 150 < temp < 380:
            score += 0.1
        else:
            score -= 0.1
    return _clamp(score)


def display_terraformability(record: Dict[str, Any]) -> float:
    existing = _coerce(record.get(TERRAFORMABILITY))
    if existing is not None:
        return existing
    score = DISPLAY_TERRAFORMABILITY_BASELINE
    radius = _coerce(record.get("pl_rade"))
    if radius:
        # Earth-sized planets are the easiest to terraform
        if 0.8 < radius < 1.5:
            score += 0.2
        elif 0.5 < radius < 2:
            score += 0.1
        elif radius > 3:
            score -= 0.2
    return _clamp(score)


def display_scores(record: Dict[str, Any]) -> Dict[str, Any]:
    record[HABITABILITY] = display_habitability(record)
    record[TERRAFORMABILITY] = display_terraformability(record)
    return record


def apply_fallback(record: Dict[str, Any], policy: FallbackPolicy = FallbackPolicy.INGESTION,
                   rng: Optional[random.Random] = None) -> Dict[str, Any]:
    if policy is FallbackPolicy.INGESTION:
        return ingestion_scores(record, rng)
    if policy is FallbackPolicy.DISPLAY:
        return display_scores(record)
    raise ValueError(f"Unknown fallback policy: {policy!r}")


def planet_type(radius: Any) -> str:
    r = _coerce(radius)
    if not r:
        return "Unknown"
    if r < 0.5:
        return "Sub-Earth"
    if r < 1.6:
        return "Earth-like"
    if r < 4:
        return "Super-Earth"
    if r < 10:
        return "Neptune-like"
    return "Gas Giant"


def to_percent(score: Any) -> Optional[float]:
    num = _coerce(score)
    return None if num is None else round(num * 100.0, 1)

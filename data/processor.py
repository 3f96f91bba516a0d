import math
import re
from typing import Any, Dict, Optional, Union

from config.settings import NATURAL_KEY, NULL_MARKERS

Value = Optional[Union[str, int, float]]

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")
_WS_RE = re.compile(r"\s+")


def _as_text(value: Any) -> str:
    # pandas hands back NaN for cells missing at the end of a short row
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return str(value).strip()


def normalize_value(value: Any) -> Value:
    s = _as_text(value)
    if s in NULL_MARKERS:
        return None
    if _NUMBER_RE.fullmatch(s):
        if _INT_RE.fullmatch(s):
            try:
                return int(s)
            except ValueError:
                pass  # longer than the int string-conversion limit
        num = float(s)
        if math.isfinite(num):
            return num
    return s


def planet_slug(name: str) -> str:
    return _WS_RE.sub("-", (name or "").strip()).lower()


def normalize_row(row: Dict[str, Any], with_id: bool = False) -> Dict[str, Value]:
    """Turn one all-string CSV row into a typed record.

    The planet name is never coerced; every other column goes through
    :func:`normalize_value`.
    """
    name = _as_text(row.get(NATURAL_KEY))
    record: Dict[str, Value] = {}
    for key, value in row.items():
        record[key] = name if key == NATURAL_KEY else normalize_value(value)
    record.setdefault(NATURAL_KEY, name)
    if with_id:
        record["id"] = planet_slug(name)
    return record

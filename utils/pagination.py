import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from config.settings import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, LISTING_CAP, MAX_PAGE_SIZE

ASC = "asc"
DESC = "desc"

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Pagination:
    page: int
    pageSize: int
    totalItems: int
    totalPages: int
    hasNextPage: bool
    hasPrevPage: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_int(value: Any, default: int) -> int:
    """Read a leading integer the way query strings are usually read ("2.5" -> 2)."""
    if value is None:
        return default
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    m = _LEADING_INT_RE.match(str(value))
    return int(m.group(1)) if m else default


def validate_page_params(page: int, page_size: int) -> Tuple[int, int]:
    page = page if page > 0 else DEFAULT_PAGE
    page_size = page_size if 0 < page_size <= MAX_PAGE_SIZE else DEFAULT_PAGE_SIZE
    return page, page_size


def paginate(records: Sequence[Dict[str, Any]], page: int = DEFAULT_PAGE,
             page_size: int = DEFAULT_PAGE_SIZE) -> Tuple[List[Dict[str, Any]], Pagination]:
    page, page_size = validate_page_params(page, page_size)
    total_items = len(records)
    total_pages = math.ceil(total_items / page_size)
    start = (page - 1) * page_size
    end = min(start + page_size, total_items)
    items = list(records[start:end]) if start < total_items else []
    meta = Pagination(
        page=page,
        pageSize=page_size,
        totalItems=total_items,
        totalPages=total_pages,
        hasNextPage=page < total_pages,
        hasPrevPage=page > 1,
    )
    return items, meta


def search_records(records: Sequence[Dict[str, Any]], query: Optional[str]) -> List[Dict[str, Any]]:
    q = (query or "").strip().lower()
    if not q:
        return list(records)
    return [r for r in records if q in str(r.get("pl_name") or "").lower()]


def _is_null(val: Any) -> bool:
    return val is None or (isinstance(val, float) and math.isnan(val))


def _sort_key(val: Any):
    # Numbers before strings so mixed columns still compare
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        return (0, val, "")
    return (1, 0, str(val))


def sort_records(records: Sequence[Dict[str, Any]], field: Optional[str],
                 order: str = DESC) -> List[Dict[str, Any]]:
    """Sort on a single field; records without a value always go last."""
    if not field:
        return list(records)
    present = [r for r in records if not _is_null(r.get(field))]
    missing = [r for r in records if _is_null(r.get(field))]
    present.sort(key=lambda r: _sort_key(r.get(field)), reverse=(order == DESC))
    return present + missing


@dataclass
class SortState:
    field: Optional[str] = None
    order: str = DESC

    def toggle(self, field: str) -> "SortState":
        if field == self.field:
            self.order = ASC if self.order == DESC else DESC
        else:
            self.field = field
            self.order = DESC
        return self


def normalize_order(order: Optional[str]) -> str:
    return ASC if (order or "").strip().lower() == ASC else DESC


def has_essential_data(record: Dict[str, Any]) -> bool:
    def numeric(v):
        return isinstance(v, (int, float)) and not isinstance(v, bool) and not _is_null(v)

    return bool(record.get("pl_name")) and (numeric(record.get("pl_rade")) or numeric(record.get("pl_bmasse")))


def listing_view(records: Sequence[Dict[str, Any]], query: Optional[str] = None,
                 sort_by: Optional[str] = None, sort_order: str = DESC,
                 cap: int = LISTING_CAP) -> List[Dict[str, Any]]:
    """Dashboard listing: drop rows without measurements, cap, then search and sort."""
    usable = [r for r in records if has_essential_data(r)][:cap]
    return sort_records(search_records(usable, query), sort_by, sort_order)

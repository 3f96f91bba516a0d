import random
from typing import Any, Dict, Iterable, Optional
from urllib.parse import unquote

from data.loader import load_exoplanets
from data.processor import planet_slug
from utils.errors import NotFoundError, ValidationError


def _wanted(name: Optional[str], decode: bool) -> str:
    name = name or ""
    return (unquote(name) if decode else name).strip().lower()


def find_planet(records: Iterable[Dict[str, Any]], name: str, decode: bool = True) -> Dict[str, Any]:
    """
    Resolve a planet by name or by its hyphenated slug, ignoring case.
    First match in file order wins.

    Pass ``decode=False`` when the name was already percent-decoded, as
    Flask does for URL path segments.
    """
    wanted = _wanted(name, decode)
    if not wanted:
        raise ValidationError("Planet name is required")
    for record in records:
        pl_name = str(record.get("pl_name") or "")
        if pl_name.lower() == wanted or planet_slug(pl_name) == wanted:
            return record
    raise NotFoundError("Exoplanet not found")


def lookup_planet(name: str, path: Optional[str] = None, rng: Optional[random.Random] = None,
                  decode: bool = True) -> Dict[str, Any]:
    if not _wanted(name, decode):
        raise ValidationError("Planet name is required")
    return find_planet(load_exoplanets(path, rng=rng), name, decode=decode)

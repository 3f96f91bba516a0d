import csv
import logging
import os
import random
from typing import Any, Dict, Iterator, List, Optional

import pandas as pd

from analysis.scoring import ingestion_scores
from config.settings import CSV_CHUNK_SIZE, DATA_CSV
from data.processor import normalize_row
from utils.errors import NotFoundError, ProcessingError

logger = logging.getLogger(__name__)

_PARSE_ERRORS = (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, csv.Error)


def iter_raw_rows(path: str, chunksize: int = CSV_CHUNK_SIZE) -> Iterator[Dict[str, Any]]:
    """Stream the CSV as all-string rows in file order."""
    reader = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        chunksize=chunksize,
    )
    with reader:
        for chunk in reader:
            # pandas promotes the first column to an index when rows carry one field more than the header
            if not isinstance(chunk.index, pd.RangeIndex):
                raise pd.errors.ParserError(
                    f"Data rows have more fields than the header ({len(chunk.columns)} columns)"
                )
            for row in chunk.to_dict(orient="records"):
                yield row


def load_exoplanets(path: Optional[str] = None, rng: Optional[random.Random] = None,
                    with_ids: bool = False) -> List[Dict[str, Any]]:
    path = path or DATA_CSV
    if not os.path.exists(path):
        logger.warning("Exoplanet CSV missing at %s", path)
        raise NotFoundError("CSV file not found")
    rng = rng or random.Random()
    records: List[Dict[str, Any]] = []
    try:
        for row in iter_raw_rows(path):
            records.append(ingestion_scores(normalize_row(row, with_id=with_ids), rng))
    except _PARSE_ERRORS as e:
        logger.error("Failed to parse %s after %d rows: %s", path, len(records), e)
        raise ProcessingError("Failed to process CSV file", details=str(e)) from e
    logger.debug("Loaded %d exoplanets from %s", len(records), path)
    return records

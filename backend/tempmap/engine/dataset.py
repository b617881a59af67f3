"""
Temperature dataset loader.

Reads the pre-aggregated CSV tables: one row per zipcode, one column per key.

- nyc_extracted_temps.csv: readings on the 3-hour UTC grid (X%Y.%m.%d.%H.%M.%S)
- nyc_daily_{min,max,avg}.csv: daily aggregates per NY-local date (X%Y.%m.%d)

Only the readings table is required. Values are °C; blank or NA cells load
as NaN.
"""

import csv
import logging
import os
from datetime import datetime
from functools import lru_cache
from typing import Optional

import numpy as np

from tempmap.config import (
    DATA_DIR,
    EXTRACTED_TEMPS_FILE,
    DAILY_MIN_FILE,
    DAILY_MAX_FILE,
    DAILY_AVG_FILE,
    ZONE_COLUMN,
)
from tempmap.engine.lookup_key import parse_utc_key

logger = logging.getLogger(__name__)


class ZoneTable:
    """A zipcode x key table of float values."""

    def __init__(self, zipcodes: list[str], columns: dict[str, np.ndarray]):
        self.zipcodes = zipcodes
        self.columns = columns
        self._row = {z: i for i, z in enumerate(zipcodes)}

    def __contains__(self, key: str) -> bool:
        return key in self.columns

    def __len__(self) -> int:
        return len(self.zipcodes)

    def value(self, zipcode: str, key: str) -> Optional[float]:
        """Value for a zipcode/key pair, None when absent or missing."""
        column = self.columns.get(key)
        row = self._row.get(zipcode)
        if column is None or row is None:
            return None
        v = column[row]
        return None if np.isnan(v) else float(v)

    @classmethod
    def empty(cls) -> "ZoneTable":
        return cls([], {})


class TemperatureDataset:
    """Readings table plus the optional daily aggregate tables."""

    def __init__(
        self,
        readings: ZoneTable,
        daily_min: ZoneTable,
        daily_max: ZoneTable,
        daily_avg: ZoneTable,
    ):
        if not readings.columns:
            raise ValueError("Readings table has no key columns.")
        self.readings = readings
        self.daily_min = daily_min
        self.daily_max = daily_max
        self.daily_avg = daily_avg
        self.latest_utc: datetime = max(parse_utc_key(k) for k in readings.columns)

    @property
    def zipcodes(self) -> list[str]:
        return self.readings.zipcodes

    def has_daily(self, local_date_key: str) -> bool:
        # The min table decides whether daily aggregates exist for a date
        return local_date_key in self.daily_min


def _parse_cell(cell: str) -> float:
    cell = cell.strip()
    if not cell or cell.upper() in ("NA", "NAN"):
        return np.nan
    return float(cell)


def parse_zone_table(file_content: str, source: str = "<string>") -> ZoneTable:
    """
    Parse a zipcode-indexed CSV table.

    Args:
        file_content: Raw CSV text with a header row
        source: Name used in log and error messages

    Returns:
        ZoneTable with one float array per non-zipcode column
    """
    reader = csv.reader(file_content.splitlines())
    try:
        headers = [h.strip() for h in next(reader)]
    except StopIteration:
        raise ValueError(f"{source}: empty table.")

    if ZONE_COLUMN not in headers:
        raise ValueError(f"{source}: no {ZONE_COLUMN!r} column. Headers: {headers[:5]}")
    zone_idx = headers.index(ZONE_COLUMN)
    key_cols = [(i, h) for i, h in enumerate(headers) if i != zone_idx and h]

    zipcodes: list[str] = []
    values: list[list[float]] = []
    for line_no, row in enumerate(reader, start=2):
        if not row or not any(c.strip() for c in row):
            continue
        zipcodes.append(row[zone_idx].strip())
        parsed = []
        for i, header in key_cols:
            try:
                parsed.append(_parse_cell(row[i]) if i < len(row) else np.nan)
            except ValueError:
                logger.debug(
                    "%s line %d: non-numeric value %r in %s",
                    source, line_no, row[i], header,
                )
                parsed.append(np.nan)
        values.append(parsed)

    matrix = np.array(values, dtype=float).reshape(len(zipcodes), len(key_cols))
    columns = {header: matrix[:, j] for j, (_, header) in enumerate(key_cols)}
    return ZoneTable(zipcodes, columns)


def _read_table(path: str, required: bool) -> ZoneTable:
    if not os.path.exists(path):
        if required:
            raise FileNotFoundError(f"Temperature table not found: {path}")
        logger.warning("Optional table %s not found; daily aggregates unavailable", path)
        return ZoneTable.empty()
    with open(path, "r", newline="") as f:
        return parse_zone_table(f.read(), source=os.path.basename(path))


@lru_cache(maxsize=4)
def load_dataset(data_dir: str = DATA_DIR) -> TemperatureDataset:
    """Load and cache all tables found in `data_dir`."""
    dataset = TemperatureDataset(
        readings=_read_table(os.path.join(data_dir, EXTRACTED_TEMPS_FILE), required=True),
        daily_min=_read_table(os.path.join(data_dir, DAILY_MIN_FILE), required=False),
        daily_max=_read_table(os.path.join(data_dir, DAILY_MAX_FILE), required=False),
        daily_avg=_read_table(os.path.join(data_dir, DAILY_AVG_FILE), required=False),
    )
    logger.info(
        "Loaded %d zones, %d readings columns (latest %s) from %s",
        len(dataset.readings),
        len(dataset.readings.columns),
        dataset.latest_utc.isoformat(),
        data_dir,
    )
    return dataset


def get_dataset() -> TemperatureDataset:
    """FastAPI dependency for the configured dataset."""
    return load_dataset(DATA_DIR)

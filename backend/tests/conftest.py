"""
Shared fixtures: a small on-disk dataset covering calendar year 2020.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from tempmap.main import app
from tempmap.engine.dataset import get_dataset, load_dataset

ZIPCODES = ["10001", "11201", "10314"]
DAILY_DATES = ["X2020.07.04", "X2020.11.01"]
# Cell left as NA in the readings table (zipcode, key)
MISSING_READING = ("10314", "X2020.11.01.06.00.00")


def reading_value(zone_idx: int, instant: datetime) -> float:
    """Deterministic °C reading used to fill the fixture table."""
    steps = int((instant - datetime(2020, 1, 1, tzinfo=timezone.utc)).total_seconds() // 10800)
    return round(5.0 + zone_idx + steps / 1000.0, 3)


def _readings_csv() -> str:
    start = datetime(2020, 1, 1, tzinfo=timezone.utc)
    instants = [start + timedelta(hours=3 * i) for i in range(366 * 8)]
    keys = [t.strftime("X%Y.%m.%d.%H.%M.%S") for t in instants]
    lines = [",".join(["zipcode"] + keys)]
    for idx, zipcode in enumerate(ZIPCODES):
        cells = []
        for key, instant in zip(keys, instants):
            if (zipcode, key) == MISSING_READING:
                cells.append("NA")
            else:
                cells.append(f"{reading_value(idx, instant):.3f}")
        lines.append(",".join([zipcode] + cells))
    return "\n".join(lines) + "\n"


def _daily_csv(offset: float) -> str:
    lines = [",".join(["zipcode"] + DAILY_DATES)]
    for idx, zipcode in enumerate(ZIPCODES):
        lines.append(",".join([zipcode] + [f"{10.0 + idx + offset:.2f}"] * len(DAILY_DATES)))
    return "\n".join(lines) + "\n"


@pytest.fixture
def expected_reading():
    """The °C value the fixture table holds for a zone index and UTC instant."""
    return reading_value


@pytest.fixture(scope="session")
def data_dir(tmp_path_factory):
    path = tmp_path_factory.mktemp("data")
    (path / "nyc_extracted_temps.csv").write_text(_readings_csv())
    (path / "nyc_daily_min.csv").write_text(_daily_csv(-3.0))
    (path / "nyc_daily_max.csv").write_text(_daily_csv(4.0))
    (path / "nyc_daily_avg.csv").write_text(_daily_csv(0.5))
    return path


@pytest.fixture(scope="session")
def dataset(data_dir):
    return load_dataset(str(data_dir))


@pytest.fixture
def client(dataset):
    app.dependency_overrides[get_dataset] = lambda: dataset
    yield TestClient(app)
    app.dependency_overrides.clear()

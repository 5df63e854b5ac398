"""Shared fixtures: tiny yearly accident files written to a temp directory."""

from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import pytest


# 2013: STATE 1 has one latitude sentinel and one longitude sentinel.
RECORDS_2013 = pd.DataFrame({
    "STATE":    [1, 1, 1, 6, 6, 1],
    "ST_CASE":  [10001, 10002, 10003, 60001, 60002, 10004],
    "MONTH":    [1, 1, 2, 2, 12, 3],
    "YEAR":     [2013] * 6,
    "LATITUDE": [32.5, 33.1, 99.9999, 36.0, 37.2, 31.9],
    "LONGITUD": [-86.5, -87.0, -86.9, -119.0, 999.9999, 999.9999],
    "FATALS":   [1, 2, 1, 1, 3, 1],
})

# 2014: STATE 2 has no usable coordinates at all.
RECORDS_2014 = pd.DataFrame({
    "STATE":    [1, 6, 6, 2],
    "ST_CASE":  [10001, 60001, 60002, 20001],
    "MONTH":    [1, 5, 5, 7],
    "YEAR":     [2014] * 4,
    "LATITUDE": [34.0, 35.0, 36.0, 99.9999],
    "LONGITUD": [-85.0, -120.0, -121.0, 999.9999],
    "FATALS":   [1, 1, 2, 1],
})

# 2016: readable file without a MONTH column.
RECORDS_2016 = pd.DataFrame({
    "STATE":    [1, 6],
    "LATITUDE": [32.0, 36.0],
    "LONGITUD": [-86.0, -119.0],
})


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding accident_2013/2014/2016 as bz2-compressed CSVs."""
    for year, df in ((2013, RECORDS_2013), (2014, RECORDS_2014), (2016, RECORDS_2016)):
        df.to_csv(tmp_path / f"accident_{year}.csv.bz2", index=False)
    return tmp_path


class RecordingRenderer:
    """Stand-in renderer that records the calls made by map_state."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def render_base_map(self, region_name, lat_range, lon_range) -> None:
        self.calls.append(("render_base_map", region_name, lat_range, lon_range))

    def overlay_points(self, points, marker_style: Dict[str, Any]) -> None:
        self.calls.append(("overlay_points", list(points), marker_style))


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()

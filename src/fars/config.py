"""
Configuration constants for the FARS accident pipeline.
"""

from pathlib import Path
from typing import Any, Dict, List

# ======================================================
#  STORAGE
# ======================================================
# Yearly files ship alongside the package; callers may point any
# operation at another directory through its ``data_dir`` argument.
DATA_DIR: Path = Path(__file__).resolve().parent / "extdata"

FILENAME_TEMPLATE: str = "accident_{year:d}.csv.bz2"
FILENAME_PATTERN: str = r"^accident_(\d+)\.csv\.bz2$"

# ======================================================
#  SCHEMA
# ======================================================
REQUIRED_SUMMARY_COLUMNS: List[str] = ["MONTH"]
REQUIRED_MAP_COLUMNS: List[str] = ["STATE", "LATITUDE", "LONGITUD"]

# Values above these thresholds mean "not recorded" in the source data
LONGITUDE_SENTINEL: float = 900
LATITUDE_SENTINEL: float = 90

# ======================================================
#  MAP DEFAULTS
# ======================================================
BASE_MAP: str = "state"

MARKER_STYLE: Dict[str, Any] = {
    "size": 3,
    "color": "black",
    "symbol": "circle",
    "opacity": 0.7,
}

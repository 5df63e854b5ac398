"""
FARS Record Loader (Imperative Shell)

Resolves yearly filenames against the data directory and parses them into
DataFrames.  Every call reads the file again; nothing is cached.

Package Location: src/fars/data/loader.py
"""

import logging
import warnings
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from .. import config
from ..analysis.filenames import year_from_filename

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def resolve_data_dir(data_dir: Optional[PathLike] = None) -> Path:
    """
    Return the directory yearly files are read from.

    Args:
        data_dir: Explicit directory.  ``None`` uses the package-relative
            ``extdata/`` directory (``fars.config.DATA_DIR``).
    """
    if data_dir is None:
        return Path(config.DATA_DIR)
    return Path(data_dir)


def load_year_table(
    filename: str,
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Read one yearly accident file into a DataFrame.

    The file is comma-separated with a header row; compression is inferred
    from the extension (``.bz2`` for canonical names).  Informational parser
    warnings such as mixed-dtype notices are suppressed; parse errors are not.

    Args:
        filename: Name of the file inside the data directory, normally from
            ``build_filename``.
        data_dir: Optional override of the data directory.

    Returns:
        DataFrame with every column of the source file.

    Raises:
        FileNotFoundError: If the resolved path does not exist.
    """
    path = resolve_data_dir(data_dir) / filename
    if not path.exists():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", category=pd.errors.DtypeWarning)
        warnings.simplefilter("ignore", category=pd.errors.ParserWarning)
        df = pd.read_csv(path, compression="infer")

    logger.debug(
        f"Loaded {len(df)} records from {path}",
        extra={"file": filename, "rows": len(df)},
    )
    return df


def available_years(data_dir: Optional[PathLike] = None) -> List[int]:
    """
    List the years that have a canonical data file.

    Args:
        data_dir: Optional override of the data directory.

    Returns:
        Sorted list of integer years.  Empty if the directory is missing.
    """
    directory = resolve_data_dir(data_dir)
    if not directory.is_dir():
        logger.warning(
            f"Data directory not found: {directory}",
            extra={"data_dir": str(directory)},
        )
        return []

    years = []
    for path in directory.iterdir():
        year = year_from_filename(path.name)
        if year is not None and path.is_file():
            years.append(year)
    return sorted(years)

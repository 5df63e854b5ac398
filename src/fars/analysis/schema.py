"""
Column checks shared by the Functional Core.

Package Location: src/fars/analysis/schema.py
"""

from typing import Iterable

import pandas as pd


def validate_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"accident table is missing required columns: {missing}")

import math

import pandas as pd
import pytest

from fars.analysis.geo import (
    UnknownStateError,
    coordinate_extent,
    empty_point_set,
    point_pairs,
    select_state,
    to_point_set,
)


@pytest.fixture
def table():
    return pd.DataFrame({
        "STATE":    [1, 1, 6, 1],
        "MONTH":    [1, 2, 3, 4],
        "LATITUDE": [32.0, 99.9999, 36.0, 30.5],
        "LONGITUD": [-86.0, -87.5, -119.0, 999.9999],
    })


def test_select_state_keeps_matching_rows(table):
    subset = select_state(table, 1)

    assert subset["STATE"].tolist() == [1, 1, 1]
    assert subset.columns.tolist() == table.columns.tolist()


def test_select_state_unknown_code(table):
    with pytest.raises(UnknownStateError, match="invalid STATE number: 999"):
        select_state(table, 999)


def test_select_state_requires_columns():
    with pytest.raises(ValueError, match="LONGITUD"):
        select_state(pd.DataFrame({"STATE": [1], "LATITUDE": [1.0]}), 1)


def test_to_point_set_nulls_sentinels_without_dropping_rows(table):
    points = to_point_set(select_state(table, 1))

    assert points.columns.tolist() == ["LONGITUD", "LATITUDE"]
    assert len(points) == 3
    assert points["LONGITUD"].tolist()[:2] == [-86.0, -87.5]
    assert math.isnan(points.loc[1, "LATITUDE"])
    assert math.isnan(points.loc[2, "LONGITUD"])
    assert points.loc[2, "LATITUDE"] == 30.5


def test_to_point_set_keeps_boundary_values():
    df = pd.DataFrame({"LONGITUD": [900.0], "LATITUDE": [90.0]})

    points = to_point_set(df)

    assert points.iloc[0].tolist() == [900.0, 90.0]


def test_coordinate_extent_ignores_missing(table):
    lat_range, lon_range = coordinate_extent(to_point_set(select_state(table, 1)))

    assert lat_range == (30.5, 32.0)
    assert lon_range == (-87.5, -86.0)


def test_coordinate_extent_all_missing():
    points = to_point_set(pd.DataFrame({"LONGITUD": [999.9], "LATITUDE": [99.9]}))

    assert coordinate_extent(points) == (None, None)


def test_point_pairs_use_none_for_missing(table):
    pairs = point_pairs(to_point_set(select_state(table, 1)))

    assert pairs == [(-86.0, 32.0), (-87.5, None), (None, 30.5)]


def test_empty_point_set_schema():
    points = empty_point_set()

    assert points.empty
    assert points.columns.tolist() == ["LONGITUD", "LATITUDE"]
    assert point_pairs(points) == []

import numpy as np
import pytest

from fars.analysis.coercion import (
    InvalidStateError,
    InvalidYearError,
    coerce_state,
    coerce_year,
)
from fars.analysis.filenames import build_filename, year_from_filename


@pytest.mark.parametrize("year", [2013, "2013", 2013.9, " 2013 ", "2013.9", np.int64(2013)])
def test_build_filename_normalizes_year(year):
    assert build_filename(year) == "accident_2013.csv.bz2"


@pytest.mark.parametrize("year", ["abc", "", None, True, float("nan"), float("inf"), [2013]])
def test_build_filename_rejects_non_integer_year(year):
    with pytest.raises(InvalidYearError):
        build_filename(year)


def test_invalid_year_message_names_input():
    with pytest.raises(InvalidYearError, match="abc"):
        coerce_year("abc")


def test_invalid_year_is_value_error():
    assert issubclass(InvalidYearError, ValueError)


def test_coerce_state_accepts_text_and_numbers():
    assert coerce_state("1") == 1
    assert coerce_state(1) == 1
    assert coerce_state(6.0) == 6


def test_coerce_state_rejects_garbage():
    with pytest.raises(InvalidStateError, match="Alabama"):
        coerce_state("Alabama")


def test_year_from_filename():
    assert year_from_filename("accident_2015.csv.bz2") == 2015
    assert year_from_filename("accident_2015.csv") is None
    assert year_from_filename("notes.txt") is None

"""Tests for raw tag value helpers."""

from flacfolders.features.metadata.usecases.extraction import leading_year, strip_track_total
from flacfolders.features.metadata.usecases.extraction._tag_utils import safe_get_first


def test_leading_year_takes_first_four_digits() -> None:
    assert leading_year("1979-11-30") == "1979"
    assert leading_year(" 2001 ") == "2001"


def test_leading_year_rejects_short_or_non_numeric_values() -> None:
    assert leading_year("197") is None
    assert leading_year("circa 1979") is None
    assert leading_year("") is None
    assert leading_year(None) is None


def test_strip_track_total() -> None:
    assert strip_track_total("5/12") == "5"
    assert strip_track_total("07") == "07"
    assert strip_track_total("/12") is None
    assert strip_track_total(None) is None


def test_safe_get_first() -> None:
    assert safe_get_first(["a", "b"]) == "a"
    assert safe_get_first([]) is None
    assert safe_get_first(None, "fallback") == "fallback"

"""
Summary: Public surface for embedded tag extraction.
Why: Provide a stable import path for the pipeline, placement validation and tests.
"""

from ._tag_utils import leading_year, strip_track_total
from .flac_reader import FlacTagReader
from .tag_metadata import metadata_from_tags

__all__ = [
    "FlacTagReader",
    "leading_year",
    "metadata_from_tags",
    "strip_track_total",
]

"""Scrape and parse the daily court docket."""

from .accumulator import DocketAccumulator  # noqa: F401
from .core import DocketScraper  # noqa: F401
from .extract import RowKind, classify_row, extract_docket  # noqa: F401
from .schema import Charge, Docket  # noqa: F401

__all__ = [
    "Charge",
    "Docket",
    "DocketAccumulator",
    "DocketScraper",
    "RowKind",
    "classify_row",
    "extract_docket",
]

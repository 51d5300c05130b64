"""Init module for nl_court_docket."""

from .docket import Charge, Docket, DocketScraper  # noqa: F401
from .output import OutputFormat, render  # noqa: F401

__version__ = "0.1.0"

__all__ = ["Charge", "Docket", "DocketScraper", "OutputFormat", "render"]

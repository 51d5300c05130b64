"""Exceptions raised while fetching, parsing, and rendering dockets."""

from typing import Optional


class DocketError(Exception):
    """Base class for all docket errors."""


class FetchError(DocketError):
    """
    The docket page could not be retrieved.

    Parameters
    ----------
    message: str
        The error message
    status_code: int, optional
        The HTTP status code, if a response was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(DocketError):
    """The response body could not be parsed as an HTML document."""


class MalformedDocumentError(DocketError):
    """A case or charge row appeared before any time slot row."""


class MalformedChargeError(DocketError, ValueError):
    """Charge text is missing the "] " delimiter after its statute prefix."""


class RenderError(DocketError):
    """The docket could not be serialized to the requested format."""


class UnknownFormatError(DocketError, ValueError):
    """The requested output format is not supported."""

"""Scrape the daily court docket of the Provincial Court of Newfoundland and Labrador."""

import datetime
from dataclasses import dataclass, field
from typing import Optional, Union

import requests
from loguru import logger

from ..exceptions import FetchError
from .accumulator import DocketAccumulator
from .extract import extract_docket
from .schema import Docket

DOCKET_URL = "https://docket.court.nl.ca/"
DATE_FORMAT = "%Y-%m-%d"


def today() -> str:
    """Return the current date in YYYY-MM-DD format."""
    return datetime.date.today().strftime(DATE_FORMAT)


@dataclass
class DocketScraper:
    """
    Scrape the court docket for an office on a given date.

    Call the class to fetch and parse the docket. The class will return
    a Docket object.

    Parameters
    ----------
    office: str
        The office identifier
    date: str, optional
        The docket date in YYYY-MM-DD format; defaults to today
    url: str, optional
        The docket page URL
    errors: str, optional
        How to handle malformed charge rows, either 'raise' or 'ignore'
    timeout: float, optional
        The request timeout in seconds; no timeout by default
    session: requests.Session, optional
        The HTTP session used to make the request

    Example
    -------
    >>> from nl_court_docket import DocketScraper
    >>> scraper = DocketScraper(office="1")
    >>> docket = scraper()
    >>> print(docket.render("text"))
    """

    office: str
    date: str = field(default_factory=today)
    url: str = DOCKET_URL
    errors: str = "raise"
    timeout: Optional[float] = None
    session: requests.Session = field(
        default_factory=requests.Session, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate the input parameters."""
        datetime.datetime.strptime(self.date, DATE_FORMAT)
        if self.errors not in ["raise", "ignore"]:
            raise ValueError("errors should be either 'raise' or 'ignore'")

    @property
    def params(self) -> dict:
        """The query parameters of the docket request."""
        return {
            "date": self.date,
            "days_to_display": "1",
            "office[]": self.office,
        }

    def fetch(self) -> str:
        """
        Fetch the HTML of the docket page.

        Raises
        ------
        FetchError
            If the request fails or does not return a 200 status
        """
        logger.info(
            f"Fetching docket for office '{self.office}' on {self.date}"
        )
        try:
            r = self.session.get(
                self.url, params=self.params, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise FetchError(f"Request to '{self.url}' failed: {str(e)}") from e

        if r.status_code != 200:
            raise FetchError(
                f"expected 200 status, got {r.status_code} status",
                status_code=r.status_code,
            )

        return r.text

    def parse(self, html: Union[str, bytes]) -> Docket:
        """Extract the docket from the HTML of the docket page."""
        accumulator = DocketAccumulator(date=self.date, office=self.office)
        return extract_docket(html, errors=self.errors, accumulator=accumulator)

    def __call__(self) -> Docket:
        """Run the scraper."""
        return self.parse(self.fetch())

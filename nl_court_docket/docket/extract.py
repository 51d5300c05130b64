"""Extract cases and charges from the docket's HTML table."""

import enum
from typing import Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup
from loguru import logger

from ..exceptions import MalformedChargeError, ParseError
from .accumulator import DocketAccumulator
from .schema import Docket

# Rows of the docket table
ROW_SELECTOR = "table tr"


class RowKind(enum.Enum):
    """The kind of a docket table row."""

    CASE = "case"
    CHARGE = "charge"
    IGNORED = "ignored"


def classify_row(row: Tag) -> RowKind:
    """
    Classify a table row by its number of child cells.

    Note
    ----
    The docket page lists each case as a row of two cells, with the time
    and names in the first, and each charge as a row of three cells. Any
    other row, e.g., a header, is ignored. This relies on the layout of
    the published page and will need updating if that changes.
    """
    num_cells = len(row.find_all(recursive=False))
    if num_cells == 2:
        return RowKind.CASE
    elif num_cells == 3:
        return RowKind.CHARGE
    return RowKind.IGNORED


def parse_case_row(row: Tag) -> Tuple[str, str]:
    """
    Return the time slot and raw case label of a case row.

    The time is held in the span(s) of the first cell, which also
    contains the case label.
    """
    cell = row.find_all(recursive=False)[0]
    time = "".join(span.get_text() for span in cell.find_all("span"))

    # Remove the time to get the names
    case = cell.get_text().replace(time, "", 1).strip(" ")
    return time, case


def parse_charge_row(row: Tag) -> Tuple[str, str]:
    """Return the raw case label and raw charge text of a charge row."""
    cells = row.find_all(recursive=False)
    return cells[0].get_text(), cells[1].get_text()


def to_soup(html: Union[str, bytes, BeautifulSoup]) -> BeautifulSoup:
    """
    Parse raw HTML into a document, passing documents through.

    Raises
    ------
    ParseError
        If the HTML cannot be parsed
    """
    if isinstance(html, BeautifulSoup):
        return html
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"Cannot parse HTML from {type(html).__name__}")

    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise ParseError(f"Unable to parse docket HTML: {str(e)}") from e


def extract_docket(
    html: Union[str, bytes, BeautifulSoup],
    errors: str = "raise",
    accumulator: Optional[DocketAccumulator] = None,
) -> Docket:
    """
    Extract the docket from the HTML of the docket page.

    Parameters
    ----------
    html: str, bytes, BeautifulSoup
        The raw page HTML or an already parsed document
    errors: str, optional
        How to handle charge rows without a statute prefix; 'raise' to
        abort, or 'ignore' to skip the row with a warning
    accumulator: DocketAccumulator, optional
        The accumulator to add rows to; a new one is used by default

    Returns
    -------
    Docket
        The extracted docket

    Raises
    ------
    ParseError
        If the HTML cannot be parsed
    MalformedDocumentError
        If a case or charge row comes before any time slot
    MalformedChargeError
        If a charge is malformed and `errors` is 'raise'
    """
    assert errors in ["raise", "ignore"]

    if accumulator is None:
        accumulator = DocketAccumulator()

    soup = to_soup(html)
    rows = soup.select(ROW_SELECTOR)
    logger.debug(f"Found {len(rows)} table rows")

    skipped = 0
    for i, row in enumerate(rows):
        kind = classify_row(row)

        # This is a case row
        if kind is RowKind.CASE:
            time, case = parse_case_row(row)
            accumulator.add_time(time)
            accumulator.add_case(case)

        # This is a charge row
        elif kind is RowKind.CHARGE:
            case, charge = parse_charge_row(row)
            try:
                accumulator.add_charge(case, charge)
            except MalformedChargeError as e:
                if errors == "raise":
                    raise
                skipped += 1
                logger.warning(f"Skipping charge row {i}: {str(e)}")

    docket = accumulator.docket
    logger.info(
        f"Extracted {docket.num_cases} cases with {docket.num_charges} "
        f"charges across {len(docket)} time slots"
    )
    if skipped:
        logger.warning(f"Skipped {skipped} malformed charge rows")

    return docket

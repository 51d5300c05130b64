"""Build a docket from its rows, in document order."""

from typing import List, Optional

from loguru import logger

from ..exceptions import MalformedChargeError, MalformedDocumentError
from ..utils import clean_text
from .schema import Charge, Docket

# Placeholder used when a charge row has no charge text
EMPTY_CHARGE = "(empty)"

# Co-defendants listed on the same case row
CASE_SEPARATOR = "; "

# Separates the statute prefix from the charge description
CHARGE_DELIMITER = "] "


def parse_charge_description(charge: str) -> str:
    """
    Return the description of a cleaned charge string.

    Parameters
    ----------
    charge: str
        The cleaned charge text, e.g., "[s.123] Theft"

    Returns
    -------
    str
        Everything after the first "] ", or the empty placeholder if
        there is no charge text

    Raises
    ------
    MalformedChargeError
        If the charge text has no "] " delimiter
    """
    if charge == "":
        return EMPTY_CHARGE

    _, sep, description = charge.partition(CHARGE_DELIMITER)
    if not sep:
        raise MalformedChargeError(
            f"Charge text '{charge}' is missing the '{CHARGE_DELIMITER}' delimiter"
        )
    return description


class DocketAccumulator:
    """
    Collect time slots, cases, and charges into a :class:`Docket`.

    Case and charge rows are attributed to the most recently added time
    slot, so :meth:`add_time` must be called first.

    Example
    -------
    >>> acc = DocketAccumulator()
    >>> acc.add_time("10:00 a.m.")
    >>> acc.add_case("John Doe")
    >>> acc.add_charge("John Doe", "[s.1] Assault")
    >>> acc.docket.data["10:00 a.m."]["John Doe"]
    [Charge(description='Assault', count=1)]
    """

    def __init__(self, date: str = "", office: str = ""):
        self.current_time: Optional[str] = None
        self._docket = Docket(date=date, office=office)

    @property
    def docket(self) -> Docket:
        """The docket built so far."""
        return self._docket

    def _current_cases(self, action: str) -> dict:
        """Return the cases for the current time slot."""
        if self.current_time is None:
            raise MalformedDocumentError(
                f"Cannot {action} before any time slot has been seen"
            )
        return self._docket.data[self.current_time]

    def add_time(self, time: str) -> None:
        """Add the time slot, if it does not exist, and make it current."""
        if time not in self._docket.data:
            logger.debug(f"Adding time slot '{time}'")
            self._docket.data[time] = {}
        self.current_time = time

    def add_case(self, case: str) -> List[str]:
        """
        Add a case to the current time slot.

        A case listing several people separated by "; " is added as one
        case per person.

        Returns
        -------
        List[str]
            The cleaned case labels
        """
        cases = self._current_cases("add a case")

        labels = clean_text(case).split(CASE_SEPARATOR)
        for label in labels:
            if label not in cases:
                cases[label] = []
        return labels

    def add_charge(self, case: str, charge: str) -> Charge:
        """
        Add a charge to a case in the current time slot.

        If the case already has a charge with the same description, its
        count is increased instead.

        Returns
        -------
        Charge
            The new or updated charge

        Raises
        ------
        MalformedChargeError
            If the charge text has no "] " delimiter
        """
        cases = self._current_cases("add a charge")

        label = clean_text(case)
        description = parse_charge_description(clean_text(charge))

        charges = cases.setdefault(label, [])
        for existing in charges:
            if existing.description == description:
                existing.increase()
                return existing

        new = Charge(description=description)
        charges.append(new)
        return new

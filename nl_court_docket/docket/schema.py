"""Define the schema for a daily court docket."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

import pandas as pd

from ..utils import DataclassSchema

# Columns of the flattened (one row per charge) docket
COLUMNS = ["time", "case", "charge", "count"]


@dataclass
class Charge(DataclassSchema):
    """
    A Charge object.

    Parameters
    ----------
    description: str
        The charge description, with the statute prefix removed
    count: int, optional
        The number of counts of this charge
    """

    description: str
    count: int = 1

    def increase(self) -> None:
        """Add one count to the charge."""
        self.count += 1

    @property
    def has_multiple(self) -> bool:
        """Whether there is more than one count for the charge."""
        return self.count > 1

    def __repr__(self) -> str:
        """Return a string representation of the object."""
        cls = self.__class__.__name__
        return f"{cls}(description='{self.description}', count={self.count})"


@dataclass
class Docket(DataclassSchema):
    """
    The cases and charges heard by an office on a given date.

    The data is keyed by time slot, then by case label, and holds the
    charges for each case in the order they were first seen.

    Parameters
    ----------
    data: Dict[str, Dict[str, List[Charge]]]
        The time slot -> case -> charges mapping
    date: str, optional
        The docket date, in YYYY-MM-DD format
    office: str, optional
        The office identifier
    """

    data: Dict[str, Dict[str, List[Charge]]] = field(default_factory=dict)
    date: str = ""
    office: str = ""

    @property
    def num_cases(self) -> int:
        """Return the number of cases across all time slots."""
        return sum(len(cases) for cases in self.data.values())

    @property
    def num_charges(self) -> int:
        """Return the number of distinct charges across all cases."""
        return sum(
            len(charges)
            for cases in self.data.values()
            for charges in cases.values()
        )

    def __iter__(self) -> Iterator[str]:
        """Iterate through the time slots."""
        return iter(self.data)

    def __len__(self) -> int:
        """Return the number of time slots."""
        return len(self.data)

    def __repr__(self) -> str:
        """Return a string representation of the object."""
        cls = self.__class__.__name__
        s = f"date='{self.date}', office='{self.office}', "
        s += f"num_times={len(self)}, num_cases={self.num_cases}"
        return f"{cls}({s})"

    def to_pandas(self) -> pd.DataFrame:
        """
        Return a dataframe representation of the data.

        Each row is a single charge; cases without any charges are not
        included.
        """
        rows = [
            [time, case, charge.description, charge.count]
            for time, cases in self.data.items()
            for case, charges in cases.items()
            for charge in charges
        ]
        return pd.DataFrame(rows, columns=COLUMNS)

    def render(self, fmt: str = "json", pretty: bool = False) -> str:
        """
        Render the docket in the specified output format.

        Parameters
        ----------
        fmt: str
            One of 'json', 'text', or 'csv'
        pretty: bool
            Whether to indent JSON output

        Returns
        -------
        str
            The formatted docket
        """
        from ..output import render

        return render(self, fmt, pretty=pretty)

"""Render a docket as JSON, plain text, or CSV."""

import abc
import enum
import json
from dataclasses import dataclass
from typing import List, Union

from .docket.schema import Docket
from .exceptions import RenderError, UnknownFormatError


class OutputFormat(enum.Enum):
    """The supported output formats."""

    JSON = "json"
    TEXT = "text"
    CSV = "csv"

    @classmethod
    def parse(cls, value: Union[str, "OutputFormat"]) -> "OutputFormat":
        """
        Return the output format for the input value.

        Raises
        ------
        UnknownFormatError
            If the value is not a supported format
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(f"'{f.value}'" for f in cls)
            raise UnknownFormatError(
                f"Unknown output format '{value}', should be one of {allowed}"
            ) from None


class Renderer(abc.ABC):
    """Base class to format a docket."""

    @abc.abstractmethod
    def format(self, docket: Docket) -> str:
        """Format the docket."""
        pass


@dataclass
class JsonRenderer(Renderer):
    """
    Format the docket as JSON.

    Parameters
    ----------
    pretty: bool, optional
        Whether to indent the output
    """

    pretty: bool = False

    def format(self, docket: Docket) -> str:
        """Return the time slot -> case -> charges mapping as JSON."""
        try:
            data = docket.to_dict()["data"]
            if self.pretty:
                return json.dumps(data, indent=4, ensure_ascii=False)
            return json.dumps(data, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise RenderError(f"Unable to serialize docket: {str(e)}") from e


class TextRenderer(Renderer):
    """
    Format the docket as plain text.

    Example
    -------
    >> 10:00 a.m.
    John Doe
    --------
    * Assault (2 counts)
    * Theft

    """

    def format(self, docket: Docket) -> str:
        """Return a readable listing of the docket."""
        lines: List[str] = []
        for time, cases in docket.data.items():
            lines.append(f">> {time}\n")
            for case, charges in cases.items():
                lines.append(f"{case}\n{'-' * len(case)}\n")
                for charge in charges:
                    if charge.has_multiple:
                        lines.append(
                            f"* {charge.description} ({charge.count} counts)\n"
                        )
                    else:
                        lines.append(f"* {charge.description}\n")
                lines.append("\n")
        return "".join(lines)


class CsvRenderer(Renderer):
    """Format the docket as CSV rows of time, case, charge, count."""

    def format(self, docket: Docket) -> str:
        """Return one CSV row per charge, without a header."""
        df = docket.to_pandas()
        if df.empty:
            return ""
        try:
            return df.to_csv(index=False, header=False, lineterminator="\n")
        except (TypeError, ValueError) as e:
            raise RenderError(f"Unable to write docket CSV: {str(e)}") from e


def get_renderer(
    fmt: Union[str, OutputFormat], pretty: bool = False
) -> Renderer:
    """
    Return the renderer for the output format.

    Parameters
    ----------
    fmt: str, OutputFormat
        The output format; one of 'json', 'text', or 'csv'
    pretty: bool, optional
        Whether to indent JSON output

    Returns
    -------
    Renderer
        The renderer instance

    Raises
    ------
    UnknownFormatError
        If the format is not supported
    """
    fmt = OutputFormat.parse(fmt)
    if fmt is OutputFormat.JSON:
        return JsonRenderer(pretty=pretty)
    elif fmt is OutputFormat.TEXT:
        return TextRenderer()
    return CsvRenderer()


def render(
    docket: Docket, fmt: Union[str, OutputFormat] = "json", pretty: bool = False
) -> str:
    """Render the docket in the specified output format."""
    return get_renderer(fmt, pretty=pretty).format(docket)

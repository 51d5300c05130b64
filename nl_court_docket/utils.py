"""Utility functions and classes."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import desert

# Characters left behind by the docket markup
NBSP = "\u00a0"
DOUBLE_SPACE = "  "


def clean_text(s: str) -> str:
    """
    Clean a text fragment extracted from the docket HTML.

    Note
    ----
    Only the first non-breaking space and the first run of two spaces
    are replaced, so calling this twice can change the result again.

    Parameters
    ----------
    s: str
        The raw text

    Returns
    -------
    str
        The text with one trailing newline removed, the first
        non-breaking space dropped, and the first double space collapsed
    """
    if s.endswith("\n"):
        s = s[:-1]
    s = s.replace(NBSP, "", 1)
    return s.replace(DOUBLE_SPACE, " ", 1)


# Create a generic variable that can be 'Parent', or any subclass.
T = TypeVar("T", bound="DataclassSchema")


class DataclassSchema:
    """Base class to handled serializing and deserializing dataclasses."""

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Initialize from a data dictionary."""
        schema = desert.schema(cls)
        return schema.load(data)

    @classmethod
    def from_json(cls: Type[T], path_or_json: Union[str, Path]) -> T:
        """
        Initialize from either a file path or a valid JSON string.

        Strings starting with "{" are treated as JSON, anything else as
        the path of a JSON file.
        """
        if isinstance(path_or_json, str) and path_or_json.lstrip().startswith(
            "{"
        ):
            d = json.loads(path_or_json)
        else:
            with Path(path_or_json).open("r") as fp:
                d = json.load(fp)

        return cls.from_dict(d)

    def to_dict(self) -> Dict[str, Any]:
        """Return a data dictionary representation of the data."""
        schema = desert.schema(self.__class__)
        return schema.dump(self)

    def to_json(
        self, path: Optional[Union[str, Path]] = None
    ) -> Optional[str]:
        """
        Serialize the object to JSON.

        This will return either a valid JSON string or save the
        JSON string to the input file path.

        Parameters
        ----------
        path: Optional[Union[str, Path]]
            The (optional) file path to save the JSON encoding to

        Returns
        -------
        Optional[str]:
            The JSON string representation of the object
        """
        d = self.to_dict()

        if path is None:
            return json.dumps(d)
        else:
            if isinstance(path, str):
                path = Path(path)
            with path.open("w") as fp:
                json.dump(d, fp)

            return None

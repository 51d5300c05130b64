import pytest
from nl_court_docket.docket import Charge, Docket
from nl_court_docket.utils import clean_text


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("John Doe\n", "John Doe"),
        ("John Doe\n\n", "John Doe\n"),
        ("John\u00a0Doe", "JohnDoe"),
        ("John  Doe", "John Doe"),
        ("John   Doe", "John  Doe"),
        ("", ""),
    ],
)
def test_clean_text(raw, expected):
    """Test that only the first occurrence of each quirk is cleaned."""
    assert clean_text(raw) == expected


def test_clean_text_not_idempotent():
    """Test that a second non-breaking space survives one call."""
    raw = "\u00a0John Doe\u00a0"

    # First call drops the first one
    once = clean_text(raw)
    assert once == "John Doe\u00a0"
    assert once.count("\u00a0") == 1

    # Second call drops the other
    twice = clean_text(once)
    assert twice == "John Doe"


def test_json_round_trip(tmp_path):
    """Test serializing and de-serializing a docket."""
    docket = Docket(
        data={
            "10:00 a.m.": {
                "John Doe": [Charge("Assault", 2), Charge("Theft")],
                "Jane Roe": [],
            }
        },
        date="2026-10-20",
        office="1",
    )

    # From a JSON string
    docket2 = Docket.from_json(docket.to_json())
    assert docket == docket2
    assert docket.to_dict() == docket2.to_dict()

    # From a JSON file
    path = tmp_path / "docket.json"
    docket.to_json(path)
    assert Docket.from_json(path) == docket

    # From a file path given as a string
    assert Docket.from_json(str(path)) == docket


def test_from_json_missing_file(tmp_path):
    """Test that a missing JSON file is an error."""
    with pytest.raises(FileNotFoundError):
        Docket.from_json(tmp_path / "missing.json")

    with pytest.raises(FileNotFoundError):
        Docket.from_json(str(tmp_path / "missing.json"))

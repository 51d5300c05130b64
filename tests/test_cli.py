import json
import sys
from pathlib import Path

import pytest
import requests
from loguru import logger
from nl_court_docket.__main__ import main

current_dir = Path(__file__).parent.absolute()
html_path = current_dir / "data" / "docket1.html"


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the default logging sink after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_json(capsys):
    """Test printing pretty JSON by default."""
    assert main(["--html", str(html_path)]) == 0

    out = capsys.readouterr().out
    assert out.startswith('{\n    "10:00 a.m."')
    assert json.loads(out)["2:00 p.m."] == {"Richard Roe": []}


def test_compact_json(capsys):
    """Test printing compact JSON."""
    assert main(["--html", str(html_path), "--compact"]) == 0

    out = capsys.readouterr().out
    assert out.count("\n") == 1


def test_csv(capsys):
    """Test printing CSV."""
    assert main(["--html", str(html_path), "--format", "csv"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[0] == "10:00 a.m.,John Doe,Assault,2"


def test_fetch(capsys, monkeypatch):
    """Test fetching the docket for an office."""

    class FakeResponse:
        status_code = 200
        text = html_path.read_text()

    seen = {}

    def get(self, url, params=None, **kwargs):
        seen.update(params)
        return FakeResponse()

    monkeypatch.setattr(requests.Session, "get", get)
    args = ["--office", "7", "--date", "2026-10-20", "--format", "text"]
    assert main(args) == 0

    out = capsys.readouterr().out
    assert "* Assault (2 counts)\n" in out
    assert seen["office[]"] == "7"


def test_fetch_error(monkeypatch):
    """Test that a failed fetch exits with an error."""

    class FakeResponse:
        status_code = 404
        text = ""

    monkeypatch.setattr(
        requests.Session, "get", lambda *args, **kwargs: FakeResponse()
    )
    assert main(["--office", "7"]) == 1


def test_malformed_charge(tmp_path, capsys):
    """Test the handling of malformed charge rows."""
    path = tmp_path / "docket.html"
    path.write_text(
        "<table>"
        "<tr><td><span>9:30 a.m.</span> John Doe</td><td>x</td></tr>"
        "<tr><td>John Doe</td><td>Assault</td><td>x</td></tr>"
        "</table>"
    )

    assert main(["--html", str(path)]) == 1
    assert main(["--html", str(path), "--errors", "ignore"]) == 0
    assert json.loads(capsys.readouterr().out) == {"9:30 a.m.": {"John Doe": []}}


def test_latin1_page(tmp_path, capsys):
    """Test parsing a saved page that is not UTF-8 encoded."""
    path = tmp_path / "docket.html"
    path.write_bytes(
        (
            "<html><head><meta charset=\"iso-8859-1\"></head><body><table>"
            "<tr><td><span>9:30 a.m.</span> Ren\u00e9 C\u00f4t\u00e9</td><td>x</td></tr>"
            "<tr><td>Ren\u00e9 C\u00f4t\u00e9</td><td>[s.1] Vol \u00e0 l'\u00e9talage</td><td>x</td></tr>"
            "</table></body></html>"
        ).encode("latin-1")
    )

    assert main(["--html", str(path), "--format", "csv"]) == 0
    out = capsys.readouterr().out
    assert out == "9:30 a.m.,Ren\u00e9 C\u00f4t\u00e9,Vol \u00e0 l'\u00e9talage,1\n"


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["--office", "7", "--format", "xml"],
        ["--office", "7", "--date", "tomorrow"],
    ],
)
def test_bad_arguments(args):
    """Test that invalid arguments exit with usage errors."""
    with pytest.raises(SystemExit) as e:
        main(args)
    assert e.value.code == 2

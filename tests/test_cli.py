"""Tests for the tarsier CLI command."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from cli.main import app
from tarsier.errors import (
    FetchTimeoutError,
    InvalidURLError,
    NoArticleFoundError,
    NoLinksFoundError,
    TransportError,
)
from tarsier.reader import Document

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from reconfiguring the root logger during tests."""
    mock = MagicMock()
    monkeypatch.setattr("cli.main.setup_logging", mock)
    return mock


def _fake_reader(document=None, error=None, follow=None):
    calls = []

    def fake(url, **kwargs):
        calls.append((url, kwargs))
        if follow is not None:
            kwargs["on_follow"](follow)
        if error is not None:
            raise error
        return document

    fake.calls = calls
    return fake


def test_no_argument_prints_usage():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Usage: tarsier [options...] url" in result.output


def test_prints_title_and_paragraphs(monkeypatch):
    doc = Document(
        url="https://t.test/",
        title="T",
        paragraphs=("Hello <bold>world</>", "", "Bye"),
    )
    fake = _fake_reader(document=doc)
    monkeypatch.setattr("cli.main.read_article", fake)

    result = runner.invoke(app, ["https://t.test/"])

    assert result.exit_code == 0
    assert result.stdout == "T\nHello world\n\nBye\n"
    assert fake.calls[0][0] == "https://t.test/"
    assert fake.calls[0][1]["random_link"] is False


def test_title_line_skipped_when_absent(monkeypatch):
    doc = Document(url="https://t.test/", title=None, paragraphs=("Only",))
    monkeypatch.setattr("cli.main.read_article", _fake_reader(document=doc))

    result = runner.invoke(app, ["t.test"])

    assert result.exit_code == 0
    assert result.stdout == "Only\n"


def test_random_flag_reports_followed_link(monkeypatch):
    doc = Document(url="https://news.test/b", title="B", paragraphs=("Body",))
    fake = _fake_reader(document=doc, follow="https://news.test/b")
    monkeypatch.setattr("cli.main.read_article", fake)

    result = runner.invoke(app, ["-r", "https://hub.test/"])

    assert result.exit_code == 0
    assert fake.calls[0][1]["random_link"] is True
    assert result.stdout.splitlines() == ["Reading link https://news.test/b", "B", "Body"]


def test_no_article_is_informational(monkeypatch):
    monkeypatch.setattr(
        "cli.main.read_article", _fake_reader(error=NoArticleFoundError("none"))
    )

    result = runner.invoke(app, ["https://t.test/"])

    assert result.exit_code == 0
    assert "was not able to parse the article" in result.output
    assert "Usage: tarsier" in result.output


def test_no_links_is_informational(monkeypatch):
    monkeypatch.setattr(
        "cli.main.read_article",
        _fake_reader(error=NoLinksFoundError("did not find any links on the url")),
    )

    result = runner.invoke(app, ["--random", "https://t.test/"])

    assert result.exit_code == 0
    assert "Error: did not find any links on the url" in result.output


@pytest.mark.parametrize(
    "error",
    [
        InvalidURLError("missing host in url 'https://'"),
        TransportError("https://t.test/ returned HTTP 500"),
        FetchTimeoutError("timed out after 30.0s fetching https://t.test/"),
    ],
)
def test_faults_exit_with_error(monkeypatch, error):
    monkeypatch.setattr("cli.main.read_article", _fake_reader(error=error))

    result = runner.invoke(app, ["https://t.test/"])

    assert result.exit_code == 1
    assert f"error running tarsier: {error}" in result.output


def test_log_level_option(monkeypatch, quiet_logging):
    doc = Document(url="https://t.test/", title="T", paragraphs=())
    monkeypatch.setattr("cli.main.read_article", _fake_reader(document=doc))

    result = runner.invoke(app, ["--log-level", "DEBUG", "https://t.test/"])

    assert result.exit_code == 0
    quiet_logging.assert_called_once_with("DEBUG")


def test_log_level_defaults_to_settings(monkeypatch, quiet_logging):
    monkeypatch.setattr("cli.main.settings.log_level", "ERROR")

    runner.invoke(app, [])

    quiet_logging.assert_called_once_with("ERROR")

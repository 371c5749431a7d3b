"""Test the command-line entry point."""

import json
from unittest.mock import patch

import pytest

from research_aggregator.exceptions import ResearchError
from research_aggregator.main import main
from research_aggregator.models import Platform, ResearchSource


def _source(**fields):
    values = dict(
        platform=Platform.ACADEMIC,
        title="The Impact of AI on Developer Productivity",
        url="https://arxiv.org/abs/2401.00001",
        content="Abstract " * 20,
        author="Jane Doe",
        date="2024-01-01",
        final_score=0.97,
    )
    values.update(fields)
    return ResearchSource(**values)


@pytest.fixture(autouse=True)
def no_platform_env(monkeypatch):
    monkeypatch.delenv("RA_PLATFORMS", raising=False)


def test_json_output(capsys):
    with patch("research_aggregator.main.conduct_research", return_value=[_source()]) as run:
        code = main(["--topic", "AI productivity", "--context", "for a report", "--json"])

    assert code == 0
    assert run.call_args[0][:2] == ("AI productivity", "for a report")
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["platform"] == "academic"
    assert payload[0]["author"] == "Jane Doe"


def test_text_output(capsys):
    with patch("research_aggregator.main.conduct_research", return_value=[_source()]):
        assert main(["--topic", "AI productivity"]) == 0

    out = capsys.readouterr().out
    assert "[academic] The Impact of AI on Developer Productivity (0.97)" in out
    assert "https://arxiv.org/abs/2401.00001" in out


def test_platforms_flag_narrows_settings():
    with patch("research_aggregator.main.conduct_research", return_value=[_source()]) as run:
        main(["--topic", "AI", "--platforms", "Academic, github"])

    assert run.call_args.kwargs["settings"].enabled_platforms == ("academic", "github")


def test_blank_topic():
    with patch("research_aggregator.main.conduct_research") as run:
        assert main(["--topic", "   "]) == 2
    run.assert_not_called()


def test_no_sources():
    with patch("research_aggregator.main.conduct_research", return_value=[]):
        assert main(["--topic", "obscure"]) == 3


def test_research_error():
    error = ResearchError("rank", ValueError("boom"))
    with patch("research_aggregator.main.conduct_research", side_effect=error):
        assert main(["--topic", "AI"]) == 1


def test_unknown_platform_is_configuration_error():
    with patch("research_aggregator.main.conduct_research") as run:
        assert main(["--topic", "AI", "--platforms", "web,myspace"]) == 1
    run.assert_not_called()


def test_malformed_numeric_env(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "twelve")
    with patch("research_aggregator.main.conduct_research") as run:
        assert main(["--topic", "AI"]) == 1
    run.assert_not_called()

"""Tests for the CLI report command."""

import json
from unittest.mock import Mock, patch

import requests

from conftest import raw_commit
from fetchers.github import GitHubFetcher
from main import generate_report
from models.data_models import PullRequest
from pipeline.aggregator import PRAggregator
from pipeline.renderer import ReportRenderError
from pipeline.report_assembler import ReportAssembler


def _assembler(prs):
    fetcher = Mock(spec=GitHubFetcher)
    fetcher.fetch_commits.return_value = [raw_commit("add test")]
    aggregator = Mock(spec=PRAggregator)
    aggregator.aggregate.return_value = prs
    return ReportAssembler(fetcher, aggregator=aggregator)


def _pr():
    return PullRequest(
        title="Fix bug",
        url="https://github.com/alice/a/pull/1",
        repository_id="alice/a",
        number=1,
        created_at="2025-01-15T10:30:00Z",
        logo_url="",
    )


def test_writes_html_file(config, tmp_path):
    output = tmp_path / "nested" / "report.html"

    assert generate_report(config, output=output, assembler=_assembler([_pr()]))
    assert "alice/a #1" in output.read_text(encoding="utf-8")


def test_html_file_goes_through_export(config, tmp_path):
    output = tmp_path / "report.html"

    with patch("main.export_report_html") as export:
        assert generate_report(config, output=output, assembler=_assembler([_pr()]))

    export.assert_called_once()
    report, path = export.call_args.args
    assert path == output
    assert report.total == 1
    assert report.pull_requests[0].commits[0].message == "add test"


def test_export_failure_fails(config, tmp_path):
    output = tmp_path / "report.html"

    with patch("main.export_report_html", side_effect=ReportRenderError("missing")):
        assert not generate_report(config, output=output, assembler=_assembler([_pr()]))


def test_writes_json_to_stdout(config, capsys):
    assert generate_report(config, output_format="json", assembler=_assembler([_pr()]))

    data = json.loads(capsys.readouterr().out)
    assert data["pull_requests"][0]["commits"] == [{"message": "add test"}]


def test_no_prs_fails(config, tmp_path):
    output = tmp_path / "report.html"
    assembler = _assembler([])

    assert not generate_report(config, output=output, assembler=assembler)
    assert not output.exists()
    assembler.fetcher.fetch_commits.assert_not_called()


def test_search_failure_fails(config):
    assembler = _assembler([])
    assembler.aggregator.aggregate.side_effect = requests.Timeout("slow")

    assert not generate_report(config, assembler=assembler)

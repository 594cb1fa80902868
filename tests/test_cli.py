"""Tests for the command line interface."""

import json
import sys

import pytest
from click.testing import CliRunner

from seo_inspector import cli as cli_module
from seo_inspector.auditor import audit
from seo_inspector.document import SoupDocument
from seo_inspector.exceptions import EmptyDocument, FetchFailed
from seo_inspector.fetcher import Acquisition


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_audit_url(monkeypatch, optimal_html):
    """Replace network acquisition with a canned page; records call kwargs."""
    calls = []

    def fake(url, use_perf_score=False, settings=None, client=None):
        calls.append({"url": url, "use_perf_score": use_perf_score, "settings": settings})
        document = SoupDocument.from_html(optimal_html)
        page = Acquisition(
            final_url="https://acme.example/",
            document=document,
            robots_text="User-agent: *",
            sitemap_text="<urlset/>",
            perf_score=95 if use_perf_score else None,
            fetch_time_ms=42,
        )
        report = audit(document, page.final_url, page.robots_text, page.sitemap_text, page.perf_score)
        return page, report

    monkeypatch.setattr(cli_module, "audit_url", fake)
    return calls


def failing_audit_url(error):
    def fake(url, use_perf_score=False, settings=None, client=None):
        raise error
    return fake


class TestScanJson:
    """--json emits the API envelope."""

    def test_success_envelope(self, runner, fake_audit_url):
        result = runner.invoke(cli_module.cli, ["scan", "acme.example", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["result"]["score"] == 100
        assert data["result"]["meta"]["finalUrl"] == "https://acme.example/"
        assert data["result"]["meta"]["ogImage"] == "https://acme.example/og.png"
        assert [f["id"] for f in data["result"]["info"]] == ["robots", "sitemap"]

    def test_psi_flag_and_overrides(self, runner, fake_audit_url, monkeypatch):
        monkeypatch.delenv("GOOGLE_PSI_API_KEY", raising=False)
        result = runner.invoke(cli_module.cli, [
            "scan", "acme.example", "--json", "--psi", "--psi-key", "k",
            "--strategy", "desktop", "-t", "3",
        ])
        assert result.exit_code == 0, result.output
        call = fake_audit_url[0]
        assert call["use_perf_score"] is True
        assert call["settings"].psi_api_key == "k"
        assert call["settings"].psi_strategy == "desktop"
        assert call["settings"].timeout == 3.0
        data = json.loads(result.output)
        assert data["result"]["good"][-1]["id"] == "psi-good"

    def test_invalid_address(self, runner):
        result = runner.invoke(cli_module.cli, ["scan", "   ", "--json"])
        assert result.exit_code == 2
        data = json.loads(result.output)
        assert data["ok"] is False
        assert "Invalid URL" in data["error"]

    @pytest.mark.parametrize("error", [
        FetchFailed("Fetch failed: HTTP 500 Internal Server Error", status=500),
        EmptyDocument("https://acme.example/"),
    ])
    def test_fetch_failure(self, runner, monkeypatch, error):
        monkeypatch.setattr(cli_module, "audit_url", failing_audit_url(error))
        result = runner.invoke(cli_module.cli, ["scan", "acme.example", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data == {"ok": False, "error": str(error)}


class TestScanHuman:
    """Rich console output."""

    def test_renders_score_and_meta(self, runner, fake_audit_url):
        result = runner.invoke(cli_module.cli, ["scan", "acme.example"])
        assert result.exit_code == 0, result.output
        assert "SEO Score" in result.output
        assert "100/100" in result.output
        assert "https://acme.example/" in result.output
        assert "Acme Widgets" in result.output

    def test_verbose_lists_passed_checks(self, runner, fake_audit_url):
        quiet = runner.invoke(cli_module.cli, ["scan", "acme.example"])
        verbose = runner.invoke(cli_module.cli, ["scan", "acme.example", "-v"])
        assert "Passed:" not in quiet.output
        assert "Passed:" in verbose.output
        assert "Single H1 heading" in verbose.output

    def test_error_message(self, runner, monkeypatch):
        monkeypatch.setattr(cli_module, "audit_url", failing_audit_url(FetchFailed("Request failed: boom")))
        result = runner.invoke(cli_module.cli, ["scan", "acme.example"])
        assert result.exit_code == 1
        assert "Request failed: boom" in result.output


class TestMain:
    """`seo-inspector URL` is shorthand for `seo-inspector scan URL`."""

    @pytest.mark.parametrize("argv, expected", [
        (["seo-inspector", "example.com"], ["seo-inspector", "scan", "example.com"]),
        (["seo-inspector", "localhost:8000"], ["seo-inspector", "scan", "localhost:8000"]),
        (["seo-inspector", "scan", "example.com"], ["seo-inspector", "scan", "example.com"]),
        (["seo-inspector", "--version"], ["seo-inspector", "--version"]),
    ])
    def test_inserts_scan(self, monkeypatch, argv, expected):
        monkeypatch.setattr(sys, "argv", list(argv))
        monkeypatch.setattr(cli_module, "cli", lambda: None)
        cli_module.main()
        assert sys.argv == expected

"""Unit tests for the command-line interface."""
from __future__ import annotations

import json
from unittest.mock import patch

from typer.testing import CliRunner

from aeo_scanner import __version__
from aeo_scanner.cli.run import app
from aeo_scanner.fetcher.html_fetcher import FetchedPage, FetchError

runner = CliRunner()


class TestFileCommand:
    """Tests for analyzing local HTML files."""

    def test_good_page_exits_zero(self, tmp_path, article_html, article_url):
        page = tmp_path / "page.html"
        page.write_text(article_html, encoding="utf-8")

        result = runner.invoke(app, ["file", str(page), "--url", article_url, "-p", "strict"])

        assert result.exit_code == 0
        assert "100/100" in result.output

    def test_poor_page_exits_one(self, tmp_path):
        page = tmp_path / "page.html"
        page.write_text("<p>hi</p>", encoding="utf-8")

        result = runner.invoke(app, ["file", str(page), "-u", "https://example.com/x"])

        assert result.exit_code == 1

    def test_save_json_report(self, tmp_path, article_html, article_url):
        page = tmp_path / "page.html"
        page.write_text(article_html, encoding="utf-8")
        report = tmp_path / "report.json"

        result = runner.invoke(
            app,
            ["file", str(page), "-u", article_url, "-o", "json", "-s", str(report), "-p", "strict"],
        )

        assert result.exit_code == 0
        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["score"] == 100
        assert data["pageType"] == "article"

    def test_invalid_output_format(self, tmp_path, article_html, article_url):
        page = tmp_path / "page.html"
        page.write_text(article_html, encoding="utf-8")

        result = runner.invoke(app, ["file", str(page), "-u", article_url, "-o", "xml"])

        assert result.exit_code == 1
        assert "Invalid output format" in result.output

    def test_unknown_profile(self, tmp_path):
        page = tmp_path / "page.html"
        page.write_text("<p>hi</p>", encoding="utf-8")

        result = runner.invoke(app, ["file", str(page), "-u", "https://example.com/", "-p", "loose"])

        assert result.exit_code == 1
        assert "Unknown scoring profile" in result.output


class TestRunCommand:
    """Tests for fetching and analyzing URLs."""

    def test_fetch_error(self):
        with patch("aeo_scanner.cli.run.fetch_page", side_effect=FetchError("boom")):
            result = runner.invoke(app, ["run", "https://example.com/"])

        assert result.exit_code == 1
        assert "boom" in result.output

    def test_run_with_fetched_page(self, article_html, article_url):
        page = FetchedPage(html=article_html, status_code=200, final_url=article_url)
        with patch("aeo_scanner.cli.run.fetch_page", return_value=page):
            result = runner.invoke(app, ["run", article_url, "-o", "markdown", "-p", "strict"])

        assert result.exit_code == 0
        assert "# AEO Analysis Report" in result.output

    def test_check_prints_score(self, article_html, article_url):
        page = FetchedPage(html=article_html, status_code=200, final_url=article_url)
        with patch("aeo_scanner.cli.run.fetch_page", return_value=page):
            result = runner.invoke(app, ["check", article_url])

        assert "(article)" in result.output


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output

"""Tests for the command-line entry point (widgetgen.cli)."""

from __future__ import annotations

import json
import shutil
from unittest.mock import patch

import pytest

from widgetgen.cli import (
    EXIT_IO_ERROR,
    EXIT_VALIDATION_ERROR,
    build_parser,
    collect_answers,
    main,
)
from widgetgen.config import DEFAULT_TEMPLATE_DIR

pytestmark = pytest.mark.unit


def _collect(argv, base=None):
    return collect_answers(build_parser().parse_args(argv), base)


# ---------------------------------------------------------------------------
# collect_answers
# ---------------------------------------------------------------------------


class TestCollectAnswers:
    def test_defaults_enable_everything(self):
        assert _collect(["out", "Stock Ticker"]) == {
            "widgetName": "Stock Ticker",
            "widgetDescription": "Stock Ticker description",
            "enablePreferencesSupport": True,
            "enableEventsSupport": True,
            "enableDataSourceSupport": True,
            "enableQuotesSupport": True,
            "enableTimeSeriesSupport": True,
            "enableNewsSupport": True,
        }

    def test_switches_disable(self):
        answers = _collect(["out", "Ticker", "--no-events", "--no-news"])
        assert answers["enableEventsSupport"] is False
        assert answers["enableNewsSupport"] is False
        assert answers["enableQuotesSupport"] is True

    def test_no_data_source_skips_sub_answers(self):
        answers = _collect(["out", "Ticker", "--no-data-source"])
        assert answers["enableDataSourceSupport"] is False
        assert "enableQuotesSupport" not in answers
        assert "enableTimeSeriesSupport" not in answers
        assert "enableNewsSupport" not in answers

    def test_description_option(self):
        assert _collect(["out", "Ticker", "--description", "Prices"])["widgetDescription"] == "Prices"

    def test_no_name(self):
        answers = _collect([])
        assert "widgetName" not in answers
        assert answers["widgetDescription"] == " description"

    def test_base_answers_win(self):
        base = {
            "widgetName": "From File",
            "enableDataSourceSupport": False,
            "enableEventsSupport": True,
        }
        answers = _collect(["out", "Ticker", "--no-events"], base)
        assert answers["widgetName"] == "From File"
        assert answers["widgetDescription"] == "From File description"
        assert answers["enableEventsSupport"] is True
        assert answers["enablePreferencesSupport"] is True
        assert "enableQuotesSupport" not in answers

    def test_path_defaults_to_cwd(self):
        args = build_parser().parse_args([])
        assert args.path == "."
        assert args.name == ""


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:
    def test_generates_project(self, tmp_path):
        dest = tmp_path / "ticker"
        with patch("widgetgen.cli.print_summary_table") as mock_table, \
                patch("widgetgen.cli.print_success") as mock_success:
            main([str(dest), "Stock Ticker", "--quiet", "--no-events"])
        assert (dest / "package.json").is_file()
        assert (dest / "src" / "js" / "greeting.js").is_file()
        assert not (dest / "src" / "js" / "event-builder.js").exists()
        summary = mock_table.call_args.args[0]
        assert summary["Widget id"] == "stock-ticker"
        assert "greeting" in summary["Features"]
        mock_success.assert_called_once()

    def test_answers_file(self, tmp_path):
        answers_file = tmp_path / "answers.json"
        answers_file.write_text(json.dumps({
            "widgetName": "Market News",
            "enablePreferencesSupport": False,
            "enableEventsSupport": False,
            "enableDataSourceSupport": True,
            "enableQuotesSupport": False,
            "enableTimeSeriesSupport": False,
            "enableNewsSupport": True,
        }), encoding="utf-8")
        dest = tmp_path / "news"
        with patch("widgetgen.cli.print_summary_table"), patch("widgetgen.cli.print_success"):
            main([str(dest), "--answers", str(answers_file), "--quiet"])
        assert (dest / "src" / "js" / "news-builder.ui.js").is_file()
        assert not (dest / "src" / "js" / "quotes-builder.ui.js").exists()

    def test_missing_name_is_validation_error(self, tmp_path):
        dest = tmp_path / "nameless"
        with patch("widgetgen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(dest), "--quiet"])
        assert exc_info.value.code == EXIT_VALIDATION_ERROR
        assert "invalid answers" in mock_error.call_args.args[0]
        assert not dest.exists()

    def test_unreadable_answers_file(self, tmp_path):
        with patch("widgetgen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(tmp_path / "x"), "--answers", str(tmp_path / "missing.json")])
        assert exc_info.value.code == EXIT_IO_ERROR
        assert "cannot read answers file" in mock_error.call_args.args[0]

    def test_invalid_json_answers_file(self, tmp_path):
        answers_file = tmp_path / "answers.json"
        answers_file.write_text("{not json", encoding="utf-8")
        with patch("widgetgen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(tmp_path / "x"), "Ticker", "--answers", str(answers_file)])
        assert exc_info.value.code == EXIT_VALIDATION_ERROR
        assert "not valid JSON" in mock_error.call_args.args[0]

    @pytest.mark.parametrize("content", ["[1, 2]", "\"Ticker\"", "null"])
    def test_non_object_answers_file(self, tmp_path, content):
        answers_file = tmp_path / "answers.json"
        answers_file.write_text(content, encoding="utf-8")
        dest = tmp_path / "x"
        with patch("widgetgen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(dest), "Ticker", "--answers", str(answers_file)])
        assert exc_info.value.code == EXIT_VALIDATION_ERROR
        assert "must hold a JSON object" in mock_error.call_args.args[0]
        assert not dest.exists()

    def test_io_error(self, tmp_path):
        empty = tmp_path / "templates"
        empty.mkdir()
        with patch("widgetgen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(tmp_path / "out"), "Ticker", "--template-dir", str(empty), "--quiet"])
        assert exc_info.value.code == EXIT_IO_ERROR
        assert "Gruntfile.js" in mock_error.call_args.args[0]

    def test_broken_template_is_io_error(self, tmp_path):
        templates = tmp_path / "templates"
        shutil.copytree(DEFAULT_TEMPLATE_DIR, templates)
        (templates / "_bower.json").write_text('{"name": {{ name }\n', encoding="utf-8")
        with patch("widgetgen.cli.print_error") as mock_error:
            with pytest.raises(SystemExit) as exc_info:
                main([str(tmp_path / "out"), "Ticker", "--template-dir", str(templates), "--quiet"])
        assert exc_info.value.code == EXIT_IO_ERROR
        assert "bower.json" in mock_error.call_args.args[0]
        assert (tmp_path / "out" / "package.json").is_file()

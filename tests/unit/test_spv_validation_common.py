#!/usr/bin/env python3
"""Tests for spv_validation_common.py - shared report types and helpers."""

from pathlib import Path

import pytest

from spv_validation_common import (
    DEFAULT_NAMESPACE_PREFIX,
    EXIT_ERROR,
    EXIT_OK,
    ValidationReport,
    ValidationResult,
    colorize,
    format_result,
    get_namespace_prefix,
    get_plugin_root,
    merge_reports,
    read_text_file,
)


class TestValidationReport:
    """Error accumulation and exit-code determination."""

    def test_empty_report_exits_ok(self) -> None:
        assert ValidationReport().exit_code == EXIT_OK

    def test_warnings_never_affect_exit_code(self) -> None:
        report = ValidationReport()
        report.warning("advisory", "skills/README.md")
        report.warning("another advisory")
        assert report.exit_code == EXIT_OK
        assert not report.has_errors

    def test_single_error_fails(self) -> None:
        report = ValidationReport()
        report.warning("advisory")
        report.error("broken", "plugin.json")
        assert report.exit_code == EXIT_ERROR
        assert report.count_by_level() == {"ERROR": 1, "WARNING": 1}

    def test_path_locations_are_stored_as_strings(self, tmp_path: Path) -> None:
        report = ValidationReport()
        report.error("broken", tmp_path / "plugin.json")
        assert report.results[0].file == str(tmp_path / "plugin.json")

    def test_results_are_immutable(self) -> None:
        result = ValidationResult("ERROR", "broken", "x")
        with pytest.raises(AttributeError):
            result.message = "changed"  # type: ignore[misc]

    def test_to_dict_lists_results_in_order(self) -> None:
        report = ValidationReport()
        report.error("first", "a")
        report.warning("second", "b")
        data = report.to_dict()
        assert data["exit_code"] == EXIT_ERROR
        assert data["results"] == [
            {"level": "ERROR", "message": "first", "file": "a"},
            {"level": "WARNING", "message": "second", "file": "b"},
        ]


class TestMergeReports:
    """Pure merge step used by the aggregator."""

    def test_preserves_pipeline_order(self) -> None:
        first, second, third = ValidationReport(), ValidationReport(), ValidationReport()
        first.error("manifest")
        second.warning("hooks")
        third.error("skills")
        merged = merge_reports(first, second, third)
        assert [r.message for r in merged.results] == ["manifest", "hooks", "skills"]
        assert [r.message for r in merged.errors] == ["manifest", "skills"]
        assert [r.message for r in merged.warnings] == ["hooks"]

    def test_does_not_mutate_inputs(self) -> None:
        first, second = ValidationReport(), ValidationReport()
        first.error("a")
        second.error("b")
        merge_reports(first, second)
        assert len(first.results) == 1
        assert len(second.results) == 1

    def test_no_reports_is_success(self) -> None:
        assert merge_reports().exit_code == EXIT_OK


class TestFormatting:
    """Terminal rendering helpers."""

    def test_format_result_shows_location_then_message(self) -> None:
        text = format_result(ValidationResult("ERROR", "Missing SKILL.md file", "/p/skills/x"))
        assert text == "  /p/skills/x\n    -> Missing SKILL.md file"

    def test_colorize_disabled_returns_plain_text(self) -> None:
        assert colorize("Errors:", "ERROR", enabled=False) == "Errors:"

    def test_colorize_wraps_with_reset(self) -> None:
        assert colorize("Errors:", "ERROR").endswith("\033[0m")


class TestConfiguration:
    """Environment-driven defaults."""

    def test_plugin_root_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLAUDE_PLUGIN_ROOT", str(tmp_path))
        assert get_plugin_root() == tmp_path

    def test_plugin_root_defaults_to_parent_of_scripts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CLAUDE_PLUGIN_ROOT", raising=False)
        root = get_plugin_root()
        assert (root / "scripts" / "spv_validation_common.py").is_file()

    def test_namespace_prefix_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SPV_NAMESPACE_PREFIX", raising=False)
        assert get_namespace_prefix() == DEFAULT_NAMESPACE_PREFIX == "laravel:"

    def test_namespace_prefix_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPV_NAMESPACE_PREFIX", "acme:")
        assert get_namespace_prefix() == "acme:"


class TestReadTextFile:
    """Filesystem failures become diagnostics instead of exceptions."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("héllo", encoding="utf-8")
        report = ValidationReport()
        assert read_text_file(path, report) == "héllo"
        assert report.results == []

    def test_invalid_utf8_is_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.md"
        path.write_bytes(b"---\nname: \xff\xfe\n---\n")
        report = ValidationReport()
        assert read_text_file(path, report) is None
        assert len(report.errors) == 1
        assert "not valid UTF-8" in report.errors[0].message

    def test_directory_is_an_error(self, tmp_path: Path) -> None:
        report = ValidationReport()
        assert read_text_file(tmp_path, report) is None
        assert len(report.errors) == 1
        assert report.errors[0].file == str(tmp_path)

#!/usr/bin/env python3
"""Tests for validate_command.py - optional commands/ directory checks."""

from pathlib import Path

import pytest

from validate_command import validate_command_content, validate_commands_directory


@pytest.fixture
def commands_dir(tmp_path: Path) -> Path:
    path = tmp_path / "commands"
    path.mkdir()
    return path


class TestValidateCommandContent:
    """Schema checks on a single command document."""

    def test_valid_command(self) -> None:
        report = validate_command_content("---\ndescription: Run the test suite\n---\nBody\n", "commands/test.md")
        assert report.results == []
        assert report.frontmatter == {"description": "Run the test suite"}

    def test_missing_frontmatter(self) -> None:
        report = validate_command_content("Run things\n", "commands/test.md")
        assert report.frontmatter is None
        assert [r.message for r in report.errors] == ["Missing or invalid frontmatter"]

    def test_blank_description(self) -> None:
        report = validate_command_content("---\ndescription:    \n---\n", "commands/test.md")
        assert [r.message for r in report.errors] == ['Missing or empty "description" in frontmatter']

    def test_name_is_not_required(self) -> None:
        """Commands have no namespace rule, only a description."""
        report = validate_command_content("---\nname: whatever\ndescription: d\n---\n", "commands/test.md")
        assert report.results == []

    def test_bad_explicit_tag_is_a_warning(self) -> None:
        report = validate_command_content("---\ndescription: d\nweight: !!float abc\n---\n", "commands/test.md")
        assert report.errors == []
        assert len(report.warnings) == 1
        assert report.exit_code == 0


class TestValidateCommandsDirectory:
    """Walking commands/ and counting processed files."""

    def test_absent_directory_is_one_warning(self, tmp_path: Path) -> None:
        report = validate_commands_directory(tmp_path / "commands")
        assert len(report.results) == 1
        assert report.warnings[0].message == "Commands directory does not exist (optional)"
        assert report.processed == 0
        assert report.exit_code == 0
        assert not report.scanned

    def test_non_markdown_files_are_skipped(self, commands_dir: Path) -> None:
        (commands_dir / "notes.txt").write_text("no header")
        (commands_dir / ".DS_Store").write_bytes(b"\x00\x01")
        report = validate_commands_directory(commands_dir)
        assert report.results == []
        assert report.processed == 0

    def test_counts_files_regardless_of_schema(self, commands_dir: Path) -> None:
        (commands_dir / "good.md").write_text("---\ndescription: Good\n---\n")
        (commands_dir / "blank.md").write_text("---\ndescription: \n---\n")
        report = validate_commands_directory(commands_dir)
        assert report.processed == 2
        assert report.scanned
        assert report.valid_items == ["good.md"]
        assert report.failed_items == ["blank.md"]
        assert len(report.errors) == 1
        assert report.errors[0].file == str(commands_dir / "blank.md")

    def test_missing_frontmatter_is_an_error(self, commands_dir: Path) -> None:
        (commands_dir / "plain.md").write_text("# Plain markdown\n")
        report = validate_commands_directory(commands_dir)
        assert [r.message for r in report.errors] == ["Missing or invalid frontmatter"]
        assert report.processed == 0

    def test_subdirectory_named_like_markdown_is_skipped(self, commands_dir: Path) -> None:
        (commands_dir / "nested.md").mkdir()
        report = validate_commands_directory(commands_dir)
        assert report.results == []

    def test_path_that_is_a_file(self, tmp_path: Path) -> None:
        (tmp_path / "commands").write_text("")
        report = validate_commands_directory(tmp_path / "commands")
        assert len(report.errors) == 1
        assert not report.scanned

#!/usr/bin/env python3
"""
Skill Pack Validation - Command Validator

Validates the optional commands/ directory of a plugin. Each *.md file must
open with frontmatter carrying a non-empty "description". Other files are
ignored.

Usage:
    uv run python scripts/validate_command.py path/to/commands/
    uv run python scripts/validate_command.py path/to/commands/ --json

Exit codes:
    0 - All checks passed (a missing commands/ directory is only a warning)
    1 - Errors found
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from spv_frontmatter import parse_frontmatter
from spv_validation_common import (
    COMMAND_FILE_SUFFIX,
    ValidationReport,
    print_section,
    read_text_file,
)
from validate_skill import validate_description_field, validate_yaml_header

# =============================================================================
# Command-Specific Report Classes
# =============================================================================


@dataclass
class CommandValidationReport(ValidationReport):
    """Validation report for a command file, extends base ValidationReport with command_path."""

    command_path: str = ""
    frontmatter: dict[str, str] | None = None


@dataclass
class CommandsValidationReport(ValidationReport):
    """Validation report for a whole commands/ directory.

    ``scanned`` is set once the directory has been listed.
    """

    commands_dir: str = ""
    processed: int = 0
    scanned: bool = False

    @property
    def valid_count(self) -> int:
        return len(self.valid_items)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        base = super().to_dict()
        base["commands_dir"] = self.commands_dir
        base["processed"] = self.processed
        base["valid"] = self.valid_count
        return base


# =============================================================================
# Validation Functions
# =============================================================================


def validate_command_content(content: str, location: str) -> CommandValidationReport:
    """Validate the text of one command file.

    Args:
        content: Raw command markdown
        location: Path reported with each finding

    Returns:
        CommandValidationReport; ``frontmatter`` is None if the header is missing
    """
    report = CommandValidationReport(command_path=location)

    frontmatter = parse_frontmatter(content)
    if frontmatter is None:
        report.error("Missing or invalid frontmatter", location)
        return report

    report.frontmatter = frontmatter
    validate_description_field(frontmatter, location, report)
    validate_yaml_header(content, location, report)
    return report


def validate_commands_directory(commands_dir: Path) -> CommandsValidationReport:
    """Validate all command files in a directory.

    Args:
        commands_dir: Path to the commands/ directory

    Returns:
        CommandsValidationReport with results and counters
    """
    report = CommandsValidationReport(commands_dir=str(commands_dir))

    if not commands_dir.exists():
        report.warning("Commands directory does not exist (optional)", commands_dir)
        return report

    if not commands_dir.is_dir():
        report.error("Commands path is not a directory", commands_dir)
        return report

    try:
        command_files = sorted(
            p for p in commands_dir.iterdir() if p.name.endswith(COMMAND_FILE_SUFFIX) and not p.is_dir()
        )
    except OSError as e:
        report.error(f"Cannot list directory: {e.strerror or e}", commands_dir)
        return report
    report.scanned = True

    for command_file in command_files:
        content = read_text_file(command_file, report)
        if content is None:
            report.add_failed_item(command_file.name)
            continue

        command_report = validate_command_content(content, str(command_file))
        report.merge(command_report)

        if command_report.frontmatter is None:
            report.add_failed_item(command_file.name)
            continue

        report.processed += 1
        if command_report.has_errors:
            report.add_failed_item(command_file.name)
        else:
            report.add_valid_item(command_file.name)

    return report


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Validate a commands/ directory")
    parser.add_argument("commands_dir", help="Path to the commands/ directory")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    args = parser.parse_args()

    report = validate_commands_directory(Path(args.commands_dir))

    if args.json:
        print(report.to_json())
        return report.exit_code

    print(f"Found {report.processed} valid commands ({report.valid_count} schema-valid)")
    if report.warnings:
        print_section("Warnings:", report.warnings, "WARNING")
    if report.has_errors:
        print_section("Errors:", report.errors, "ERROR", sys.stderr)

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())

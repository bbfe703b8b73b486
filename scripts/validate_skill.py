#!/usr/bin/env python3
"""
Skill Pack Validation - Skill Validator

Validates the skills/ directory of a plugin. Every entry must be a directory
holding a SKILL.md whose frontmatter carries a "name" starting with the
namespace prefix and a non-empty "description".

Usage:
    uv run python scripts/validate_skill.py path/to/skills/
    uv run python scripts/validate_skill.py path/to/skills/ --prefix laravel:
    uv run python scripts/validate_skill.py path/to/skills/ --json

Exit codes:
    0 - All checks passed
    1 - Errors found
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from spv_frontmatter import check_yaml_compatibility, parse_frontmatter, split_frontmatter
from spv_validation_common import (
    SKILL_FILE_NAME,
    ValidationReport,
    get_namespace_prefix,
    print_section,
    read_text_file,
)


@dataclass
class SkillValidationReport(ValidationReport):
    """Validation report for a single SKILL.md."""

    skill_path: str = ""
    frontmatter: dict[str, str] | None = None


@dataclass
class SkillsValidationReport(ValidationReport):
    """Validation report for a whole skills/ directory.

    ``processed`` counts skills whose frontmatter parsed, whether or not the
    fields passed. Schema-valid skill names are kept in ``valid_items``.
    ``scanned`` is set once the directory has been listed.
    """

    skills_dir: str = ""
    processed: int = 0
    scanned: bool = False

    @property
    def valid_count(self) -> int:
        return len(self.valid_items)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        base = super().to_dict()
        base["skills_dir"] = self.skills_dir
        base["processed"] = self.processed
        base["valid"] = self.valid_count
        return base


# =============================================================================
# Content Validation
# =============================================================================


def validate_name_field(frontmatter: dict[str, str], prefix: str, location: str, report: ValidationReport) -> None:
    """Validate the 'name' frontmatter field carries the namespace prefix."""
    name = frontmatter.get("name", "")
    if not name:
        report.error('Missing "name" in frontmatter', location)
    elif not name.startswith(prefix):
        report.error(f'Name must start with "{prefix}", got "{name}"', location)


def validate_description_field(frontmatter: dict[str, str], location: str, report: ValidationReport) -> None:
    """Validate the 'description' frontmatter field (REQUIRED, non-blank)."""
    if not frontmatter.get("description", "").strip():
        report.error('Missing or empty "description" in frontmatter', location)


def validate_yaml_header(content: str, location: str, report: ValidationReport) -> None:
    """Warn when the header would not load as YAML in the host assistant."""
    split = split_frontmatter(content)
    if split is None:
        return
    problem = check_yaml_compatibility(split[0])
    if problem:
        report.warning(f"Frontmatter is not valid YAML: {problem}", location)


def validate_skill_content(content: str, location: str, prefix: str) -> SkillValidationReport:
    """Validate the text of one SKILL.md without touching the filesystem.

    Args:
        content: Raw SKILL.md text
        location: Path reported with each finding
        prefix: Namespace prefix every skill name must start with

    Returns:
        SkillValidationReport; ``frontmatter`` is None if the header is missing
    """
    report = SkillValidationReport(skill_path=location)

    frontmatter = parse_frontmatter(content)
    if frontmatter is None:
        report.error("Missing or invalid frontmatter", location)
        return report

    report.frontmatter = frontmatter
    validate_name_field(frontmatter, prefix, location, report)
    validate_description_field(frontmatter, location, report)
    validate_yaml_header(content, location, report)
    return report


# =============================================================================
# Directory Scan
# =============================================================================


def validate_skill_dir(skill_dir: Path, prefix: str, report: SkillsValidationReport) -> None:
    """Validate one skill directory and fold the results into ``report``."""
    skill_file = skill_dir / SKILL_FILE_NAME
    if not skill_file.exists():
        report.error(f"Missing {SKILL_FILE_NAME} file", skill_dir)
        report.add_failed_item(skill_dir.name)
        return

    content = read_text_file(skill_file, report)
    if content is None:
        report.add_failed_item(skill_dir.name)
        return

    skill_report = validate_skill_content(content, str(skill_file), prefix)
    report.merge(skill_report)

    if skill_report.frontmatter is None:
        report.add_failed_item(skill_dir.name)
        return

    report.processed += 1
    if skill_report.has_errors:
        report.add_failed_item(skill_dir.name)
    else:
        report.add_valid_item(skill_dir.name)


def validate_skills_directory(skills_dir: Path, prefix: str) -> SkillsValidationReport:
    """Validate every entry of a skills/ directory.

    Args:
        skills_dir: Path to the skills/ directory
        prefix: Namespace prefix every skill name must start with

    Returns:
        SkillsValidationReport with results and counters
    """
    report = SkillsValidationReport(skills_dir=str(skills_dir))

    if not skills_dir.exists():
        report.error("Skills directory does not exist", skills_dir)
        return report

    if not skills_dir.is_dir():
        report.error("Skills path is not a directory", skills_dir)
        return report

    try:
        entries = sorted(skills_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        report.error(f"Cannot list directory: {e.strerror or e}", skills_dir)
        return report
    report.scanned = True

    for entry in entries:
        if not entry.is_dir():
            report.warning("Skills directory should only contain directories", entry)
            continue
        validate_skill_dir(entry, prefix, report)

    return report


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Validate a skills/ directory")
    parser.add_argument("skills_dir", help="Path to the skills/ directory")
    parser.add_argument("--prefix", help="Required skill name prefix (default: $SPV_NAMESPACE_PREFIX or laravel:)")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    args = parser.parse_args()

    report = validate_skills_directory(Path(args.skills_dir), args.prefix or get_namespace_prefix())

    if args.json:
        print(report.to_json())
        return report.exit_code

    print(f"Found {report.processed} valid skills ({report.valid_count} schema-valid)")
    if report.warnings:
        print_section("Warnings:", report.warnings, "WARNING")
    if report.has_errors:
        print_section("Errors:", report.errors, "ERROR", sys.stderr)

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())

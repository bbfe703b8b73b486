#!/usr/bin/env python3
"""
Skill Pack Validation - Common Module

Shared validation infrastructure for all skill pack validators.
This module contains:
- Type definitions (Level, ValidationResult, ValidationReport)
- Plugin layout constants (manifest, hooks, skills, commands paths)
- Utility functions (report merging, formatting, exit codes)

All individual validators should import from this module to ensure consistency.
"""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, TextIO

# =============================================================================
# Type Definitions
# =============================================================================

# Validation result severity levels
# - ERROR: always blocks validation (non-zero exit code)
# - WARNING: never blocks, always reported
Level = Literal["ERROR", "WARNING"]

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_OK = 0  # No errors (warnings permitted)
EXIT_ERROR = 1  # At least one error found

# =============================================================================
# Plugin Layout
# =============================================================================

MANIFEST_PATH = Path(".claude-plugin") / "plugin.json"
HOOKS_JSON_PATH = Path("hooks") / "hooks.json"
HOOK_ENTRY_SCRIPT_PATH = Path("hooks") / "session-start.sh"
SKILLS_DIR_NAME = "skills"
COMMANDS_DIR_NAME = "commands"

# Metadata document every skill directory must contain
SKILL_FILE_NAME = "SKILL.md"

# Extension of command documents
COMMAND_FILE_SUFFIX = ".md"

# Every skill name must begin with this namespace prefix
DEFAULT_NAMESPACE_PREFIX = "laravel:"

# Required fields of plugin.json
REQUIRED_MANIFEST_FIELDS = ("name", "description", "version")

# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """Single validation finding.

    Attributes:
        level: Severity level (ERROR or WARNING)
        message: Human-readable description of the finding
        file: Path of the file or directory the finding refers to
    """

    level: Level
    message: str
    file: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary for JSON serialization."""
        return {"level": self.level, "message": self.message, "file": self.file}


@dataclass
class ValidationReport:
    """Ordered collection of validation results.

    This is the base class that all validators should use (or extend).
    Results are kept in insertion order so rendering is deterministic.

    Supports:
    - Error accumulation (collect all errors before reporting)
    - Merging reports from several validators in pipeline order
    - Partial validation (track valid items even when some fail)
    """

    results: list[ValidationResult] = field(default_factory=list)
    valid_items: list[Any] = field(default_factory=list)
    failed_items: list[Any] = field(default_factory=list)

    def add(self, level: Level, message: str, file: str | Path | None = None) -> None:
        """Add a validation result."""
        self.results.append(ValidationResult(level, message, str(file) if file is not None else None))

    def error(self, message: str, file: str | Path | None = None) -> None:
        """Add an error (blocks validation)."""
        self.add("ERROR", message, file)

    def warning(self, message: str, file: str | Path | None = None) -> None:
        """Add a warning. Always reported, never blocks validation."""
        self.add("WARNING", message, file)

    @property
    def errors(self) -> list[ValidationResult]:
        """All ERROR results, in insertion order."""
        return [r for r in self.results if r.level == "ERROR"]

    @property
    def warnings(self) -> list[ValidationResult]:
        """All WARNING results, in insertion order."""
        return [r for r in self.results if r.level == "WARNING"]

    @property
    def has_errors(self) -> bool:
        """Check if any ERROR results exist."""
        return any(r.level == "ERROR" for r in self.results)

    @property
    def exit_code(self) -> int:
        """Get the process exit code. WARNING never affects it."""
        return EXIT_ERROR if self.has_errors else EXIT_OK

    def count_by_level(self) -> dict[str, int]:
        """Get count of results by level."""
        counts: dict[str, int] = {"ERROR": 0, "WARNING": 0}
        for r in self.results:
            counts[r.level] += 1
        return counts

    def merge(self, other: ValidationReport) -> None:
        """Merge results from another report into this one."""
        self.results.extend(other.results)

    def add_valid_item(self, item: Any) -> None:
        """Record an item that passed every schema check."""
        self.valid_items.append(item)

    def add_failed_item(self, item: Any) -> None:
        """Record an item that failed at least one check."""
        self.failed_items.append(item)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {
            "exit_code": self.exit_code,
            "counts": self.count_by_level(),
            "results": [r.to_dict() for r in self.results],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert report to JSON string.

        Args:
            indent: JSON indentation level (default 2)

        Returns:
            JSON string representation of the report
        """
        return json.dumps(self.to_dict(), indent=indent)


def merge_reports(*reports: ValidationReport) -> ValidationReport:
    """Combine reports into a new one, preserving the order they are given in.

    The inputs are left untouched.
    """
    merged = ValidationReport()
    for report in reports:
        merged.merge(report)
    return merged


# =============================================================================
# Utility Functions
# =============================================================================


def get_plugin_root() -> Path:
    """Get the plugin root directory.

    Uses ``CLAUDE_PLUGIN_ROOT`` when set, otherwise the parent of scripts/.
    """
    env_root = os.environ.get("CLAUDE_PLUGIN_ROOT", "").strip()
    if env_root:
        return Path(env_root)
    return Path(__file__).resolve().parent.parent


def get_namespace_prefix() -> str:
    """Get the skill namespace prefix (``SPV_NAMESPACE_PREFIX`` or the default)."""
    return os.environ.get("SPV_NAMESPACE_PREFIX", "").strip() or DEFAULT_NAMESPACE_PREFIX


def read_text_file(path: Path, report: ValidationReport) -> str | None:
    """Read a UTF-8 text file, recording an ERROR instead of raising.

    Args:
        path: File to read
        report: ValidationReport to add the failure to

    Returns:
        The file content, or None if it could not be read
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        report.error(f"File is not valid UTF-8: {e}", path)
    except OSError as e:
        report.error(f"Cannot read file: {e.strerror or e}", path)
    return None


# =============================================================================
# Color Formatting (for terminal output)
# =============================================================================

# ANSI color codes
COLORS = {
    "ERROR": "\033[91m",  # Red
    "WARNING": "\033[95m",  # Magenta
    "PASSED": "\033[92m",  # Green
    "RESET": "\033[0m",  # Reset
    "BOLD": "\033[1m",  # Bold
}


def use_color(stream: TextIO, disabled: bool = False) -> bool:
    """Decide whether ANSI colors should be written to ``stream``."""
    if disabled or os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, level: str, enabled: bool = True) -> str:
    """Apply color to text based on level."""
    if not enabled:
        return text
    color = COLORS.get(level, "")
    return f"{color}{text}{COLORS['RESET']}"


def format_result(result: ValidationResult) -> str:
    """Format a single result as an indented location line and message line."""
    location = result.file or "<plugin>"
    return f"  {location}\n    -> {result.message}"


def print_section(
    title: str,
    results: list[ValidationResult],
    level: Level,
    stream: TextIO | None = None,
    color: bool = False,
) -> None:
    """Print a titled section listing results in insertion order."""
    out = stream if stream is not None else sys.stdout
    print(f"\n{colorize(title, level, color)}\n", file=out)
    for result in results:
        print(format_result(result), file=out)

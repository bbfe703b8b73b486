#!/usr/bin/env python3
"""
Skill Pack Validation - Manifest Validator

Validates the package-level descriptor at .claude-plugin/plugin.json.
The manifest must be a JSON object with truthy "name", "description" and
"version" fields.

Usage:
    uv run python scripts/validate_manifest.py path/to/plugin.json
    uv run python scripts/validate_manifest.py path/to/plugin.json --json

Exit codes:
    0 - All checks passed
    1 - Errors found
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from spv_validation_common import (
    REQUIRED_MANIFEST_FIELDS,
    ValidationReport,
    print_section,
    read_text_file,
)

# =============================================================================
# Manifest Types
# =============================================================================


@dataclass(frozen=True)
class PluginManifest:
    """Decoded plugin.json identification fields."""

    name: str
    description: str
    version: str


@dataclass
class ManifestValidationReport(ValidationReport):
    """Validation report for plugin.json, carries the decoded manifest.

    ``data`` holds the parsed JSON object even when required fields are
    missing, so whichever fields resolved can still be shown.
    """

    manifest_path: str = ""
    manifest: PluginManifest | None = None
    data: dict[str, Any] | None = None

    def describe_plugin(self) -> str | None:
        """Get the ``Plugin: <name> v<version>`` line, or None if no object was parsed."""
        if self.data is None:
            return None
        line = f"Plugin: {self.data.get('name') or '<unnamed>'}"
        if self.data.get("version"):
            line += f" v{self.data['version']}"
        return line

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        base = super().to_dict()
        base["manifest_path"] = self.manifest_path
        if self.manifest is not None:
            base["manifest"] = {
                "name": self.manifest.name,
                "description": self.manifest.description,
                "version": self.manifest.version,
            }
        return base


# =============================================================================
# Validation Functions
# =============================================================================


def decode_manifest(data: Any) -> tuple[PluginManifest | None, list[str]]:
    """Decode a parsed JSON value into a PluginManifest.

    Every missing or falsy required field produces its own problem message.

    Returns:
        Tuple of (manifest, problems). The manifest is None if any problem
        was found.
    """
    if not isinstance(data, dict):
        return None, [f"Manifest root must be a JSON object, got {type(data).__name__}"]

    problems = [f'Missing required field: "{fld}"' for fld in REQUIRED_MANIFEST_FIELDS if not data.get(fld)]
    if problems:
        return None, problems

    return PluginManifest(
        name=str(data["name"]),
        description=str(data["description"]),
        version=str(data["version"]),
    ), []


def validate_manifest_content(content: str, location: str) -> ManifestValidationReport:
    """Validate plugin.json text without touching the filesystem."""
    report = ManifestValidationReport(manifest_path=location)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        report.error(f"Invalid JSON: {e}", location)
        return report

    if isinstance(data, dict):
        report.data = data

    manifest, problems = decode_manifest(data)
    for problem in problems:
        report.error(problem, location)
    report.manifest = manifest
    return report


def validate_manifest(manifest_path: Path) -> ManifestValidationReport:
    """Validate the plugin.json file at ``manifest_path``.

    Args:
        manifest_path: Path to plugin.json

    Returns:
        ManifestValidationReport with all results
    """
    location = str(manifest_path)
    report = ManifestValidationReport(manifest_path=location)

    if not manifest_path.exists():
        report.error("plugin.json does not exist", location)
        return report

    content = read_text_file(manifest_path, report)
    if content is None:
        return report

    return validate_manifest_content(content, location)


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Validate a plugin.json manifest")
    parser.add_argument("path", help="Path to plugin.json")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    args = parser.parse_args()

    report = validate_manifest(Path(args.path))

    if args.json:
        print(report.to_json())
    elif report.has_errors:
        print_section("Errors:", report.errors, "ERROR", sys.stderr)
    elif report.manifest is not None:
        print(report.describe_plugin())

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())

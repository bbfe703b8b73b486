#!/usr/bin/env python3
"""
Skill Pack Validation - Hook Validator

Validates the hook descriptor (hooks/hooks.json) and its companion entry
script (hooks/session-start.sh). The two checks are independent: a broken
descriptor never hides a missing script and vice versa. Only the JSON syntax
of the descriptor is checked, not its content.

Usage:
    uv run python scripts/validate_hook.py path/to/plugin/
    uv run python scripts/validate_hook.py path/to/plugin/ --json

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

from spv_validation_common import (
    HOOK_ENTRY_SCRIPT_PATH,
    HOOKS_JSON_PATH,
    ValidationReport,
    print_section,
    read_text_file,
)


@dataclass
class HookValidationReport(ValidationReport):
    """Hook validation report with hook-specific metadata."""

    hook_path: str = ""


def validate_json_structure(hook_path: Path, report: ValidationReport) -> None:
    """Validate hooks.json exists and is valid JSON."""
    if not hook_path.exists():
        report.error("hooks.json does not exist", hook_path)
        return

    content = read_text_file(hook_path, report)
    if content is None:
        return

    try:
        json.loads(content)
    except json.JSONDecodeError as e:
        report.error(f"Invalid JSON: {e.msg} at line {e.lineno}", hook_path)


def validate_entry_script(script_path: Path, report: ValidationReport) -> None:
    """Validate the hook entry script exists. Its content is not inspected."""
    if not script_path.exists():
        report.error(f"{script_path.name} does not exist", script_path)


def validate_hooks(hook_path: Path, script_path: Path) -> HookValidationReport:
    """Validate a hooks.json file and its entry script.

    Args:
        hook_path: Path to the hooks.json file
        script_path: Path to the entry script the hooks run

    Returns:
        HookValidationReport with all results
    """
    report = HookValidationReport(hook_path=str(hook_path))
    validate_json_structure(hook_path, report)
    validate_entry_script(script_path, report)
    return report


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Validate plugin hooks")
    parser.add_argument("plugin_root", help="Path to the plugin root directory")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    args = parser.parse_args()

    plugin_root = Path(args.plugin_root)
    report = validate_hooks(plugin_root / HOOKS_JSON_PATH, plugin_root / HOOK_ENTRY_SCRIPT_PATH)

    if args.json:
        print(report.to_json())
    elif report.has_errors:
        print_section("Errors:", report.errors, "ERROR", sys.stderr)
    else:
        print("Hooks are valid")

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())

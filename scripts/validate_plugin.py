#!/usr/bin/env python3
"""
Skill Pack Plugin Validator

Validates a skill pack plugin before it is installed: the plugin.json
manifest, the hooks, every skill under skills/, and the optional commands/.
Run after every change to ensure plugin integrity.

Usage:
    uv run python scripts/validate_plugin.py
    uv run python scripts/validate_plugin.py /path/to/plugin
    uv run python scripts/validate_plugin.py --json
    uv run python scripts/validate_plugin.py --prefix laravel:

The plugin root defaults to $CLAUDE_PLUGIN_ROOT, then to the parent of
scripts/.

Exit codes:
    0 - No errors (warnings are allowed)
    1 - Errors found
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path

from spv_validation_common import (
    COMMANDS_DIR_NAME,
    EXIT_ERROR,
    HOOK_ENTRY_SCRIPT_PATH,
    HOOKS_JSON_PATH,
    MANIFEST_PATH,
    SKILLS_DIR_NAME,
    ValidationReport,
    colorize,
    get_namespace_prefix,
    get_plugin_root,
    merge_reports,
    print_section,
    use_color,
)
from validate_command import CommandsValidationReport, validate_commands_directory
from validate_hook import HookValidationReport, validate_hooks
from validate_manifest import ManifestValidationReport, validate_manifest
from validate_skill import SkillsValidationReport, validate_skills_directory

BANNER_RULE = "=" * 43
SUCCESS_MESSAGE = "All validations passed!"


@dataclass
class PluginValidationRun:
    """Per-category reports of one run, in pipeline order."""

    plugin_root: Path
    manifest: ManifestValidationReport
    hooks: HookValidationReport
    skills: SkillsValidationReport
    commands: CommandsValidationReport

    @property
    def report(self) -> ValidationReport:
        """All results merged in pipeline order."""
        return merge_reports(self.manifest, self.hooks, self.skills, self.commands)


def run_validation(plugin_root: Path, prefix: str, verbose: bool = True) -> PluginValidationRun:
    """Run the manifest, hooks, skills and commands validators in that order.

    No category is skipped because another one failed. Progress lines and
    counts go to stdout unless ``verbose`` is False.

    Args:
        plugin_root: Plugin root directory
        prefix: Namespace prefix every skill name must start with
        verbose: Print progress lines

    Returns:
        PluginValidationRun holding each category's report
    """

    def progress(line: str) -> None:
        if verbose:
            print(line)

    progress("Validating plugin.json...")
    manifest_report = validate_manifest(plugin_root / MANIFEST_PATH)
    plugin_line = manifest_report.describe_plugin()
    if plugin_line is not None:
        progress(f"  {plugin_line}")

    progress("Validating hooks...")
    hooks_report = validate_hooks(plugin_root / HOOKS_JSON_PATH, plugin_root / HOOK_ENTRY_SCRIPT_PATH)

    progress("Validating skills...")
    skills_report = validate_skills_directory(plugin_root / SKILLS_DIR_NAME, prefix)
    if skills_report.scanned:
        progress(f"  Found {skills_report.processed} valid skills ({skills_report.valid_count} schema-valid)")

    progress("Validating commands...")
    commands_report = validate_commands_directory(plugin_root / COMMANDS_DIR_NAME)
    if commands_report.scanned:
        progress(f"  Found {commands_report.processed} valid commands ({commands_report.valid_count} schema-valid)")

    return PluginValidationRun(plugin_root, manifest_report, hooks_report, skills_report, commands_report)


# =============================================================================
# Output Functions
# =============================================================================


def print_results(report: ValidationReport, color: bool = False) -> None:
    """Print warnings to stdout, then errors to stderr or the success line."""
    if report.warnings:
        print_section("Warnings:", report.warnings, "WARNING", sys.stdout, color)

    if report.has_errors:
        print_section("Errors:", report.errors, "ERROR", sys.stderr, color and use_color(sys.stderr))
        return

    print(f"\n{colorize(SUCCESS_MESSAGE, 'PASSED', color)}")


def print_json(run: PluginValidationRun) -> None:
    """Print validation results as JSON."""
    report = run.report
    output = report.to_dict()
    output["plugin_root"] = str(run.plugin_root)
    output["plugin"] = run.manifest.to_dict().get("manifest")
    output["skills"] = {"processed": run.skills.processed, "valid": run.skills.valid_count}
    output["commands"] = {"processed": run.commands.processed, "valid": run.commands.valid_count}
    print(json.dumps(output, indent=2))


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Validate a skill pack plugin")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--prefix", help="Required skill name prefix (default: $SPV_NAMESPACE_PREFIX or laravel:)")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("path", nargs="?", help="Plugin root path (default: $CLAUDE_PLUGIN_ROOT or parent of scripts/)")
    args = parser.parse_args()

    plugin_root = Path(args.path) if args.path else get_plugin_root()

    if not plugin_root.is_dir():
        print(f"Error: {plugin_root} is not a directory", file=sys.stderr)
        return EXIT_ERROR

    prefix = args.prefix or get_namespace_prefix()

    if args.json:
        run = run_validation(plugin_root, prefix, verbose=False)
        print_json(run)
        return run.report.exit_code

    color = use_color(sys.stdout, args.no_color)
    print(f"\n{BANNER_RULE}")
    print(colorize(f"Validating {plugin_root.resolve().name} plugin", "BOLD", color))
    print(f"{BANNER_RULE}\n")

    run = run_validation(plugin_root, prefix)
    report = run.report
    print_results(report, color)
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())

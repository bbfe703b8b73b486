#!/usr/bin/env python3
"""
Skill Pack Validation - Frontmatter Parser

Extracts the ``---`` delimited ``key: value`` header that opens skill and
command documents.

The parser is deliberately line based: every interior line is split on its
first colon, so ``name: laravel:tdd`` yields the value ``laravel:tdd``. The
host assistant reads the same block as YAML, so ``check_yaml_compatibility``
is provided to flag headers that only the line parser accepts.
"""

from __future__ import annotations

import yaml

FRONTMATTER_DELIMITER = "---"

_BOM = "\ufeff"


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONTMATTER_DELIMITER


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def split_frontmatter(content: str) -> tuple[list[str], str] | None:
    """Split a document into its header lines and body.

    Returns:
        Tuple of (interior_lines, body), or None when the document does not
        open with a delimiter line or the block is never closed.
    """
    lines = [line.removesuffix("\r") for line in content.removeprefix(_BOM).split("\n")]
    if not _is_delimiter(lines[0]):
        return None

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            return lines[1:index], "\n".join(lines[index + 1 :])

    return None


def parse_frontmatter(content: str) -> dict[str, str] | None:
    """Parse the ``key: value`` header of a document.

    Lines without a colon (or with nothing before it) are skipped. When a key
    repeats, the later value wins. A value wrapped in one pair of matching
    quotes is unquoted.

    Returns:
        Ordered mapping of keys to values, or None if there is no complete
        frontmatter block. A block with no keys yields an empty dict.
    """
    split = split_frontmatter(content)
    if split is None:
        return None

    frontmatter: dict[str, str] = {}
    for line in split[0]:
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        frontmatter[key] = _unquote(value.strip())
    return frontmatter


def check_yaml_compatibility(lines: list[str]) -> str | None:
    """Check that header lines also load as YAML.

    Returns:
        The YAML error message, or None if the block loads. Values YAML
        scans but cannot build (an impossible date, a bad explicit tag) are
        reported the same way.
    """
    try:
        yaml.safe_load("\n".join(lines))
    except (yaml.YAMLError, ValueError, TypeError) as e:
        return " ".join(str(e).split())
    return None

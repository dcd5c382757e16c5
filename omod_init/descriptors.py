"""Locate mapping descriptors and render them into property values."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from omod_init.constants import (
    DEFAULT_DESCRIPTOR_PATTERN,
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_EXCLUDED_FILES,
    DESCRIPTOR_LINE_TERMINATOR,
    TEMPLATE_SAMPLE_FILENAME,
)
from omod_init.errors import InvalidFormatTemplateError, InvalidPatternError
from omod_init.models import FilePatternGroup

logger = logging.getLogger("omod_init.descriptors")


def default_group(directory: str) -> FilePatternGroup:
    return FilePatternGroup(directory=directory, includes=(DEFAULT_DESCRIPTOR_PATTERN,))


def group_root(group: FilePatternGroup, basedir: Optional[Path] = None) -> Path:
    root = Path(group.directory)
    if not root.is_absolute() and basedir is not None:
        root = basedir / root
    return root


def _normalize_pattern(pattern: str) -> str:
    normalized = pattern.strip().replace("\\", "/").lstrip("/")
    if normalized.endswith("/"):
        normalized += "**"
    # A trailing "**" selects everything below it, not just directories.
    if normalized == "**" or normalized.endswith("/**"):
        normalized += "/*"
    return normalized


def expand_pattern(root: Path, pattern: str) -> Iterator[str]:
    normalized = _normalize_pattern(pattern)
    if not normalized:
        return
    if ".." in normalized.split("/"):
        raise InvalidPatternError(pattern, "must stay inside the group directory")
    try:
        matches = list(root.glob(normalized))
    except (NotImplementedError, ValueError) as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc
    for match in matches:
        if match.is_file():
            yield match.relative_to(root).as_posix()


def is_default_excluded(relative: str) -> bool:
    parts = relative.split("/")
    if parts[-1] in DEFAULT_EXCLUDED_FILES:
        return True
    return any(part in DEFAULT_EXCLUDED_DIRS for part in parts[:-1])


def scan_group(group: FilePatternGroup, basedir: Optional[Path] = None) -> list[str]:
    root = group_root(group, basedir)
    if not root.is_dir():
        logger.debug("pattern group directory %s not found, skipping", root)
        return []

    included: set[str] = set()
    for pattern in group.includes:
        included.update(expand_pattern(root, pattern))

    excluded: set[str] = set()
    for pattern in group.excludes:
        excluded.update(expand_pattern(root, pattern))

    result = [
        name
        for name in included
        if name not in excluded
        and not (group.use_default_excludes and is_default_excluded(name))
    ]
    logger.debug("pattern group %s matched %d file(s)", root, len(result))
    return sorted(result)


def collect_descriptors(
    groups: Iterable[FilePatternGroup], basedir: Optional[Path] = None
) -> set[str]:
    pending = list(groups)
    filenames: set[str] = set()
    while pending:
        group = pending.pop(0)
        filenames.update(scan_group(group, basedir))
    return filenames


def format_line(template: str, filename: str) -> str:
    try:
        return template.format(filename, filename=filename)
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
        raise InvalidFormatTemplateError(template, str(exc) or type(exc).__name__) from exc


def validate_template(template: str) -> None:
    format_line(template, TEMPLATE_SAMPLE_FILENAME)


def render_lines(template: str, filenames: Iterable[str]) -> str:
    return "".join(
        format_line(template, filename) + DESCRIPTOR_LINE_TERMINATOR
        for filename in filenames
    )

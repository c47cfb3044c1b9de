"""Read the YAML frontmatter Cursor uses for rule and command files."""

from __future__ import annotations

import re
from pathlib import Path

import yaml

from cursor_rules.errors import InvalidFrontmatterError, TemplateScanError
from cursor_rules.models import TemplateMetadata

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)", re.DOTALL)
_HEADING_RE = re.compile(r"^#{1,6}\s+(.+?)\s*#*\s*$", re.MULTILINE)


def split_frontmatter(text: str) -> tuple[dict, str]:
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return {}, text
    raw = yaml.safe_load(match.group(1)) or {}
    if not isinstance(raw, dict):
        raise ValueError("frontmatter must be a mapping")
    return raw, text[match.end() :]


def read_metadata(path: Path) -> TemplateMetadata:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateScanError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise InvalidFrontmatterError(path, f"not UTF-8 text ({exc.reason})") from exc
    try:
        raw, body = split_frontmatter(text)
    except (yaml.YAMLError, ValueError) as exc:
        lines = str(exc).strip().splitlines()
        detail = lines[0] if lines else type(exc).__name__
        raise InvalidFrontmatterError(path, detail) from exc

    description = raw.get("description") or ""
    if not description:
        heading = _HEADING_RE.search(body)
        if heading:
            description = heading.group(1)

    globs = raw.get("globs") or []
    if isinstance(globs, str):
        globs = [item.strip() for item in globs.split(",") if item.strip()]
    elif not isinstance(globs, list):
        globs = []

    return TemplateMetadata(
        description=str(description).strip(),
        globs=[str(item) for item in globs],
        always_apply=bool(raw.get("alwaysApply", False)),
    )

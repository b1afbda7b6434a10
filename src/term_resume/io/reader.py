"""Load resume content from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from term_resume.core.content import ContentBuilder, ContentCollection
from term_resume.core.styled import bold, cyan

logger = logging.getLogger(__name__)

HEADER_KEYS = ("name", "title", "email", "web")


class ContentError(ValueError):
    """The resume document is malformed."""


def load(path: str | Path) -> ContentCollection:
    """
    Load a resume from a JSON file on disk.

    Expected layout::

        {
          "header": {"name": "...", "title": "...", "email": "...", "web": "..."},
          "entries": [
            {"year": 2020, "title": "...", "place": "...", "lines": ["..."]}
          ]
        }
    """
    path = Path(path)
    logger.debug("loading resume from %s", path)
    with open(path, encoding="utf-8") as f:
        text = f.read()
    try:
        return loads(text)
    except ContentError as e:
        raise ContentError(f"{path}: {e}") from None


def loads(text: str) -> ContentCollection:
    """Parse a resume from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ContentError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ContentError("top level must be an object")

    builder = ContentBuilder()
    builder.header(**_header(data.get("header", {})))

    entries = data.get("entries", [])
    if not isinstance(entries, list):
        raise ContentError("'entries' must be a list")

    for index, entry in enumerate(entries):
        _add_entry(builder, entry, index)

    content = builder.build()
    logger.debug("loaded %d lines", len(content))
    return content


def _header(raw: Any) -> dict[str, str]:
    if not isinstance(raw, dict):
        raise ContentError("'header' must be an object")
    unknown = set(raw) - set(HEADER_KEYS)
    if unknown:
        raise ContentError(f"unknown header fields: {', '.join(sorted(unknown))}")
    return {key: str(raw.get(key, "")) for key in HEADER_KEYS}


def _add_entry(builder: ContentBuilder, entry: Any, index: int) -> None:
    if not isinstance(entry, dict):
        raise ContentError(f"entry {index} must be an object")

    year = entry.get("year")
    if not isinstance(year, int) or isinstance(year, bool):
        raise ContentError(f"entry {index}: 'year' must be an integer")

    lines = entry.get("lines", [])
    if not isinstance(lines, list) or not all(isinstance(s, str) for s in lines):
        raise ContentError(f"entry {index}: 'lines' must be a list of strings")

    builder.band(year)
    title = entry.get("title")
    if title:
        place = entry.get("place")
        if place:
            builder.line(bold(str(title)), " at ", cyan(str(place)))
        else:
            builder.line(bold(str(title)))
    for line in lines:
        builder.line(line)
    builder.separator()

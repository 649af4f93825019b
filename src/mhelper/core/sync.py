"""Shared read-merge-write helpers for tool config files.

Each adapter owns a small region of a document that belongs to another tool:
a few entries of a top-level map, the array elements carrying a marker, or a
set of text sections. The helpers here touch only that region and leave the
rest of the document as they found it.

There is no locking. Two processes writing the same file race and the last
write wins.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Union

import json5

logger = logging.getLogger(__name__)


def load_json(path: Path) -> dict | None:
    """Read a JSON object, returning None if absent, unreadable or malformed.

    Editor settings files are often JSONC, so comments and trailing commas are
    accepted. They are not preserved when the document is written back.
    """
    if not path.is_file():
        return None
    try:
        data = json5.loads(path.read_text(encoding="utf-8"))
    except (ValueError, OSError) as e:
        logger.debug("Ignoring unreadable JSON document %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.debug("Ignoring non-object JSON document %s", path)
        return None
    return data


def write_json(path: Path, doc: dict) -> None:
    path.write_text(json.dumps(doc, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.debug("Wrote %s", path)


@dataclass(frozen=True)
class MapSlot:
    """Named entries inside the top-level map ``doc[key]``."""

    key: str
    owned: tuple[str, ...]

    def merge(self, doc: dict, entries: Mapping[str, Any]) -> None:
        current = doc.get(self.key)
        if not isinstance(current, dict):
            current = {}
        current.update(entries)
        doc[self.key] = current

    def remove(self, doc: dict) -> bool:
        current = doc.get(self.key)
        if not isinstance(current, dict):
            return False
        touched = False
        for name in self.owned:
            if name in current:
                del current[name]
                touched = True
        if touched and not current:
            del doc[self.key]
        return touched

    def present(self, doc: dict) -> bool:
        current = doc.get(self.key)
        return isinstance(current, dict) and any(name in current for name in self.owned)


@dataclass(frozen=True)
class ArraySlot:
    """Elements of the top-level list ``doc[key]`` whose ``field`` contains ``marker``."""

    key: str
    field: str
    marker: str

    def matches(self, item: Any) -> bool:
        if not isinstance(item, dict):
            return False
        value = item.get(self.field)
        return isinstance(value, str) and self.marker in value

    def merge(self, doc: dict, items: Iterable[Any]) -> None:
        current = doc.get(self.key)
        kept = [i for i in current if not self.matches(i)] if isinstance(current, list) else []
        doc[self.key] = kept + list(items)

    def remove(self, doc: dict) -> bool:
        current = doc.get(self.key)
        if not isinstance(current, list):
            return False
        kept = [i for i in current if not self.matches(i)]
        if len(kept) == len(current):
            return False
        if kept:
            doc[self.key] = kept
        else:
            del doc[self.key]
        return True

    def present(self, doc: dict) -> bool:
        current = doc.get(self.key)
        return isinstance(current, list) and any(self.matches(i) for i in current)


Slot = Union[MapSlot, ArraySlot]


def sync_document(
    path: Path,
    slots: Iterable[Slot],
    contribution: Mapping[str, Any],
    defaults: Mapping[str, Any] | None = None,
) -> dict:
    """Merge ``contribution`` into the owned slots of the JSON document at ``path``.

    ``contribution`` maps each slot key to the entries (MapSlot) or elements
    (ArraySlot) to write. Top-level ``defaults`` are only set when absent.
    A missing or malformed document is replaced by an empty one, which drops
    whatever the malformed file held.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    doc = load_json(path)
    if doc is None:
        doc = {}
    for key, value in (defaults or {}).items():
        doc.setdefault(key, value)
    for slot in slots:
        slot.merge(doc, contribution[slot.key])
    write_json(path, doc)
    return doc


def unsync_document(
    path: Path,
    slots: Iterable[Slot],
    defaults: Mapping[str, Any] | None = None,
) -> bool:
    """Remove the owned slots from the JSON document at ``path``.

    When the removal leaves nothing but unchanged ``defaults``, those go too.
    Returns False without writing when the document is absent or malformed.
    """
    doc = load_json(path)
    if doc is None:
        return False
    touched = [slot.remove(doc) for slot in slots]
    if any(touched) and defaults and doc == dict(defaults):
        doc = {}
    write_json(path, doc)
    return True


# -- Text sections --


def _header_pattern(header: str) -> str:
    return rf"^[ \t]*{re.escape(header)}[ \t\r]*$"


def _section_pattern(header: str) -> re.Pattern[str]:
    return re.compile(_header_pattern(header) + r".*?(?=^[ \t]*\[|\Z)", re.MULTILINE | re.DOTALL)


def has_section(text: str, header: str) -> bool:
    """True when a line holds ``header``, ignoring surrounding blanks."""
    return re.search(_header_pattern(header), text, re.MULTILINE) is not None


def read_text(path: Path) -> str | None:
    """Read a text document, returning None if absent or unreadable."""
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Ignoring unreadable text document %s: %s", path, e)
        return None


def strip_sections(text: str, headers: Iterable[str]) -> str:
    """Drop each ``[header]`` section up to the next header line or end of text."""
    for header in headers:
        text = _section_pattern(header).sub("", text)
    text = text.rstrip()
    return text + "\n" if text else ""


def sync_text(path: Path, header: str, block: str) -> bool:
    """Append ``block`` unless a line equal to ``header`` already exists.

    Returns True when the block was appended. An existing section is left
    untouched even if its body differs from ``block``. An unreadable file is
    replaced by the block alone, which drops whatever it held.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    existing = read_text(path) or ""
    if has_section(existing, header):
        return False
    if existing.strip():
        existing = existing.rstrip() + "\n\n"
    else:
        existing = ""
    path.write_text(existing + block.strip() + "\n", encoding="utf-8")
    logger.debug("Appended %s to %s", header, path)
    return True


def unsync_text(path: Path, headers: Iterable[str]) -> bool:
    """Remove the owned sections from the text file at ``path``."""
    headers = tuple(headers)
    text = read_text(path)
    if text is None:
        return False
    path.write_text(strip_sections(text, headers), encoding="utf-8")
    logger.debug("Removed %s from %s", ", ".join(headers), path)
    return True

"""Word-by-word English → Urdu dictionary translation.

The text is split into alternating word / whitespace segments so that every
whitespace run survives verbatim.  Each word is looked up by its lower-cased,
letters-only form.  On a hit the *whole* segment is replaced, punctuation
included, so ``"blog,"`` becomes ``"بلاگ"`` and the comma is gone.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

_SEGMENT_RE = re.compile(r"(\s+)")
_NON_ALPHA_RE = re.compile(r"[^a-zA-Z]")
_KEY_RE = re.compile(r"[a-z]+")

_URDU_ENTRIES: dict[str, str] = {
    "blog": "بلاگ",
    "post": "پوسٹ",
    "summary": "خلاصہ",
    "this": "یہ",
    "is": "ہے",
    "a": "ایک",
    "of": "کا",
    "the": "دی",
    "and": "اور",
    "article": "مضمون",
    "content": "مواد",
    "main": "مرکزی",
    "text": "متن",
    "about": "کے بارے میں",
    "for": "کے لئے",
    "in": "میں",
    "to": "کو",
    "with": "کے ساتھ",
    "on": "پر",
    "by": "کی طرف سے",
    "you": "آپ",
    "it": "یہ",
    "are": "ہیں",
    "we": "ہم",
}


# ---------------------------------------------------------------------------
# Table construction
# ---------------------------------------------------------------------------

def build_table(entries: Mapping[str, str]) -> Mapping[str, str]:
    """Validate *entries* and return them as a read-only mapping.

    Keys must be non-empty, lowercase and purely ASCII-alphabetic, since
    that is the only shape a lookup key can take.

    Raises:
        ValueError: On a malformed key or a non-string value.
    """
    table: dict[str, str] = {}
    for key, value in entries.items():
        if not isinstance(key, str) or not _KEY_RE.fullmatch(key):
            raise ValueError(f"Invalid translation key: {key!r}")
        if not isinstance(value, str):
            raise ValueError(f"Translation for {key!r} must be a string")
        table[key] = value
    return MappingProxyType(table)


URDU_TABLE: Mapping[str, str] = build_table(_URDU_ENTRIES)


def load_table(path: Path | None = None) -> Mapping[str, str]:
    """Return the built-in Urdu table, overlaid with a JSON file if given.

    The file must hold a single JSON object of ``{"word": "translation"}``
    pairs.  Entries in the file win over built-in ones.
    """
    if path is None:
        return URDU_TABLE

    extra = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(extra, dict):
        raise ValueError(f"{path} must contain a JSON object")

    table = build_table({**_URDU_ENTRIES, **extra})
    logger.info("Loaded %d translation entries from %s", len(extra), path)
    return table


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------

def lookup_key(segment: str) -> str:
    """Return the dictionary key for *segment* (may be empty)."""
    return _NON_ALPHA_RE.sub("", segment.lower())


def translate(text: str, table: Mapping[str, str] = URDU_TABLE) -> str:
    """Replace every word of *text* found in *table*, keeping all whitespace."""
    out: list[str] = []
    for segment in _SEGMENT_RE.split(text):
        key = lookup_key(segment)
        # Empty keys (whitespace, digits, bare punctuation) never match.
        if key and key in table:
            out.append(table[key])
        else:
            out.append(segment)
    return "".join(out)

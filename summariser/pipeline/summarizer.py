"""Extractive summarizer.

Sentences are found purely syntactically: a run of non-terminal characters
followed by one or more of ``.``, ``!`` or ``?``.  Abbreviations ("e.g."),
decimals ("3.5") and quoted punctuation split sentences too.
"""

from __future__ import annotations

import re

DEFAULT_MAX_SENTENCES = 3

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")


def split_sentences(text: str) -> list[str]:
    """Return the sentence spans of *text* in document order, each trimmed.

    Trailing text without terminal punctuation is not a sentence and is
    dropped.
    """
    return [match.group(0).strip() for match in _SENTENCE_RE.finditer(text)]


def summarize(text: str, max_sentences: int = DEFAULT_MAX_SENTENCES) -> str:
    """Return the first *max_sentences* sentences of *text* joined by a space.

    Returns an empty string when *text* has no sentence boundary at all;
    whether that is acceptable is up to the caller.
    """
    if max_sentences < 0:
        raise ValueError(f"max_sentences must be >= 0, got {max_sentences}")
    return " ".join(split_sentences(text)[:max_sentences]).strip()

"""Shared text utilities for the link scout engine."""

from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup  # type: ignore

# Anchors only match as whole words: no word character may touch either end.
WORD_BOUNDARY = r"(?<![A-Za-z0-9_]){term}(?![A-Za-z0-9_])"

# Elements whose text never counts as page copy
NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]

_TOPIC_SPLIT_RE = re.compile(r"[^a-z0-9]+")
_WHITESPACE_RE = re.compile(r"\s+")


def clamp(value: float, minimum: float = 0.0, maximum: float = 1.0) -> float:
    return max(min(value, maximum), minimum)


def collapse_whitespace(value: str) -> str:
    """Collapse runs of whitespace to single spaces and trim the result."""

    return _WHITESPACE_RE.sub(" ", value).strip()


def whole_word_pattern(anchor: str) -> re.Pattern[str]:
    """Compile a case-insensitive matcher that never splits a longer word."""

    return re.compile(WORD_BOUNDARY.format(term=re.escape(anchor)), flags=re.IGNORECASE)


def extract_snippet(content: str, start: int, end: int, padding: int = 80) -> str:
    """Return the match plus up to ``padding`` characters on each side."""

    left = max(0, start - padding)
    right = min(len(content), end + padding)
    return collapse_whitespace(content[left:right])


def topic_tokens(value: str) -> List[str]:
    """Return lower-cased alphanumeric tokens longer than two characters."""

    return [token for token in _TOPIC_SPLIT_RE.split(value.lower()) if len(token) > 2]


def html_to_text(html: str) -> str:
    """Extract readable text from ``html`` with whitespace collapsed."""

    if not html:
        return ''

    try:
        soup = BeautifulSoup(html, 'lxml')
    except Exception:
        # Fallback to html.parser if lxml isn't installed
        soup = BeautifulSoup(html, 'html.parser')

    for element in soup.find_all(NON_CONTENT_TAGS):
        element.decompose()

    return collapse_whitespace(soup.get_text(' '))

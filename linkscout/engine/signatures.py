"""Deterministic keys that identify a (source, target, anchor) suggestion.

A signature is embedded verbatim in the description of every LINK task the
miner creates, so later runs can recover which suggestions already exist
even for tasks that predate the ``LinkSuggestion`` table.
"""

from __future__ import annotations

import re
from typing import Iterable, Set

SIGNATURE_PREFIX = "[link-scout:"

_TOKEN_RE = re.compile(r"\[link-scout:([^\]]+)\]")


def build_signature(blog_id: object, target_page_id: object, anchor: str) -> str:
    return f"{blog_id}:{target_page_id}:{anchor.lower()}"


def signature_token(signature: str) -> str:
    return f"{SIGNATURE_PREFIX}{signature}]"


def extract_signatures(text: str | None) -> Set[str]:
    """Return every signature embedded in ``text``."""

    if not text:
        return set()
    return set(_TOKEN_RE.findall(text))


def collect_signatures(texts: Iterable[str | None]) -> Set[str]:
    signatures: Set[str] = set()
    for text in texts:
        signatures.update(extract_signatures(text))
    return signatures

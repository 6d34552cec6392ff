"""Anchor match discovery inside blog page text."""

from __future__ import annotations

from typing import List, Optional

from .confidence import compute_confidence
from .config import EngineConfig, load_config
from .text import extract_snippet, whole_word_pattern
from .types import MatchResult, MoneyTarget


def find_matches_for_target(
    content: str,
    target: MoneyTarget,
    config: EngineConfig | None = None,
) -> List[MatchResult]:
    """Return every whole-word anchor hit for ``target``, best confidence first.

    Each occurrence of each anchor yields one result. Ties keep discovery
    order: anchors in the order the target lists them, occurrences left to
    right.
    """

    engine_config = config or load_config(None)
    padding = int(engine_config.get("snippet_padding", 80))

    results: List[MatchResult] = []
    for anchor in target.anchors:
        if not anchor:
            continue
        pattern = whole_word_pattern(anchor)
        for match in pattern.finditer(content):
            snippet = extract_snippet(content, match.start(), match.end(), padding)
            confidence = compute_confidence(anchor, snippet, target.target_title, engine_config)
            results.append(MatchResult(anchor=anchor, snippet=snippet, confidence=confidence, target=target))

    results.sort(key=lambda result: result.confidence, reverse=True)
    return results


def best_match(
    content: str,
    target: MoneyTarget,
    config: EngineConfig | None = None,
) -> Optional[MatchResult]:
    """Return the highest-confidence match for ``target`` or ``None``."""

    matches = find_matches_for_target(content, target, config)
    return matches[0] if matches else None

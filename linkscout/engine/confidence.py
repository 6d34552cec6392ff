"""Confidence heuristic for anchor matches."""

from __future__ import annotations

from ..choices import TaskPriority
from .config import EngineConfig, load_config
from .text import clamp, topic_tokens

_DEFAULT_CONFIG = load_config(None)


def topical_factor(snippet_tokens: list[str], target_title: str, default: float = 0.3) -> float:
    """Share of snippet tokens that also occur in the target title."""

    title_tokens = set(topic_tokens(target_title))
    if not title_tokens:
        return default
    if not snippet_tokens:
        return 0.0
    hits = sum(1 for token in snippet_tokens if token in title_tokens)
    return hits / len(snippet_tokens)


def compute_confidence(
    anchor: str,
    snippet: str,
    target_title: str,
    config: EngineConfig | None = None,
) -> float:
    """Return a [0, 1] confidence that ``anchor`` in ``snippet`` suits the target.

    Longer anchors, richer surrounding context and snippets that talk about
    the same topic as the target title all raise the value.
    """

    engine_config = config or _DEFAULT_CONFIG
    settings = engine_config.section("confidence")

    snippet_tokens = topic_tokens(snippet)
    anchor_factor = clamp(len(anchor) / (settings.get("anchor_length_norm") or 30))
    snippet_factor = clamp(len(snippet_tokens) / (settings.get("snippet_token_norm") or 60))
    topic = topical_factor(snippet_tokens, target_title, settings.get("topical_default", 0.3))

    return clamp(
        engine_config.confidence_weight("base")
        + engine_config.confidence_weight("anchor") * anchor_factor
        + engine_config.confidence_weight("snippet") * snippet_factor
        + engine_config.confidence_weight("topical") * topic
    )


def pick_priority(confidence: float, config: EngineConfig | None = None) -> TaskPriority:
    """Map a confidence value onto a task priority."""

    thresholds = (config or _DEFAULT_CONFIG).section("priority_thresholds")
    if confidence >= thresholds.get("HIGH", 0.75):
        return TaskPriority.HIGH
    if confidence >= thresholds.get("MEDIUM", 0.55):
        return TaskPriority.MEDIUM
    return TaskPriority.LOW

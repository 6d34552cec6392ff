"""Typed data structures used by the link scout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..choices import TaskPriority, TaskType


@dataclass(frozen=True)
class MoneyTarget:
    """Keyword mapped to the conversion page it should send links to."""

    keyword_id: str
    target_page_id: str
    target_url: str
    target_title: str
    anchors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class BlogPage:
    """Content page that can host outbound internal links."""

    page_id: str
    url: str
    title: Optional[str]
    content_text: str
    page_type: str

    @property
    def label(self) -> str:
        return self.title or self.url


@dataclass(frozen=True)
class MatchResult:
    """Single whole-word hit of an anchor inside a blog page."""

    anchor: str
    snippet: str
    confidence: float
    target: MoneyTarget


@dataclass(frozen=True)
class SuggestionCandidate:
    """Match accepted for a blog page, ready to be persisted."""

    blog: BlogPage
    match: MatchResult
    signature: str

    @property
    def anchor(self) -> str:
        return self.match.anchor

    @property
    def target(self) -> MoneyTarget:
        return self.match.target

    @property
    def confidence(self) -> float:
        return self.match.confidence


@dataclass(frozen=True)
class OpportunityInput:
    """Fields of a work item that feed the opportunity score."""

    score_current: float
    score_potential: float
    priority: Optional[Union[TaskPriority, str]] = None
    type: Optional[Union[TaskType, str]] = None
    average_position: Optional[float] = None
    conversion_rate: Optional[float] = None
    intent_score: Optional[float] = None
    traffic_gap: Optional[float] = None
    effort_override: Optional[float] = None

"""Service functions for mining link suggestions and ranking tasks.

These functions sit between the ORM and the pure :mod:`linkscout.engine`
package: they load a project's keywords, pages and prior suggestions as
engine records, persist the suggestions the engine accepts as LINK tasks,
sweep all active projects, and score tasks for the board.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils.text import Truncator

from .choices import ProjectStatus, TaskStatus, TaskType
from .engine.confidence import pick_priority
from .engine.config import EngineConfig, load_config
from .engine.miner import plan_suggestions
from .engine.opportunity import calculate_opportunity_score
from .engine.signatures import SIGNATURE_PREFIX, collect_signatures, signature_token
from .engine.types import BlogPage, MoneyTarget, OpportunityInput, SuggestionCandidate
from .models import Keyword, LinkSuggestion, Page, Project, Task

logger = logging.getLogger(__name__)

# Anchors longer than the signature column cannot be stored
MAX_ANCHOR_LENGTH: int = LinkSuggestion._meta.get_field('anchor_key').max_length
MAX_TITLE_LENGTH: int = Task._meta.get_field('title').max_length

# Columns shown on the task board; tasks in any other status land in the first one
BOARD_COLUMNS: List[str] = [
    TaskStatus.OPEN,
    TaskStatus.IN_PROGRESS,
    TaskStatus.REVIEW,
    TaskStatus.DONE,
]


@dataclass(frozen=True)
class CreatedSuggestion:
    """Summary of a LINK task created by the miner."""

    task_id: int
    anchor: str
    target_url: str
    source_url: str
    confidence: float

    def as_dict(self) -> Dict[str, object]:
        return {
            'task_id': self.task_id,
            'anchor': self.anchor,
            'target_url': self.target_url,
            'source_url': self.source_url,
            'confidence': self.confidence,
        }


@dataclass(frozen=True)
class SweepResult:
    """Outcome of mining a single project during a sweep."""

    project_id: int
    created: int
    error: Optional[str] = None


@dataclass(frozen=True)
class ScoredTask:
    """A task paired with its opportunity score."""

    task: Task
    opportunity_score: float


def get_engine_config() -> EngineConfig:
    """Load the engine configuration named by ``LINKSCOUT_ENGINE_CONFIG``."""

    return load_config(getattr(settings, 'LINKSCOUT_ENGINE_CONFIG', None))


def _anchor_candidates(phrase: str, secondary_terms: Iterable[object] | None) -> List[str]:
    """Trim, drop empties and de-duplicate the phrase plus its secondary terms.

    Terms that do not fit the ``LinkSuggestion`` anchor columns are skipped.
    """

    anchors: List[str] = []
    seen: Set[str] = set()
    for raw in [phrase, *(secondary_terms or [])]:
        if not isinstance(raw, str):
            continue
        anchor = raw.strip()
        key = anchor.lower()
        if not anchor or max(len(anchor), len(key)) > MAX_ANCHOR_LENGTH or key in seen:
            continue
        seen.add(key)
        anchors.append(anchor)
    return anchors


def fetch_money_targets(project_id: int) -> List[MoneyTarget]:
    """Return money targets for keywords mapped to a page with a URL."""

    keywords = (
        Keyword.objects
        .filter(project_id=project_id, target_page__isnull=False)
        .select_related('target_page')
        .order_by('pk')
    )

    targets: List[MoneyTarget] = []
    for keyword in keywords:
        page = keyword.target_page
        if page is None or not page.url:
            continue
        targets.append(
            MoneyTarget(
                keyword_id=str(keyword.pk),
                target_page_id=str(page.pk),
                target_url=page.url,
                target_title=page.title or page.url,
                anchors=_anchor_candidates(keyword.phrase, keyword.secondary_terms),
            )
        )
    return targets


def fetch_blog_pages(project_id: int, config: EngineConfig | None = None) -> List[BlogPage]:
    """Return blog-type pages of the project that have extracted text."""

    engine_config = config or get_engine_config()
    blog_types = set(engine_config.blog_page_types)

    pages = (
        Page.objects
        .filter(project_id=project_id, content__isnull=False)
        .select_related('content')
        .order_by('pk')
    )

    blog_pages: List[BlogPage] = []
    for page in pages:
        if (page.page_type or '').lower() not in blog_types:
            continue
        text = page.content.content_text
        if not text:
            continue
        blog_pages.append(
            BlogPage(
                page_id=str(page.pk),
                url=page.url,
                title=page.title,
                content_text=text,
                page_type=page.page_type,
            )
        )
    return blog_pages


def collect_existing_signatures(project_id: int) -> Set[str]:
    """Return the signatures of every suggestion already made for the project.

    Signatures embedded in LINK task descriptions are merged with the rows of
    the ``LinkSuggestion`` table.
    """

    descriptions = (
        Task.objects
        .filter(project_id=project_id, type=TaskType.LINK, description__contains=SIGNATURE_PREFIX)
        .values_list('description', flat=True)
    )
    signatures = collect_signatures(descriptions)

    for suggestion in LinkSuggestion.objects.filter(project_id=project_id).only(
        'source_page_id', 'target_page_id', 'anchor_key'
    ):
        signatures.add(suggestion.signature)
    return signatures


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_task_fields(candidate: SuggestionCandidate, config: EngineConfig | None = None) -> Dict[str, object]:
    """Return the title, description and scores of the task for ``candidate``."""

    blog = candidate.blog
    target = candidate.target
    description_lines = [
        f'Anchor suggestion: "{candidate.anchor}"',
        f'Source: {blog.label}',
        f'Target: {target.target_title} ({target.target_url})',
        f'Confidence: {_round_half_up(candidate.confidence * 100)}%',
        f'Context: {candidate.match.snippet}',
        signature_token(candidate.signature),
    ]
    return {
        'title': Truncator(f'Link {blog.label} to {target.target_title}').chars(MAX_TITLE_LENGTH),
        'description': '\n'.join(description_lines),
        'status': TaskStatus.OPEN,
        'priority': pick_priority(candidate.confidence, config),
        'type': TaskType.LINK,
        'score_current': 0,
        'score_potential': _round_half_up(candidate.confidence * 100),
    }


def _persist_suggestion(
    project_id: int,
    candidate: SuggestionCandidate,
    config: EngineConfig | None,
) -> Optional[Task]:
    """Create the task and its signature row, or return ``None`` if it already exists."""

    try:
        with transaction.atomic():
            task = Task.objects.create(project_id=project_id, **build_task_fields(candidate, config))
            LinkSuggestion.objects.create(
                project_id=project_id,
                task=task,
                source_page_id=int(candidate.blog.page_id),
                target_page_id=int(candidate.target.target_page_id),
                anchor=candidate.anchor,
                anchor_key=candidate.anchor.lower(),
                confidence=candidate.confidence,
            )
    except IntegrityError:
        logger.info(
            'Skipping link suggestion %s for project %s: created concurrently.',
            candidate.signature,
            project_id,
        )
        return None
    return task


def generate_link_suggestions(
    project_id: int,
    *,
    max_per_blog: Optional[int] = None,
    max_per_project: Optional[int] = None,
    config: EngineConfig | None = None,
) -> List[CreatedSuggestion]:
    """Mine a project's blog pages for money-keyword mentions and create LINK tasks.

    Parameters
    ----------
    project_id:
        Primary key of the project to mine.
    max_per_blog:
        Maximum suggestions per source page in this run (default 3).
    max_per_project:
        Maximum suggestions for the whole run (default 40).
    config:
        Engine configuration; loaded from settings when omitted.

    Returns
    -------
    list of CreatedSuggestion
        One entry per task created, in discovery order. Suggestions that
        already exist are never created twice, so repeated runs against
        unchanged data return an empty list.
    """

    engine_config = config or get_engine_config()

    money_targets = fetch_money_targets(project_id)
    blog_pages = fetch_blog_pages(project_id, engine_config)
    if not money_targets or not blog_pages:
        logger.debug('Project %s has no money targets or blog pages to scan.', project_id)
        return []

    existing = collect_existing_signatures(project_id)
    candidates = plan_suggestions(
        blog_pages,
        money_targets,
        existing,
        max_per_blog=max_per_blog,
        max_per_project=max_per_project,
        config=engine_config,
    )

    created: List[CreatedSuggestion] = []
    for candidate in candidates:
        task = _persist_suggestion(project_id, candidate, engine_config)
        if task is None:
            continue
        created.append(
            CreatedSuggestion(
                task_id=task.pk,
                anchor=candidate.anchor,
                target_url=candidate.target.target_url,
                source_url=candidate.blog.url,
                confidence=candidate.confidence,
            )
        )

    logger.info(
        'Project %s: scanned %d blog pages against %d money targets, created %d link suggestions.',
        project_id,
        len(blog_pages),
        len(money_targets),
        len(created),
    )
    return created


def run_link_scout_sweep(
    *,
    max_per_project: Optional[int] = None,
    config: EngineConfig | None = None,
) -> List[SweepResult]:
    """Mine every active project, isolating failures per project."""

    engine_config = config or get_engine_config()
    budget = max_per_project if max_per_project is not None else engine_config.get('sweep_max_per_project', 20)

    results: List[SweepResult] = []
    project_ids = (
        Project.objects
        .filter(status=ProjectStatus.ACTIVE)
        .order_by('pk')
        .values_list('pk', flat=True)
    )
    for project_id in project_ids:
        try:
            created = generate_link_suggestions(project_id, max_per_project=budget, config=engine_config)
        except Exception as exc:
            logger.exception('Link scout failed for project %s.', project_id)
            results.append(SweepResult(project_id=project_id, created=0, error=str(exc) or exc.__class__.__name__))
            continue
        results.append(SweepResult(project_id=project_id, created=len(created)))
    return results


def opportunity_input_for_task(task: Task) -> OpportunityInput:
    """Build scorer input from a task's stored fields and live signals."""

    return OpportunityInput(
        score_current=task.score_current,
        score_potential=task.score_potential,
        priority=task.priority,
        type=task.type,
        average_position=task.average_position,
        conversion_rate=task.conversion_rate,
        intent_score=task.intent_score,
        traffic_gap=task.traffic_gap,
        effort_override=task.effort_estimate,
    )


def build_task_board(
    tasks: Iterable[Task],
    config: EngineConfig | None = None,
) -> Dict[str, List[ScoredTask]]:
    """Group tasks into board columns, each sorted by descending opportunity score."""

    engine_config = config or get_engine_config()
    columns: Dict[str, List[ScoredTask]] = {str(status): [] for status in BOARD_COLUMNS}

    for task in tasks:
        score = calculate_opportunity_score(opportunity_input_for_task(task), engine_config)
        column = task.status if task.status in columns else str(TaskStatus.OPEN)
        columns[column].append(ScoredTask(task=task, opportunity_score=score))

    for column in columns.values():
        column.sort(key=lambda item: (-item.opportunity_score, item.task.title))
    return columns

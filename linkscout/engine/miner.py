"""Coordinator for a link scout mining pass."""

from __future__ import annotations

from typing import AbstractSet, List, Optional, Sequence

from .config import EngineConfig, load_config
from .matching import best_match
from .signatures import build_signature
from .types import BlogPage, MoneyTarget, SuggestionCandidate


def plan_suggestions(
    blog_pages: Sequence[BlogPage],
    money_targets: Sequence[MoneyTarget],
    existing_signatures: AbstractSet[str],
    *,
    max_per_blog: Optional[int] = None,
    max_per_project: Optional[int] = None,
    config: EngineConfig | None = None,
) -> List[SuggestionCandidate]:
    """Return accepted suggestions in discovery order.

    Blog pages and money targets are walked in the order given. Every
    (blog, target) pair contributes at most its single best match, and a
    match whose signature is already known (from ``existing_signatures`` or
    from earlier in this pass) is dropped. ``existing_signatures`` itself is
    left untouched.
    """

    engine_config = config or load_config(None)
    per_blog_limit = int(max_per_blog if max_per_blog is not None else engine_config.get("max_per_blog", 3))
    project_limit = int(
        max_per_project if max_per_project is not None else engine_config.get("max_per_project", 40)
    )

    if not blog_pages or not money_targets:
        return []

    seen = set(existing_signatures)
    accepted: List[SuggestionCandidate] = []

    for blog in blog_pages:
        if len(accepted) >= project_limit:
            break
        if not blog.content_text:
            continue

        added_for_blog = 0
        for target in money_targets:
            if added_for_blog >= per_blog_limit or len(accepted) >= project_limit:
                break
            if target.target_page_id == blog.page_id:
                continue

            match = best_match(blog.content_text, target, engine_config)
            if match is None:
                continue

            signature = build_signature(blog.page_id, target.target_page_id, match.anchor)
            if signature in seen:
                continue

            accepted.append(SuggestionCandidate(blog=blog, match=match, signature=signature))
            seen.add(signature)
            added_for_blog += 1

    return accepted

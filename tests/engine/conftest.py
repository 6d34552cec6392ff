"""Shared fixtures for engine tests."""

from __future__ import annotations

from typing import Iterable

import pytest

from linkscout.engine.config import load_config
from linkscout.engine.types import BlogPage, MoneyTarget


@pytest.fixture()
def engine_config():
    """Provide a mutable copy of the default engine configuration."""

    return load_config(None)


def make_target(
    page_id: str,
    anchors: Iterable[str],
    *,
    title: str = "Money Page",
    url: str | None = None,
    keyword_id: str | None = None,
) -> MoneyTarget:
    return MoneyTarget(
        keyword_id=keyword_id or f"kw-{page_id}",
        target_page_id=page_id,
        target_url=url or f"https://example.com/{page_id}",
        target_title=title,
        anchors=list(anchors),
    )


def make_blog(
    page_id: str,
    text: str,
    *,
    title: str | None = None,
    url: str | None = None,
    page_type: str = "blog",
) -> BlogPage:
    return BlogPage(
        page_id=page_id,
        url=url or f"https://example.com/blog/{page_id}",
        title=title,
        content_text=text,
        page_type=page_type,
    )

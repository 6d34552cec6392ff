"""Suggestion planning tests: self-linking, budgets and de-duplication."""

from __future__ import annotations

from linkscout.engine.miner import plan_suggestions
from linkscout.engine.signatures import build_signature

from .conftest import make_blog, make_target


def _corpus(blog_count: int, target_count: int):
    targets = [make_target(f"t{index}", [f"service{index}"]) for index in range(target_count)]
    mentions = " ".join(f"We recommend service{index} for teams." for index in range(target_count))
    blogs = [make_blog(f"b{index}", mentions) for index in range(blog_count)]
    return blogs, targets


def test_empty_inputs_yield_no_suggestions(engine_config):
    blogs, targets = _corpus(2, 2)

    assert plan_suggestions([], targets, set(), config=engine_config) == []
    assert plan_suggestions(blogs, [], set(), config=engine_config) == []


def test_blog_never_links_to_itself(engine_config):
    page = make_blog("p1", "Our pricing page explains the rank tracker plans.")
    target = make_target("p1", ["rank tracker"])

    assert plan_suggestions([page], [target], set(), config=engine_config) == []


def test_best_match_per_pair_with_signature(engine_config):
    blog = make_blog("b1", "Compare SEO suites. The keyword research tool wins.", title="Suite comparison")
    target = make_target("t1", ["SEO", "Keyword Research Tool"], title="Keyword Research Tool")

    planned = plan_suggestions([blog], [target], set(), config=engine_config)

    assert len(planned) == 1
    suggestion = planned[0]
    assert suggestion.anchor == "Keyword Research Tool"
    assert suggestion.signature == "b1:t1:keyword research tool"
    assert suggestion.blog is blog
    assert suggestion.target is target


def test_per_blog_budget(engine_config):
    blogs, targets = _corpus(3, 4)

    planned = plan_suggestions(blogs, targets, set(), max_per_blog=2, config=engine_config)

    assert len(planned) == 6
    for blog in blogs:
        assert sum(1 for item in planned if item.blog.page_id == blog.page_id) <= 2


def test_per_project_budget_short_circuits(engine_config):
    blogs, targets = _corpus(4, 4)

    planned = plan_suggestions(blogs, targets, set(), max_per_blog=4, max_per_project=5, config=engine_config)

    assert len(planned) == 5
    assert [item.blog.page_id for item in planned] == ["b0", "b0", "b0", "b0", "b1"]


def test_budgets_default_to_configuration(engine_config):
    blogs, targets = _corpus(20, 5)

    planned = plan_suggestions(blogs, targets, set(), config=engine_config)

    assert len(planned) == 40
    assert {sum(1 for item in planned if item.blog is blog) for blog in blogs[:13]} == {3}


def test_existing_signatures_are_skipped_and_not_mutated(engine_config):
    blogs, targets = _corpus(1, 2)
    existing = {build_signature("b0", "t0", "service0")}

    planned = plan_suggestions(blogs, targets, existing, config=engine_config)

    assert [item.signature for item in planned] == ["b0:t1:service1"]
    assert existing == {"b0:t0:service0"}


def test_same_signature_is_accepted_once_per_run(engine_config):
    blog = make_blog("b1", "A rank tracker keeps you honest.")
    first = make_target("money", ["rank tracker"], keyword_id="kw-1")
    second = make_target("money", ["Rank Tracker"], keyword_id="kw-2")

    planned = plan_suggestions([blog], [first, second], set(), config=engine_config)

    assert len(planned) == 1
    assert planned[0].target.keyword_id == "kw-1"


def test_repeat_run_with_prior_signatures_is_empty(engine_config):
    blogs, targets = _corpus(3, 3)

    first = plan_suggestions(blogs, targets, set(), config=engine_config)
    second = plan_suggestions(blogs, targets, {item.signature for item in first}, config=engine_config)

    assert len(first) == 9
    assert second == []

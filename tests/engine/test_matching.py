"""Anchor matching and snippet tests."""

from __future__ import annotations

from linkscout.engine import matching
from linkscout.engine.text import extract_snippet, html_to_text, topic_tokens

from .conftest import make_target


def test_anchor_does_not_match_inside_longer_word(engine_config):
    target = make_target("money", ["SEO"])

    assert matching.find_matches_for_target("Try SEOPlatform for free.", target, engine_config) == []


def test_anchor_matches_whole_word_case_insensitively(engine_config):
    target = make_target("money", ["SEO"])

    for text in ("the SEO dashboard is great", "the seo dashboard is great", "the Seo dashboard is great"):
        matches = matching.find_matches_for_target(text, target, engine_config)
        assert len(matches) == 1, text
        assert matches[0].anchor == "SEO"
        assert matches[0].target is target


def test_every_occurrence_of_every_anchor_is_returned(engine_config):
    target = make_target("money", ["rank tracker", "SEO"])
    text = "A rank tracker is an SEO staple. Every SEO team needs a rank tracker."

    matches = matching.find_matches_for_target(text, target, engine_config)

    assert len(matches) == 4
    assert sorted(match.anchor for match in matches) == ["SEO", "SEO", "rank tracker", "rank tracker"]


def test_matches_are_sorted_by_confidence(engine_config):
    target = make_target("money", ["SEO", "keyword research tool"], title="Keyword Research Tool")
    text = "SEO basics. Later on we compare each keyword research tool in depth."

    matches = matching.find_matches_for_target(text, target, engine_config)
    confidences = [match.confidence for match in matches]

    assert confidences == sorted(confidences, reverse=True)
    assert matching.best_match(text, target, engine_config).anchor == "keyword research tool"


def test_regex_characters_in_anchor_are_literal(engine_config):
    target = make_target("money", ["node.js"])

    assert matching.find_matches_for_target("We love nodexjs.", target, engine_config) == []
    assert len(matching.find_matches_for_target("We love node.js hosting.", target, engine_config)) == 1


def test_best_match_returns_none_without_hits(engine_config):
    target = make_target("money", ["backlink audit"])

    assert matching.best_match("Nothing about that here.", target, engine_config) is None


def test_snippet_pads_eighty_characters_and_collapses_whitespace():
    before = "a" * 100
    after = "b" * 100
    content = f"{before}  \n\t  MATCH  \n  {after}"
    start = content.index("MATCH")

    snippet = extract_snippet(content, start, start + len("MATCH"))

    assert snippet.startswith("a")
    assert " MATCH " in snippet
    assert "\n" not in snippet and "  " not in snippet
    assert snippet.count("a") == 80 - len("  \n\t  ")
    assert snippet.count("b") == 80 - len("  \n  ")


def test_snippet_is_trimmed_at_content_edges():
    assert extract_snippet("  seo  ", 2, 5) == "seo"


def test_topic_tokens_drop_short_and_non_alphanumeric_tokens():
    assert topic_tokens("The SEO-Guide: a 2024 review!") == ["the", "seo", "guide", "2024", "review"]


def test_html_to_text_drops_scripts_and_collapses_whitespace():
    html = "<html><head><style>p {}</style></head><body><p>Hello\n   world</p><script>var x;</script></body></html>"

    assert html_to_text(html) == "Hello world"
    assert html_to_text("") == ""

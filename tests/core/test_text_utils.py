from __future__ import annotations

import re

from skillmatch.core.text import escape_regexp, get_skill_context


def test_escape_regexp_matches_literally():
    assert escape_regexp("c++") == r"c\+\+"
    assert escape_regexp("node.js") == r"node\.js"
    assert re.fullmatch(escape_regexp("a.b*c(d)"), "a.b*c(d)")
    assert re.search(escape_regexp("node.js"), "nodexjs") is None


def test_escape_regexp_leaves_plain_tokens_untouched():
    assert escape_regexp("python") == "python"
    assert escape_regexp("machine learning") == "machine learning"


def test_get_skill_context_returns_empty_without_mention():
    assert get_skill_context("I love Python", "java") == ""


def test_get_skill_context_limits_window_and_lowercases():
    text = "X" * 60 + "Python" + "Y" * 60

    context = get_skill_context(text, "python")

    assert context == "x" * 50 + "python" + "y" * 50


def test_get_skill_context_joins_every_mention():
    text = "Python" + " " * 120 + "PYTHON"

    context = get_skill_context(text, "python")

    assert context.count("python") == 2
    assert context.startswith("python")
    assert context == context.lower()

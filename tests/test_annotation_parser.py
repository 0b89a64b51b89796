"""Tests for `[category] body` comment parsing."""

import pytest

from review.annotation_parser import parse_annotation_body


@pytest.mark.parametrize("text, category, body", [
    ("[bug] off by one", "bug", "off by one"),
    ("[Security]   leaks token", "security", "leaks token"),
    ("  [test]\nneeds a case\nfor empty input  ", "test", "needs a case\nfor empty input"),
    ("[refactor]", "refactor", ""),
])
def test_explicit_category(text, category, body):
    parsed = parse_annotation_body(text)

    assert parsed.category == category
    assert parsed.body == body
    assert parsed.has_explicit_category is True


def test_unknown_tag_keeps_whole_text():
    parsed = parse_annotation_body("[style] rename this")

    assert parsed.category is None
    assert parsed.body == "[style] rename this"
    assert parsed.has_explicit_category is False


def test_plain_text():
    parsed = parse_annotation_body("  just a note  ")

    assert parsed.category is None
    assert parsed.body == "just a note"

from __future__ import annotations

import pytest

from datafile.comments import strip_comments


def test_strip_single_and_multiple_spans():
    assert strip_comments("a/*x*/b") == "ab"
    assert strip_comments("a/* x */b/*y*/c") == "abc"


def test_strip_spans_across_lines():
    text = "¡k:\n^v~\n/*\n¡ -> Data separator\n^ -> Value start\n*/"
    assert strip_comments(text) == "¡k:\n^v~\n"


def test_strip_is_non_greedy_and_does_not_nest():
    assert strip_comments("a/*x*/b*/c") == "ab*/c"
    assert strip_comments("a/* /* inner */ b */c") == "a b */c"


def test_unterminated_comment_runs_to_end_of_text():
    assert strip_comments("¡k:^v~ /* never closed ¡j:^w~") == "¡k:^v~ "


def test_text_without_comments_is_unchanged():
    assert strip_comments("¡k:\n^a * b / c~") == "¡k:\n^a * b / c~"
    assert strip_comments("") == ""


@pytest.mark.parametrize(
    "text",
    [
        "plain",
        "a/*x*/b",
        "//*x*/*",
        "/*/**/*/",
        "a/*x",
        "*/ stray close",
    ],
)
def test_stripping_is_idempotent(text):
    once = strip_comments(text)
    assert strip_comments(once) == once
    assert "/*" not in once


def test_span_removal_that_forms_a_new_marker_is_stripped_too():
    assert strip_comments("//*x*/*") == ""

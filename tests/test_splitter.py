from __future__ import annotations

import time

from datafile.splitter import split_records


def test_split_trims_and_drops_empty_slices():
    assert split_records("¡a:\n^1~\n\n¡b:\n^2~") == ["a:\n^1~", "b:\n^2~"]
    assert split_records("¡¡a:^1~¡  ¡") == ["a:^1~"]
    assert split_records("   ") == []


def test_separator_inside_value_span_is_not_a_split_point():
    assert split_records("¡k:^a¡b~\n¡j:^c~") == ["k:^a¡b~", "j:^c~"]


def test_unterminated_value_span_does_not_swallow_next_record():
    assert split_records("¡k:^v\n¡j:^w~") == ["k:^v", "j:^w~"]


def test_text_before_first_separator_is_its_own_slice():
    assert split_records("junk\n¡k:^v~") == ["junk", "k:^v~"]


def test_long_run_of_value_starts_without_value_end_is_linear():
    text = "¡k:" + "^" * 400_000

    started = time.perf_counter()
    assert split_records(text) == ["k:" + "^" * 400_000]
    assert time.perf_counter() - started < 2.0


def test_long_run_of_value_starts_closed_at_the_very_end():
    text = "¡k:" + "^" * 400_000 + "~¡j:^v~"

    started = time.perf_counter()
    pieces = split_records(text)
    assert time.perf_counter() - started < 2.0
    assert pieces[-1] == "j:^v~"

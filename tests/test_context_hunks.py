"""Tests for synthetic context hunks around orphan annotations."""

from conftest import make_annotation
from review.context_hunks import build_context_hunks
from review.matcher import annotations_for_hunk

FILE_LINES = [f"line {i}" for i in range(10)]


def test_window_with_default_radius():
    result = build_context_hunks("/f.py", FILE_LINES, [make_annotation(5)])

    assert len(result) == 1
    hunk = result[0]
    assert hunk.id == "/f.py:ctx:3"
    assert hunk.header == "@@ -3,7 +3,7 @@"
    assert (hunk.old_start, hunk.old_lines, hunk.new_start, hunk.new_lines) == (3, 7, 3, 7)
    assert all(line.type == "context" for line in hunk.lines)
    assert all(line.old_line_number == line.new_line_number for line in hunk.lines)
    assert [hunk.lines[i].content for i in (0, 3, 6)] == ["line 2", "line 5", "line 8"]


def test_clamps_to_file_start_and_end():
    start, end = build_context_hunks("/f.py", FILE_LINES, [make_annotation(1), make_annotation(8, end_line=9)])

    assert start.new_start == 1
    assert start.lines[0].content == "line 0"
    assert len(start.lines) == 5

    assert end.new_start == 6
    assert end.lines[-1].content == "line 9"
    assert len(end.lines) == 5


def test_skips_file_level_annotations():
    flag = make_annotation(0, file_level=True)
    assert build_context_hunks("/f.py", FILE_LINES, [flag]) == []


def test_line_zero_annotation_is_not_a_file_flag():
    result = build_context_hunks("/f.py", FILE_LINES, [make_annotation(0)])

    assert len(result) == 1
    assert result[0].new_start == 1
    assert len(result[0].lines) == 4


def test_one_hunk_per_annotation_without_merging():
    result = build_context_hunks("/f.py", FILE_LINES, [make_annotation(4), make_annotation(5)])

    assert [h.new_start for h in result] == [2, 3]


def test_custom_radius():
    result = build_context_hunks("/f.py", FILE_LINES, [make_annotation(5)], context_radius=1)
    assert [line.content for line in result[0].lines] == ["line 4", "line 5", "line 6"]


def test_annotation_past_end_of_file_is_skipped():
    assert build_context_hunks("/f.py", FILE_LINES, [make_annotation(20)]) == []
    assert build_context_hunks("/f.py", [], [make_annotation(0)]) == []


def test_context_hunk_is_matched_by_its_annotation():
    annotation = make_annotation(5)
    [hunk] = build_context_hunks("/f.py", FILE_LINES, [annotation])

    assert annotations_for_hunk(hunk, [annotation]) == [annotation]


def test_skips_file_level_annotations_on_any_line():
    flag = make_annotation(5, end_line=6, file_level=True)
    assert build_context_hunks("/f.py", FILE_LINES, [flag, make_annotation(2)])[0].new_start == 1
    assert build_context_hunks("/f.py", FILE_LINES, [flag]) == []

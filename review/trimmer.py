import logging
from typing import List, Optional, Sequence, Set

from models import Annotation, DiffHunk, DiffLine
from review.intervals import merge_ranges
from utils.diff_text import format_hunk_header

logger = logging.getLogger(__name__)


def _first_number(lines: Sequence[DiffLine], attr: str, fallback: int) -> int:
    for line in lines:
        number: Optional[int] = getattr(line, attr)
        if number is not None:
            return number
    return fallback


def _sub_hunk(parent: DiffHunk, lines: Sequence[DiffLine], index: int) -> DiffHunk:
    old_start = _first_number(lines, "old_line_number", parent.old_start)
    new_start = _first_number(lines, "new_line_number", parent.new_start)
    old_lines = sum(1 for line in lines if line.type != "added")
    new_lines = sum(1 for line in lines if line.type != "removed")
    return DiffHunk(
        id=f"{parent.id}:trim:{index}",
        header=format_hunk_header(old_start, old_lines, new_start, new_lines),
        old_start=old_start,
        old_lines=old_lines,
        new_start=new_start,
        new_lines=new_lines,
        lines=tuple(lines),
        state=parent.state,
    )


def trim_hunk(
    hunk: DiffHunk,
    annotations: Sequence[Annotation],
    context_radius: int = 3,
    merge_gap: int = 1,
) -> List[DiffHunk]:
    """
    Reduce a hunk to the windows around its annotated lines.

    Each annotated line is widened by `context_radius` lines of the hunk
    (removed lines included) and overlapping or touching windows are merged.
    The hunk itself is returned, not a copy, when trimming would keep every
    line or when no annotation lands on a line with a new-side number.
    """
    if not annotations:
        return []

    targets: Set[int] = set()
    for a in annotations:
        targets.update(range(a.start_line + 1, a.end_line + 2))

    hits = [i for i, line in enumerate(hunk.lines) if line.new_line_number in targets]
    if not hits:
        logger.debug("no annotated line in hunk %s carries a new-side number", hunk.id)
        return [hunk]

    last = len(hunk.lines) - 1
    windows = merge_ranges(
        ((max(0, i - context_radius), min(last, i + context_radius)) for i in hits),
        gap=merge_gap,
    )
    if windows == [(0, last)]:
        return [hunk]

    return [
        _sub_hunk(hunk, hunk.lines[start:end + 1], n)
        for n, (start, end) in enumerate(windows)
    ]

import logging
from typing import List, Optional, Sequence

from models import Annotation, ContextLine, DiffHunk
from review.intervals import Range
from utils.diff_text import format_hunk_header

logger = logging.getLogger(__name__)


def context_window(annotation: Annotation, line_count: int, context_radius: int = 3) -> Optional[Range]:
    """0-indexed inclusive window around an annotation, or None when it holds no file line."""
    start = max(0, annotation.start_line - context_radius)
    end = min(line_count - 1, annotation.end_line + context_radius)
    if start > end:
        return None
    return start, end


def context_hunk(file_uri: str, file_lines: Sequence[str], start: int, end: int) -> DiffHunk:
    lines = tuple(
        ContextLine(content=file_lines[n], old_line_number=n + 1, new_line_number=n + 1)
        for n in range(start, end + 1)
    )
    new_start = start + 1
    return DiffHunk(
        id=f"{file_uri}:ctx:{new_start}",
        header=format_hunk_header(new_start, len(lines), new_start, len(lines)),
        old_start=new_start,
        old_lines=len(lines),
        new_start=new_start,
        new_lines=len(lines),
        lines=lines,
    )


def build_context_hunks(
    file_uri: str,
    file_lines: Sequence[str],
    orphans: Sequence[Annotation],
    context_radius: int = 3,
) -> List[DiffHunk]:
    """
    Synthetic context-only hunks, one per line-anchored orphan annotation.
    File-level annotations have no line to centre on and are left out.
    """
    hunks: List[DiffHunk] = []
    for a in orphans:
        if a.file_level:
            continue
        window = context_window(a, len(file_lines), context_radius)
        if window is None:
            logger.debug("annotation %s lies past the end of %s", a.id, file_uri)
            continue
        hunks.append(context_hunk(file_uri, file_lines, *window))
    return hunks

import logging
from typing import List, Optional, Sequence

from models import AnnotatedHunk, Annotation, DiffHunk, FileDiff, ReconciledFile
from review.context_hunks import context_hunk, context_window
from review.intervals import Range, merge_ranges, subtract_ranges
from review.matcher import annotations_for_hunk, orphan_annotations
from review.trimmer import trim_hunk
from utils.diff_text import hunk_to_diff_text

logger = logging.getLogger(__name__)


def _context_hunks_for_orphans(
    file_diff: FileDiff,
    file_lines: Sequence[str],
    orphans: Sequence[Annotation],
    context_radius: int,
    merge_gap: int,
) -> List[DiffHunk]:
    """
    Context hunks that overlap neither each other nor the diff's own hunks, so
    every orphan start line falls in exactly one hunk.
    """
    windows = [context_window(a, len(file_lines), context_radius) for a in orphans]
    merged = merge_ranges((w for w in windows if w is not None), gap=merge_gap)
    diff_ranges: List[Range] = [
        (h.new_start - 1, h.new_start + h.new_lines - 2)
        for h in file_diff.hunks if h.new_lines > 0
    ]
    return [
        context_hunk(file_diff.file.uri, file_lines, start, end)
        for start, end in subtract_ranges(merged, diff_ranges)
        if any(start <= a.start_line <= end for a in orphans)
    ]


def reconcile_file(
    file_diff: FileDiff,
    annotations: Sequence[Annotation],
    file_lines: Optional[Sequence[str]] = None,
    context_radius: int = 3,
    merge_gap: int = 1,
) -> ReconciledFile:
    """
    Pair a file's annotations with the smallest hunks that show them.

    Annotations on unchanged lines get a context hunk when the current file
    lines are supplied; whatever still matches no hunk is reported as an orphan.
    Each annotation is paired with at most one output hunk.
    """
    uri = file_diff.file.uri
    own = [a for a in annotations if a.file_uri == uri]

    hunks: List[DiffHunk] = list(file_diff.hunks)
    line_orphans = [a for a in orphan_annotations(hunks, own) if not a.file_level]
    if line_orphans and file_lines is not None:
        hunks.extend(_context_hunks_for_orphans(file_diff, file_lines, line_orphans, context_radius, merge_gap))
        hunks.sort(key=lambda h: h.new_start)

    annotated: List[AnnotatedHunk] = []
    paired = set()
    for hunk in hunks:
        matched = [a for a in annotations_for_hunk(hunk, own) if a.id not in paired]
        if not matched:
            continue
        for sub in trim_hunk(hunk, matched, context_radius, merge_gap):
            sub_annotations = [a for a in annotations_for_hunk(sub, matched) if a.id not in paired]
            if not sub_annotations:
                continue
            paired.update(a.id for a in sub_annotations)
            annotated.append(AnnotatedHunk(
                hunk=sub,
                annotations=sub_annotations,
                diff=hunk_to_diff_text(sub),
            ))

    orphans = [a for a in own if a.id not in paired]
    logger.debug(
        "reconciled %s: %d annotated hunks, %d orphans",
        file_diff.file.relative_path, len(annotated), len(orphans),
    )
    return ReconciledFile(file=file_diff.file, file_diff=file_diff, hunks=annotated, orphans=orphans)

from typing import List, Sequence, Set

from models import Annotation, DiffHunk


def annotations_for_hunk(hunk: DiffHunk, annotations: Sequence[Annotation]) -> List[Annotation]:
    """Annotations whose start line (0-indexed) lies inside the hunk's new-file range."""
    if hunk.new_lines == 0:
        return []
    first = hunk.new_start - 1
    last = hunk.new_start + hunk.new_lines - 2
    return [
        a for a in annotations
        if not a.file_level and first <= a.start_line <= last
    ]


def orphan_annotations(hunks: Sequence[DiffHunk], annotations: Sequence[Annotation]) -> List[Annotation]:
    matched: Set[str] = set()
    for hunk in hunks:
        matched.update(a.id for a in annotations_for_hunk(hunk, annotations))
    return [a for a in annotations if a.id not in matched]

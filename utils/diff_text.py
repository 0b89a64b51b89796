# utils/diff_text.py

from unidiff.constants import LINE_TYPE_ADDED, LINE_TYPE_CONTEXT, LINE_TYPE_REMOVED

from models import DiffHunk

_PREFIX = {
    "added": LINE_TYPE_ADDED,
    "removed": LINE_TYPE_REMOVED,
    "context": LINE_TYPE_CONTEXT,
}


def format_hunk_header(old_start: int, old_lines: int, new_start: int, new_lines: int) -> str:
    return f"@@ -{old_start},{old_lines} +{new_start},{new_lines} @@"


def hunk_to_diff_text(hunk: DiffHunk) -> str:
    """
    Rebuild the body of a hunk as unified-diff text (no header, no trailing newline).
    """
    return "\n".join(_PREFIX[line.type] + line.content for line in hunk.lines)

import logging
from typing import List

from unidiff.constants import (
    LINE_TYPE_ADDED,
    LINE_TYPE_CONTEXT,
    LINE_TYPE_NO_NEWLINE,
    LINE_TYPE_REMOVED,
    RE_HUNK_HEADER,
)

from models import AddedLine, ChangedFile, ContextLine, DiffHunk, DiffLine, FileDiff, RemovedLine
from utils.diff_text import format_hunk_header

logger = logging.getLogger(__name__)

HUNK_START = "@@"
FILE_START = "diff "


def split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    # a final newline leaves one empty element behind
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_added_file(file: ChangedFile, content: str) -> FileDiff:
    """
    Untracked files have no baseline, so the whole content becomes a single
    all-added hunk.
    """
    lines = [
        AddedLine(content=text, new_line_number=i + 1)
        for i, text in enumerate(split_lines(content))
    ]
    if not lines:
        return FileDiff(file=file)

    hunk = DiffHunk(
        id=f"{file.uri}:0:1",
        header=format_hunk_header(0, 0, 1, len(lines)),
        old_start=0,
        old_lines=0,
        new_start=1,
        new_lines=len(lines),
        lines=tuple(lines),
    )
    return FileDiff(file=file, hunks=(hunk,), additions=len(lines), deletions=0)


def parse_diff(file: ChangedFile, raw: str) -> FileDiff:
    """
    Parse the raw `git diff` output for one file. Never raises: text that is
    not part of a recognised hunk is skipped.
    """
    lines = split_lines(raw)
    hunks: List[DiffHunk] = []
    additions = 0
    deletions = 0
    i = 0

    while i < len(lines):
        line = lines[i]
        i += 1
        match = RE_HUNK_HEADER.match(line)
        if not match:
            if line.startswith(HUNK_START):
                logger.debug("skipping malformed hunk header in %s: %r", file.relative_path, line)
            continue

        old_start = int(match.group(1))
        old_lines = int(match.group(2)) if match.group(2) is not None else 1
        new_start = int(match.group(3))
        new_lines = int(match.group(4)) if match.group(4) is not None else 1

        hunk_lines: List[DiffLine] = []
        old_no = old_start
        new_no = new_start
        while i < len(lines) and not lines[i].startswith((HUNK_START, FILE_START)):
            body = lines[i]
            i += 1
            if body.startswith(LINE_TYPE_NO_NEWLINE):
                continue
            if body.startswith(LINE_TYPE_ADDED):
                hunk_lines.append(AddedLine(content=body[1:], new_line_number=new_no))
                new_no += 1
                additions += 1
            elif body.startswith(LINE_TYPE_REMOVED):
                hunk_lines.append(RemovedLine(content=body[1:], old_line_number=old_no))
                old_no += 1
                deletions += 1
            else:
                # some tools strip the leading space of blank context lines
                content = body[1:] if body.startswith(LINE_TYPE_CONTEXT) else body
                hunk_lines.append(ContextLine(content=content, old_line_number=old_no, new_line_number=new_no))
                old_no += 1
                new_no += 1

        hunks.append(DiffHunk(
            id=f"{file.uri}:{old_start}:{new_start}",
            header=line,
            old_start=old_start,
            old_lines=old_lines,
            new_start=new_start,
            new_lines=new_lines,
            lines=tuple(hunk_lines),
        ))

    return FileDiff(file=file, hunks=tuple(hunks), additions=additions, deletions=deletions)

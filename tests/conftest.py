"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path

import pytest

# Project modules live at the repository root
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from models import AddedLine, Annotation, ChangedFile, DiffHunk  # noqa: E402


def make_annotation(start_line, **overrides):
    fields = dict(
        id=f"ann-{start_line}",
        file_uri="/f.py",
        start_line=start_line,
        end_line=start_line,
        category="bug",
        body=f"issue at {start_line}",
    )
    fields.update(overrides)
    return Annotation(**fields)


def make_hunk(**overrides):
    fields = dict(
        id="h1",
        header="@@ -10,5 +10,6 @@",
        old_start=10,
        old_lines=5,
        new_start=10,
        new_lines=6,
        lines=(),
    )
    fields.update(overrides)
    return DiffHunk(**fields)


def added_lines(count):
    return tuple(AddedLine(content=f"line {i}", new_line_number=i + 1) for i in range(count))


def added_hunk(count, hunk_id="added"):
    return make_hunk(
        id=hunk_id,
        header=f"@@ -0,0 +1,{count} @@",
        old_start=0,
        old_lines=0,
        new_start=1,
        new_lines=count,
        lines=added_lines(count),
    )


@pytest.fixture
def changed_file():
    return ChangedFile(uri="/workspace/src/index.py", relative_path="src/index.py", status="modified")

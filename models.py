from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from typing import Annotated, List, Literal, Optional, Tuple, Union, get_args

FileStatus = Literal["added", "modified", "deleted", "renamed"]
ReviewState = Literal["unreviewed", "reviewed", "flagged"]
AnnotationCategory = Literal[
    "bug", "security", "performance", "architecture", "explain", "refactor", "test"
]

ANNOTATION_CATEGORIES: Tuple[str, ...] = get_args(AnnotationCategory)


class ChangedFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    relative_path: str
    status: FileStatus
    old_path: Optional[str] = None

    @model_validator(mode="after")
    def _old_path_only_when_renamed(self):
        if (self.status == "renamed") != (self.old_path is not None):
            raise ValueError("old_path must be set exactly when status is 'renamed'")
        return self


class AddedLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["added"] = "added"
    content: str
    new_line_number: int

    @computed_field
    @property
    def old_line_number(self) -> Optional[int]:
        return None


class RemovedLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["removed"] = "removed"
    content: str
    old_line_number: int

    @computed_field
    @property
    def new_line_number(self) -> Optional[int]:
        return None


class ContextLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["context"] = "context"
    content: str
    old_line_number: int
    new_line_number: int


# the tag decides which line numbers exist
DiffLine = Annotated[Union[AddedLine, RemovedLine, ContextLine], Field(discriminator="type")]


class DiffHunk(BaseModel):
    """The unit between two @@ markers.

    `id` is built from the file location and the hunk's start positions so it
    stays the same across repeated parses and serialization round-trips.
    `state` is the only field callers may reassign.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., frozen=True)
    header: str = Field(..., frozen=True)
    old_start: int = Field(..., frozen=True)
    old_lines: int = Field(..., frozen=True)
    new_start: int = Field(..., frozen=True)
    new_lines: int = Field(..., frozen=True)
    lines: Tuple[DiffLine, ...] = Field((), frozen=True)
    state: ReviewState = "unreviewed"


class FileDiff(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: ChangedFile
    hunks: Tuple[DiffHunk, ...] = ()
    additions: int = 0
    deletions: int = 0


class Annotation(BaseModel):
    """A reviewer note; line numbers are 0-indexed, inclusive, new-file side."""
    model_config = ConfigDict(frozen=True)

    id: str
    file_uri: str
    start_line: int = Field(..., ge=0)
    end_line: int = Field(..., ge=0)
    category: Optional[AnnotationCategory] = None
    body: str = ""
    created_at: int = 0  # unix ms
    resolved: bool = False
    file_level: bool = False

    @model_validator(mode="after")
    def _range_in_order(self):
        if self.end_line < self.start_line:
            raise ValueError("end_line must not be before start_line")
        return self


class ParsedAnnotation(BaseModel):
    category: Optional[AnnotationCategory] = None
    body: str
    has_explicit_category: bool = False


class AnnotatedHunk(BaseModel):
    hunk: DiffHunk
    annotations: List[Annotation]
    diff: str


class ReconciledFile(BaseModel):
    file: ChangedFile
    file_diff: FileDiff
    hunks: List[AnnotatedHunk]
    orphans: List[Annotation]

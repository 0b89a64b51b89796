import logging
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional

from utils.config import CONTEXT_RADIUS, LOG_LEVEL, LOG_STRUCTURED, MERGE_GAP
from utils.logging_config import setup_logging

setup_logging(LOG_LEVEL, LOG_STRUCTURED)

from diff_parser import parse_added_file, parse_diff, split_lines
from models import Annotation, ChangedFile, FileDiff, ParsedAnnotation, ReconciledFile
from review.annotation_parser import parse_annotation_body
from review.reconciler import reconcile_file

logger = logging.getLogger(__name__)

app = FastAPI(title="Diff Reconciliation Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ParseDiffInput(BaseModel):
    file: ChangedFile
    diff_text: str = ""


class ParseAddedInput(BaseModel):
    file: ChangedFile
    content: str = ""


class AnnotationTextInput(BaseModel):
    text: str


class ReconcileInput(BaseModel):
    file: ChangedFile
    diff_text: Optional[str] = None
    content: Optional[str] = Field(None, description="Current file content, used for context hunks.")
    annotations: List[Annotation] = Field(default_factory=list)
    context_radius: Optional[int] = Field(None, ge=0)


@app.post("/parse-diff", response_model=FileDiff, summary="Parse one file's unified diff")
def parse_diff_endpoint(inp: ParseDiffInput):
    return parse_diff(inp.file, inp.diff_text)


@app.post("/parse-added", response_model=FileDiff, summary="Build the diff of an untracked file")
def parse_added_endpoint(inp: ParseAddedInput):
    return parse_added_file(inp.file, inp.content)


@app.post("/annotations/parse", response_model=ParsedAnnotation)
def parse_annotation_endpoint(inp: AnnotationTextInput):
    return parse_annotation_body(inp.text)


@app.post("/reconcile", response_model=ReconciledFile, summary="Match annotations to trimmed hunks")
def reconcile_endpoint(inp: ReconcileInput):

    if inp.diff_text is None and inp.content is None:
        raise HTTPException(status_code=400, detail="Provide diff_text, content, or both")

    if inp.diff_text is None and inp.file.status == "added":
        file_diff = parse_added_file(inp.file, inp.content)
    else:
        file_diff = parse_diff(inp.file, inp.diff_text or "")

    file_lines = split_lines(inp.content) if inp.content is not None else None
    radius = inp.context_radius if inp.context_radius is not None else CONTEXT_RADIUS

    result = reconcile_file(file_diff, inp.annotations, file_lines, radius, MERGE_GAP)
    logger.info(
        "reconciled %s: %d hunks, %d annotated hunks, %d orphans",
        inp.file.relative_path, len(file_diff.hunks), len(result.hunks), len(result.orphans),
    )
    return result


@app.get("/")
def root():
    return {"status": "Diff Reconciliation Service running", "context_radius": CONTEXT_RADIUS}

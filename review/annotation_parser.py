import re

from models import ANNOTATION_CATEGORIES, ParsedAnnotation

CATEGORY_PATTERN = re.compile(r"^\[(\w+)\]\s*(.*)$", re.DOTALL)


def parse_annotation_body(text: str) -> ParsedAnnotation:
    """
    Split a comment typed as `[category] body` into its parts.
    A missing or unknown tag leaves the category empty and keeps the whole text as body.
    """
    trimmed = text.strip()
    match = CATEGORY_PATTERN.match(trimmed)
    if match:
        tag = match.group(1).lower()
        if tag in ANNOTATION_CATEGORIES:
            return ParsedAnnotation(category=tag, body=match.group(2).strip(), has_explicit_category=True)
    return ParsedAnnotation(category=None, body=trimmed, has_explicit_category=False)

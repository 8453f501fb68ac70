"""Matches recognized text against a category's keyword groups and patterns."""

import re

from docvalidator.analysis.models import MatchResult
from docvalidator.categories.models import DocumentCategory
from docvalidator.logging.logger import Log


def match(ocr_text: str, barcode_text: str, category: DocumentCategory) -> MatchResult:
    """Evaluate OCR and barcode text against ``category``.

    Both texts are joined with a space and uppercased. A keyword group matches
    when every keyword is a substring of that text; patterns are searched
    case-insensitively anywhere in it. Patterns that fail to compile are
    skipped.
    """
    combined = f"{ocr_text} {barcode_text}".upper()

    matched_groups = tuple(
        group
        for group in category.keyword_groups
        if all(keyword.upper() in combined for keyword in group)
    )
    matched_patterns = tuple(
        pattern for pattern in category.expected_patterns if _search(pattern, combined)
    )

    return MatchResult(
        keyword_match=bool(matched_groups),
        matched_keyword_groups=matched_groups,
        pattern_match=bool(matched_patterns),
        matched_patterns=matched_patterns,
    )


def _search(pattern: str, text: str) -> bool:
    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        Log.debug("Skipping invalid pattern", pattern=pattern, error=exc)
        return False
    return regex.search(text) is not None

"""Embedded reference resolution for mail bodies."""

from mailsurface.content.cache import ResolutionCache
from mailsurface.content.references import (
    EmbeddedReference,
    contains_references,
    extract_reference_ids,
    iter_references,
    normalize_cid_value,
)
from mailsurface.content.resolver import (
    ReferenceAnalysis,
    ResolvedContent,
    analyze_references,
    build_attachment_index,
    build_data_url,
    resolve_content,
    resolve_markup,
)

__all__ = [
    "EmbeddedReference",
    "ReferenceAnalysis",
    "ResolutionCache",
    "ResolvedContent",
    "analyze_references",
    "build_attachment_index",
    "build_data_url",
    "contains_references",
    "extract_reference_ids",
    "iter_references",
    "normalize_cid_value",
    "resolve_content",
    "resolve_markup",
]

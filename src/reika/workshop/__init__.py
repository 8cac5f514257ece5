"""Workshop link detection: URL extraction, link matching, and preview image parsing."""

from reika.workshop.preview import PreviewParts, build_thumbnail_url, parse_preview_url
from reika.workshop.urls import (
    CandidateURL,
    WorkshopLinkMatch,
    extract_candidates,
    extract_urls,
    iter_urls,
    mark_suppressed,
    match_workshop_url,
)

__all__ = [
    "CandidateURL",
    "PreviewParts",
    "WorkshopLinkMatch",
    "build_thumbnail_url",
    "extract_candidates",
    "extract_urls",
    "iter_urls",
    "mark_suppressed",
    "match_workshop_url",
    "parse_preview_url",
]

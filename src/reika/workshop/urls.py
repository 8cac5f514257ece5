"""URL extraction, embed suppression, and workshop link matching for chat messages."""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from urllib.parse import parse_qs, urlsplit

from reika.config import WorkshopConfig
from reika.errors import InvalidWorkshopId

# Absolute URL: scheme://, then everything up to whitespace or a character
# that cannot appear unescaped in a URI. Brackets stop the match so that
# BBCode like [url=https://a.b]x[/url] yields just the address.
URL_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*://[^\s<>\"{}|\\^\[\]`]+")

_DIGITS = re.compile(r"[0-9]+")
_FILEDETAILS_PATH = re.compile(r"/([^/]+)/filedetails/?")


@dataclass(frozen=True)
class CandidateURL:
    """A URL found in message text, and whether its author suppressed the preview."""

    url: str
    suppressed: bool = False


@dataclass(frozen=True)
class WorkshopLinkMatch:
    """A URL recognized as a workshop item link."""

    url: str
    raw_id: str
    params: dict[str, list[str]] = field(default_factory=dict)  # Other query params, ignored

    @property
    def item_id(self) -> int:
        """The item id as an integer. Raises InvalidWorkshopId if it is not one."""
        if not _DIGITS.fullmatch(self.raw_id):
            raise InvalidWorkshopId(self.url, self.raw_id)
        return int(self.raw_id)


def iter_urls(text: str) -> Iterator[str]:
    """Lazily yield unique URLs from free text in first-occurrence order."""
    seen: set[str] = set()
    for found in URL_PATTERN.finditer(text):
        url = found.group(0)
        if url not in seen:
            seen.add(url)
            yield url


def extract_urls(text: str) -> list[str]:
    """Extract all unique absolute URLs from free text."""
    return list(iter_urls(text))


def extract_candidates(text: str) -> list[CandidateURL]:
    """Extract URLs from message text as (not yet suppressed) candidates."""
    return [CandidateURL(url) for url in iter_urls(text)]


def mark_suppressed(candidates: Iterable[CandidateURL], text: str) -> list[CandidateURL]:
    """Flag candidates the author wrapped as <url> (Discord's "no embed" syntax).

    Checked by substring containment against the original text.
    """
    return [
        replace(candidate, suppressed=f"<{candidate.url}>" in text)
        for candidate in candidates
    ]


def match_workshop_url(url: str, config: WorkshopConfig) -> WorkshopLinkMatch | None:
    """Match a URL against the workshop item link shape.

    Accepts ``{http,https}://steamcommunity.com/{sharedfiles,workshop}/filedetails/?id=...``
    with any number of extra query parameters. Returns None for anything else.
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname or ""
    except ValueError:
        # e.g. a netloc that NFKC-normalizes to contain "/" or "?"
        return None
    if parts.scheme.lower() not in config.workshop_schemes:
        return None
    if hostname != config.workshop_host:
        return None

    path = _FILEDETAILS_PATH.fullmatch(parts.path)
    if path is None or path.group(1) not in config.workshop_sections:
        return None

    params = parse_qs(parts.query, keep_blank_values=True)
    ids = params.pop("id", None)
    if not ids:
        return None

    return WorkshopLinkMatch(url=url, raw_id=ids[0], params=params)

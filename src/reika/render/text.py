"""Text sanitization for Discord markdown: escaping, markup stripping, truncation.

Workshop descriptions are written in Steam's BBCode and routinely contain
links, emoticons, and mentions of other users. Discord treats ``:``, ``@`` and
backticks as markdown sentinels, so everything that reaches an embed passes
through these helpers first.
"""

import re
import unicodedata

from reika.workshop.urls import extract_urls

LINE_BREAK_PATTERN = re.compile(r"\r\n|\n")
MARKUP_TAG_PATTERN = re.compile(r"\[/?[^\]]+?\]")
SENTINEL_PATTERN = re.compile(r"[:@]")
WHITESPACE_PATTERN = re.compile(r"\s+")

OMISSION = " ..."


def escape_backticks(text: str) -> str:
    """Prefix every backtick with a backslash so it cannot open a code span."""
    return text.replace("`", "\\`")


def strip_urls(text: str) -> str:
    """Remove every URL found in the text by exact substring replacement.

    Replacement is global, so a later occurrence of the same string is removed
    too even where it was not part of a link.
    """
    for url in extract_urls(text):
        text = text.replace(url, "")
    return text


def truncate(text: str, limit: int, omission: str = OMISSION) -> str:
    """Shorten text to at most ``limit`` characters, breaking at a space separator.

    When the text is too long, it is cut at the last Unicode space separator
    (category Zs) that leaves room for the omission marker, or hard at that
    point if there is none, and the marker is appended.
    """
    if len(text) <= limit:
        return text

    stop = max(limit - len(omission), 0)
    for index in range(stop, -1, -1):
        if unicodedata.category(text[index]) == "Zs":
            stop = index
            break
    return text[:stop] + omission


def sanitize_description(text: str, limit: int = 200) -> str:
    """Turn a raw workshop description into a single safe line for an embed.

    Steps, in order: strip URLs, flatten line breaks, replace BBCode tags with
    spaces, escape backticks, wrap ``:``/``@`` in backticks, collapse
    whitespace, truncate.
    """
    text = strip_urls(text)
    text = LINE_BREAK_PATTERN.sub(" ", text)
    text = MARKUP_TAG_PATTERN.sub(" ", text)
    text = escape_backticks(text)
    text = SENTINEL_PATTERN.sub(lambda m: f"`{m.group(0)}`", text)
    text = WHITESPACE_PATTERN.sub(" ", text).strip()
    return truncate(text, limit)

"""Rendered embed document, independent of the Discord client library."""

from datetime import datetime

from pydantic import BaseModel


class EmbedAuthor(BaseModel):
    """Byline block: who published the item."""

    name: str
    url: str
    icon_url: str


class EmbedField(BaseModel):
    """A labeled name/value pair shown in the embed body."""

    name: str
    value: str
    inline: bool = False


class DisplayDocument(BaseModel):
    """Everything needed to post one workshop item preview."""

    title: str
    description: str  # Sanitized, at most 200 characters
    color: int
    thumbnail_url: str
    url: str  # The link exactly as the user posted it
    author: EmbedAuthor
    fields: list[EmbedField]
    timestamp: datetime  # Item creation time
    footer: str

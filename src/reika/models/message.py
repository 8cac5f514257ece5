"""Incoming chat message as seen by the workshop pipeline."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MessageEvent:
    """A chat message with the fields the handlers need (no client objects leak in).

    ``channel`` is the platform's opaque destination handle; handlers only pass
    it back to the send callable.
    """

    sender_id: int
    sender_name: str
    text: str
    channel: Any

"""Error types raised by the workshop preview pipeline.

Per-item errors abort a single embed, per-URL errors abort a single link.
Neither is ever reported back to the channel; the dispatcher logs them.
"""


class ReikaError(Exception):
    """Base class for all errors raised by reika."""


class ConfigurationError(ReikaError):
    """Required settings are missing at startup. Not recoverable."""


class InvalidWorkshopId(ReikaError):
    """A matched workshop URL carries an id that is not an integer."""

    def __init__(self, url: str, raw_id: str):
        super().__init__(f"Workshop id {raw_id!r} in {url} is not an integer")
        self.url = url
        self.raw_id = raw_id


class UnsupportedPreviewFormat(ReikaError):
    """The preview image URL has a type token we cannot proxy."""


class MalformedUpstreamPayload(ReikaError):
    """The Steam API returned JSON of an unexpected shape."""


class SteamAPIError(ReikaError):
    """A Steam API request failed at the transport level or returned non-2xx."""

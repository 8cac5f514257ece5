"""Preview image URL parsing and image proxy URL construction."""

from dataclasses import dataclass
from urllib.parse import quote, urlsplit

from reika.config import WorkshopConfig
from reika.errors import UnsupportedPreviewFormat


@dataclass(frozen=True)
class PreviewParts:
    """Path parameters the image proxy needs to fetch a Steam preview image."""

    type: str
    arg0: str
    arg1: str


def parse_preview_url(url: str, config: WorkshopConfig) -> PreviewParts:
    """Split a Steam preview image URL into image proxy parameters.

    Steam serves user-generated previews from ``/ugc/{arg0}/{arg1}/``. Any
    other type token means the upstream format changed, so this raises
    UnsupportedPreviewFormat instead of guessing.
    """
    segments = urlsplit(url).path.split("/")
    type_ = segments[1] if len(segments) > 1 else ""
    args = segments[2:]

    if type_ not in config.preview_types:
        raise UnsupportedPreviewFormat(f"Steam URL type `{type_}` is not supported")
    if len(args) < 2 or not args[0] or not args[1]:
        raise UnsupportedPreviewFormat(f"Steam URL {url} is missing image path arguments")

    return PreviewParts(type=type_, arg0=args[0], arg1=args[1])


def build_thumbnail_url(parts: PreviewParts, config: WorkshopConfig) -> str:
    """Expand the image proxy URL for a parsed preview image."""
    path = "/".join(quote(value, safe="") for value in (parts.type, parts.arg0, parts.arg1))
    return f"https://{config.image_proxy_host}/{path}/image.jpg?{config.image_proxy_query}"

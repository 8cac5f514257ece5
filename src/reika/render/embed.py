"""Pure functions mapping Steam records to a workshop preview DisplayDocument.

No API calls and no Discord objects: the dispatcher fetches the records and
converts the resulting document for the client library.
"""

from datetime import datetime, timezone

from pydantic import ValidationError

from reika.config import WorkshopConfig
from reika.errors import MalformedUpstreamPayload
from reika.models.embed import DisplayDocument, EmbedAuthor, EmbedField
from reika.models.steam import SteamPlayer, WorkshopItem
from reika.render.text import escape_backticks, sanitize_description
from reika.render.units import days_since, delimited, freshness_label, human_size
from reika.workshop.preview import build_thumbnail_url, parse_preview_url


def is_eligible(raw_item: dict) -> bool:
    """Only public, non-banned items are shown.

    Checked on the raw JSON so that ids Steam did not recognize (which come
    back without these fields) are skipped rather than treated as malformed.
    """
    return raw_item.get("visibility") == 0 and raw_item.get("banned") == 0


def parse_item(raw_item: dict) -> WorkshopItem:
    """Validate one publishedfiledetails entry."""
    try:
        return WorkshopItem.model_validate(raw_item)
    except ValidationError as exc:
        raise MalformedUpstreamPayload(
            f"Workshop item {raw_item.get('publishedfileid')!r} has unexpected shape: {exc}"
        ) from exc


def parse_author(body: dict) -> SteamPlayer:
    """Pick the first player from a GetPlayerSummaries response body."""
    try:
        players = body["response"]["players"]
    except (KeyError, TypeError) as exc:
        raise MalformedUpstreamPayload("Player summaries response has no players list") from exc
    if not players:
        raise MalformedUpstreamPayload("Player summaries response is empty")

    try:
        return SteamPlayer.model_validate(players[0])
    except ValidationError as exc:
        raise MalformedUpstreamPayload(f"Player summary has unexpected shape: {exc}") from exc


def build_byline(author: SteamPlayer) -> EmbedAuthor:
    """Persona name, with the real name in parentheses when the profile shows one."""
    name = escape_backticks(author.personaname)
    if author.realname and author.realname.strip():
        name = f"{name} ({escape_backticks(author.realname)})"
    return EmbedAuthor(name=name, url=author.profileurl, icon_url=author.avatar)


def build_stats_field(item: WorkshopItem) -> EmbedField:
    """Subscriber count as the field name; favorites and views as the value."""
    return EmbedField(
        name=f":white_check_mark: **{delimited(item.subscriptions)}**",
        value=" ".join([
            f":hearts: **{delimited(item.favorited)}**",
            f":eye: **{delimited(item.views)}**",
        ]),
        inline=True,
    )


def build_freshness_field(
    item: WorkshopItem, config: WorkshopConfig, now: datetime | None = None
) -> EmbedField:
    """File size as the field name; days since the last update as the value."""
    days = days_since(item.time_updated, now)
    label = freshness_label(days)
    if days <= config.new_item_days:
        label = f"{label} :new:"
    return EmbedField(
        name=f":file_folder: **`{human_size(item.file_size)}`**",
        value=f":tools: Last update: {label}",
        inline=True,
    )


def render_item(
    item: WorkshopItem,
    author: SteamPlayer,
    url: str,
    config: WorkshopConfig,
    now: datetime | None = None,
) -> DisplayDocument:
    """Render one workshop item and its author into a DisplayDocument.

    Args:
        item: Validated item record. The caller has already checked is_eligible.
        author: The item creator's player summary.
        url: The link exactly as the user posted it.
        config: Colors, limits, and image proxy settings.
        now: Clock override for the freshness label.

    Raises:
        UnsupportedPreviewFormat: The preview image cannot be proxied.
    """
    tags = item.tag_names
    thumbnail_url = build_thumbnail_url(parse_preview_url(item.preview_url, config), config)

    return DisplayDocument(
        title=str(item.title),
        description=sanitize_description(item.description, config.description_limit),
        color=config.mod_color if config.mod_tag in tags else config.default_color,
        thumbnail_url=thumbnail_url,
        url=url,
        author=build_byline(author),
        fields=[
            build_stats_field(item),
            build_freshness_field(item, config, now),
        ],
        timestamp=datetime.fromtimestamp(item.time_created, tz=timezone.utc),
        footer=", ".join(escape_backticks(tag) for tag in tags),
    )

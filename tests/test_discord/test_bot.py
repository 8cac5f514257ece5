"""Tests for discord.py wiring: embed conversion, sending, and message callbacks."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, PropertyMock, patch

import discord

from reika.discord.bot import ReikaBot, send_document, send_text, to_discord_embed
from reika.models.embed import DisplayDocument, EmbedAuthor, EmbedField


def _document() -> DisplayDocument:
    return DisplayDocument(
        title="Test Mod",
        description="Check out now",
        color=0xFF71EF,
        thumbnail_url="https://img.example.net/ugc/1/2/image.jpg?extension=jpeg",
        url="https://steamcommunity.com/sharedfiles/filedetails/?id=1",
        author=EmbedAuthor(name="Foo (Bar)", url="https://p.example", icon_url="https://a.example"),
        fields=[
            EmbedField(name="stats", value="numbers", inline=True),
            EmbedField(name="size", value="fresh", inline=True),
        ],
        timestamp=datetime(2022, 10, 17, 9, 46, 40, tzinfo=timezone.utc),
        footer="Mod, Road",
    )


def _http_exception() -> discord.HTTPException:
    response = MagicMock()
    response.status = 403
    response.reason = "Forbidden"
    return discord.HTTPException(response, "Missing Permissions")


def _message(content: str, bot: bool = False, mentions: list | None = None) -> MagicMock:
    message = MagicMock()
    message.content = content
    message.author.bot = bot
    message.author.id = 42
    message.author.name = "alice"
    message.mentions = mentions or []
    message.channel = MagicMock()
    return message


# -- to_discord_embed --


def test_to_discord_embed_maps_every_part():
    embed = to_discord_embed(_document())
    assert embed.title == "Test Mod"
    assert embed.description == "Check out now"
    assert embed.color.value == 0xFF71EF
    assert embed.url == "https://steamcommunity.com/sharedfiles/filedetails/?id=1"
    assert embed.thumbnail.url == "https://img.example.net/ugc/1/2/image.jpg?extension=jpeg"
    assert embed.author.name == "Foo (Bar)"
    assert embed.author.url == "https://p.example"
    assert embed.author.icon_url == "https://a.example"
    assert [(f.name, f.value, f.inline) for f in embed.fields] == [
        ("stats", "numbers", True),
        ("size", "fresh", True),
    ]
    assert embed.footer.text == "Mod, Road"
    assert embed.timestamp == datetime(2022, 10, 17, 9, 46, 40, tzinfo=timezone.utc)


# -- send helpers --


async def test_send_document_posts_embed():
    channel = MagicMock()
    channel.send = AsyncMock()
    await send_document(channel, _document())
    embed = channel.send.await_args.kwargs["embed"]
    assert isinstance(embed, discord.Embed)
    assert embed.title == "Test Mod"


async def test_send_document_swallows_discord_errors():
    """A failed post is logged, never raised."""
    channel = MagicMock()
    channel.send = AsyncMock(side_effect=_http_exception())
    await send_document(channel, _document())
    channel.send.assert_awaited_once()


async def test_send_text_swallows_discord_errors():
    channel = MagicMock()
    channel.send = AsyncMock(side_effect=_http_exception())
    await send_text(channel, "hi")
    channel.send.assert_awaited_once_with("hi")


# -- on_message --


def _bot(config) -> ReikaBot:
    return ReikaBot(steam=AsyncMock(), config=config, rival_bot_id="155149108183695360")


async def test_on_message_ignores_bots(config):
    bot = _bot(config)
    with patch("reika.discord.bot.handle_message", new_callable=AsyncMock) as handle:
        await bot.on_message(_message("https://steamcommunity.com/x", bot=True))
    handle.assert_not_called()


async def test_on_message_dispatches_links(config):
    bot = _bot(config)
    message = _message("look https://steamcommunity.com/sharedfiles/filedetails/?id=1")
    with patch("reika.discord.bot.handle_message", new_callable=AsyncMock) as handle:
        await bot.on_message(message)

    handle.assert_awaited_once()
    event, steam, passed_config, send = handle.await_args.args
    assert event.sender_id == 42
    assert event.sender_name == "alice"
    assert event.text == message.content
    assert event.channel is message.channel
    assert steam is bot.steam
    assert passed_config is config
    assert send is send_document


async def test_on_message_replies_to_mentions(config):
    bot = _bot(config)
    me = MagicMock()
    me.id = 900
    message = _message("<@900> かわいい", mentions=[me])

    with (
        patch.object(ReikaBot, "user", new_callable=PropertyMock, return_value=me),
        patch("reika.discord.bot.handle_message", new_callable=AsyncMock),
        patch("reika.discord.bot.send_text", new_callable=AsyncMock) as send_text_mock,
    ):
        await bot.on_message(message)

    send_text_mock.assert_awaited_once_with(message.channel, "<@42> 知ってる。")


async def test_on_message_without_matching_phrase_sends_nothing(config):
    bot = _bot(config)
    me = MagicMock()
    me.id = 900
    message = _message("<@900> hello", mentions=[me])

    with (
        patch.object(ReikaBot, "user", new_callable=PropertyMock, return_value=me),
        patch("reika.discord.bot.handle_message", new_callable=AsyncMock),
        patch("reika.discord.bot.send_text", new_callable=AsyncMock) as send_text_mock,
    ):
        await bot.on_message(message)

    send_text_mock.assert_not_called()

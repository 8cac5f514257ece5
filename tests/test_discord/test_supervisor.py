"""Tests for the Discord connection supervisor."""

from unittest.mock import AsyncMock, patch

import discord
import pytest

from reika.config import Settings
from reika.discord.supervisor import BotSupervisor


def _settings() -> Settings:
    return Settings(discord_token="token", steam_api_key="key", steam_img_proxy_host="img.example.net")


async def test_restarts_after_failure():
    """A dropped connection is retried; a clean stop ends the loop."""
    supervisor = BotSupervisor(_settings())
    run_once = AsyncMock(side_effect=[ConnectionResetError("gateway closed"), None])

    with (
        patch.object(BotSupervisor, "_run_once", run_once),
        patch("asyncio.sleep", new_callable=AsyncMock),
    ):
        await supervisor.run_forever()

    assert run_once.await_count == 2


async def test_login_failure_is_not_retried():
    """A rejected token is fatal."""
    supervisor = BotSupervisor(_settings())
    run_once = AsyncMock(side_effect=discord.LoginFailure("Improper token has been passed."))

    with patch.object(BotSupervisor, "_run_once", run_once):
        with pytest.raises(discord.LoginFailure):
            await supervisor.run_forever()

    assert run_once.await_count == 1


def test_not_connected_before_start():
    assert BotSupervisor(_settings()).connected is False

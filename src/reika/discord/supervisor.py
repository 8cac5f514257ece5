"""Connection supervisor: keeps the Discord client running across failures."""

import asyncio
import logging

import discord
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_not_exception_type,
    wait_exponential_jitter,
)

from reika.config import Settings, WorkshopConfig
from reika.discord.bot import ReikaBot
from reika.steam.client import SteamClient

logger = logging.getLogger(__name__)


class BotSupervisor:
    """Runs ReikaBot and restarts it with capped exponential backoff.

    A fresh client is built for every attempt; the Steam client is shared.
    A rejected token (LoginFailure) is fatal and is not retried.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self.bot: ReikaBot | None = None

    @property
    def connected(self) -> bool:
        return self.bot is not None and self.bot.is_ready() and not self.bot.is_closed()

    async def run_forever(self) -> None:
        config = self._settings.workshop_config()
        async with SteamClient(config, self._settings.steam_api_key) as steam:
            async for attempt in AsyncRetrying(
                retry=retry_if_not_exception_type((discord.LoginFailure, asyncio.CancelledError)),
                wait=wait_exponential_jitter(initial=1, max=60, jitter=2),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    await self._run_once(steam, config)

    async def _run_once(self, steam: SteamClient, config: WorkshopConfig) -> None:
        self.bot = ReikaBot(
            steam=steam,
            config=config,
            rival_bot_id=self._settings.rival_bot_id,
        )
        async with self.bot:
            await self.bot.start(self._settings.discord_token)

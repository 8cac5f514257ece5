"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from reika.app import app
from reika.config import WorkshopConfig

WORKSHOP_URL = "https://steamcommunity.com/sharedfiles/filedetails/?id=2881031511"
PREVIEW_URL = "https://steamuserimages-a.akamaihd.net/ugc/1851190937427364981/A1B2C3D4E5F6/"
CREATED = 1_666_000_000  # 2022-10-17T09:46:40Z
UPDATED = 1_771_545_600  # 2026-02-20T00:00:00Z


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def config() -> WorkshopConfig:
    """Pipeline constants with a fixed image proxy host."""
    return WorkshopConfig(image_proxy_host="img.example.net")


@pytest.fixture
def make_raw_item():
    """Factory for a publishedfiledetails entry as Steam returns it."""

    def _make(**overrides) -> dict:
        item = {
            "publishedfileid": "2881031511",
            "result": 1,
            "creator": "76561198000000001",
            "creator_app_id": 255710,
            "consumer_app_id": 255710,
            "filename": "",
            "file_size": 1234567,
            "file_url": "",
            "hcontent_file": "1234",
            "preview_url": PREVIEW_URL,
            "hcontent_preview": "5678",
            "title": "Test Mod",
            "description": "Check https://example.com out [b]now[/b]",
            "time_created": CREATED,
            "time_updated": UPDATED,
            "visibility": 0,
            "banned": 0,
            "ban_reason": "",
            "subscriptions": 1234567,
            "favorited": 8910,
            "lifetime_subscriptions": 2000000,
            "lifetime_favorited": 9000,
            "views": 54321,
            "tags": [{"tag": "Mod"}, {"tag": "Road"}],
        }
        item.update(overrides)
        return item

    return _make


@pytest.fixture
def make_raw_player():
    """Factory for a GetPlayerSummaries player entry."""

    def _make(**overrides) -> dict:
        player = {
            "steamid": "76561198000000001",
            "personaname": "Foo",
            "profileurl": "https://steamcommunity.com/id/foo/",
            "avatar": "https://avatars.example.net/foo.jpg",
            "realname": "",
            "loccountrycode": "JP",
        }
        player.update(overrides)
        return player

    return _make

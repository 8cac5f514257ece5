"""Steam Web API access."""

from reika.steam.client import SteamClient

__all__ = ["SteamClient"]

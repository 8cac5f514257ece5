"""Steam Web API record models (workshop items and player summaries)."""

from pydantic import BaseModel, ConfigDict


class WorkshopTag(BaseModel):
    """One entry of a workshop item's tag list, e.g. {"tag": "Mod"}."""

    tag: str


class WorkshopItem(BaseModel):
    """A published file record from GetPublishedFileDetails.

    Only the fields the embed needs are declared; everything else Steam sends
    is ignored. Steam encodes 64-bit ids and sizes as strings in some
    responses, which pydantic's lax mode parses into ints.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    publishedfileid: int
    title: str
    description: str
    visibility: int
    banned: int
    tags: list[WorkshopTag]
    creator: int  # 64-bit Steam id of the author
    subscriptions: int
    favorited: int
    views: int
    file_size: int  # bytes
    time_created: int  # epoch seconds
    time_updated: int  # epoch seconds
    preview_url: str

    @property
    def tag_names(self) -> list[str]:
        return [t.tag for t in self.tags]


class SteamPlayer(BaseModel):
    """A player summary from GetPlayerSummaries (the item's author)."""

    personaname: str
    realname: str | None = None  # Only present when the profile is public
    profileurl: str
    avatar: str
    loccountrycode: str | None = None

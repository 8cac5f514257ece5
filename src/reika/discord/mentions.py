"""Canned replies when someone mentions the bot."""

import re


def _emoji(*names: str) -> str:
    return "|".join(re.escape(f":{name}:") for name in names)


# First matching rule wins. "{rival}" is the rival bot, "{sender}" the author.
REPLY_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"意気込み"), "<@{rival}> あんたには負けないんだから"),
    (re.compile(r"(?:ちゅっ?)+"), "<@{sender}> 二度とわたしに話しかけないで"),
    (re.compile(_emoji("peropero", "oppai", "ashi", "eroi")), "<@{sender}> 二度とわたしに話しかけないで"),
    (re.compile(_emoji("kawaii")), "<@{sender}> 知ってる。"),
    (re.compile(r"かわいい|kawaii|可爱"), "<@{sender}> 知ってる。"),
]


def strip_mention_prefix(content: str, bot_id: int) -> str:
    """Remove a leading <@bot_id> (or nickname form <@!bot_id>) and the whitespace after it."""
    return re.sub(rf"^<@!?{bot_id}>\s+", "", content)


def reply_for_mention(content: str, sender_id: int, bot_id: int, rival_bot_id: str) -> str | None:
    """Pick the canned reply for a message that mentions the bot, if any."""
    text = strip_mention_prefix(content, bot_id)
    for pattern, template in REPLY_RULES:
        if pattern.search(text):
            return template.format(rival=rival_bot_id, sender=sender_id)
    return None

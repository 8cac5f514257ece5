"""Reika: Steam Workshop link previews for Discord."""

"""The song record shared by the player, the playlists and the history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class Song:
    """A playable track: its title, its artist and the URL of its audio."""

    name: str = ""
    author: str = ""
    link: str = ""

    def to_json(self) -> dict[str, str]:
        return {"name": self.name, "author": self.author, "link": self.link}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Song":
        """Build a song from its stored form; missing fields become empty."""
        return cls(
            name=_text(data.get("name")),
            author=_text(data.get("author")),
            link=_text(data.get("link")),
        )

    @classmethod
    def from_track(cls, track: Mapping[str, Any]) -> "Song":
        """Build a song from a track record of the catalogue API."""
        return cls(
            name=_text(track.get("name")),
            author=_text(track.get("artist_name")),
            link=_text(track.get("audio")),
        )

    def __str__(self) -> str:
        return f"Track: {self.name} | Artist: {self.author}"
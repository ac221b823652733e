"""The music library: loaded songs, listening history and per-user playlists."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, Iterable

import requests

from muzodajnia.auth import User
from muzodajnia.playback import play_url
from muzodajnia.songs import Song

FETCH_TIMEOUT = 30


class PlaylistError(Exception):
    """Raised when a playlist operation cannot be carried out."""


class MusicPlayer:
    """Holds the songs on screen, the history and the user's playlists on disk."""

    def __init__(
        self,
        db_dir: str | Path = "db",
        playback: Callable[[str, Song], None] = play_url,
    ) -> None:
        self.db_dir = Path(db_dir)
        self.playback = playback
        self.loaded: list[Song] = []
        self.last_songs: list[Song] = []
        self.current: Song | None = None

    # Catalogue

    def fetch_songs(self, url: str) -> list[dict[str, Any]]:
        """Fetch the track records of a catalogue query; failures yield none."""
        try:
            response = requests.get(url, timeout=FETCH_TIMEOUT)
        except requests.RequestException as error:
            print(f"\nRequest failed: {error}\n", file=sys.stderr)
            return []
        if response.status_code != 200:
            print(
                f"\nRequest failed. Status code: {response.status_code}\n",
                file=sys.stderr,
            )
            return []
        try:
            root = response.json()
        except ValueError as error:
            print(f"\nJSON parsing failed: {error}", file=sys.stderr)
            return []
        results = root.get("results") if isinstance(root, dict) else None
        return results if isinstance(results, list) else []

    def load_songs(self, songs: Iterable[Song]) -> None:
        self.loaded = list(songs)

    def load_tracks(self, tracks: Iterable[dict[str, Any]]) -> None:
        """Replace the loaded songs with those built from catalogue tracks."""
        self.loaded = [Song.from_track(track) for track in tracks]

    def list_loaded_songs(self) -> None:
        # The listing starts at 1; the numbers shown are the ids 'play' takes.
        for index, song in enumerate(self.loaded[1:], start=1):
            print(f"{index}. {song}")

    def play(self, song_id: int) -> None:
        """Play a loaded song by its id and record it in the history."""
        if not self.loaded:
            print(
                "\nNo songs loaded. Try first using 'search' 'weekpopular' etc. "
                "to load some songs.\n"
            )
        elif song_id > len(self.loaded):
            print("\nThere are no song with this ID.\n")
        elif 0 <= song_id < len(self.loaded):
            song = self.loaded[song_id]
            self._remember(song)
            self.current = song
            self.playback(song.link, song)
        else:
            print("\nInvalid song index.")

    def _remember(self, song: Song) -> None:
        self.last_songs = [s for s in self.last_songs if s.link != song.link]
        self.last_songs.insert(0, song)

    # History

    def _last_songs_file(self, user: User) -> Path:
        return self.db_dir / "lastSongs" / f"{user.username}.json"

    def save_last_songs(self, user: User | None) -> None:
        """Store the listening history of the user; nothing without a user."""
        if user is None:
            return
        path = self._last_songs_file(user)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps([song.to_json() for song in self.last_songs], indent=4),
            encoding="utf-8",
        )

    def load_last_songs(self, user: User) -> None:
        path = self._last_songs_file(user)
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            root = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            print("\nThere are no last songs.\n")
            return
        self.last_songs = [Song.from_json(item) for item in root or []]

    # Playlists

    def _playlists_file(self, user: User) -> Path:
        return self.db_dir / "playlists" / f"{user.username}.json"

    def _read_playlists(self, user: User) -> dict[str, list[Any]] | None:
        path = self._playlists_file(user)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        try:
            root = json.loads(text) if text.strip() else {}
        except json.JSONDecodeError as error:
            raise PlaylistError(f"Playlist file {path} is damaged: {error}") from error
        if not isinstance(root, dict):
            raise PlaylistError(f"Playlist file {path} is damaged.")
        return root

    def _write_playlists(self, user: User, root: dict[str, list[Any]]) -> None:
        path = self._playlists_file(user)
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            path.write_text(json.dumps(root, indent=4), encoding="utf-8")
        except OSError as error:
            raise PlaylistError("Failed to write updated playlist file.") from error

    def _existing_playlists(self, user: User, name: str) -> dict[str, list[Any]]:
        root = self._read_playlists(user)
        if root is None:
            raise PlaylistError("No playlists found for this user.")
        if name not in root:
            raise PlaylistError(f'Playlist "{name}" does not exist.')
        return root

    def playlists(self, user: User) -> dict[str, list[Song]]:
        """Return the user's playlists by name, in name order."""
        root = self._read_playlists(user) or {}
        return {
            name: [Song.from_json(item) for item in root[name] or []]
            for name in sorted(root)
        }

    def list_playlists(self, user: User) -> None:
        self._playlists_file(user).parent.mkdir(parents=True, exist_ok=True)
        names = list(self.playlists(user))
        if not names:
            print("\nThere are no playlists created.")
            return
        print("\nYour playlists:")
        for index, name in enumerate(names):
            print(f"{index}. {name}")

    def list_playlist_songs(self, user: User, name: str) -> list[Song]:
        """Show the songs of a playlist and load them for playing."""
        root = self._existing_playlists(user, name)
        songs = [Song.from_json(item) for item in root[name] or []]
        if not songs:
            print(f'\nPlaylist "{name}" is empty.')
            return songs
        print(f'\nSongs in playlist "{name}":')
        self.loaded = songs
        for index, song in enumerate(songs):
            print(f"{index}. {song.author} - {song.name}")
        return songs

    def create_playlist(self, user: User, name: str) -> None:
        root = self._read_playlists(user) or {}
        if name in root:
            raise PlaylistError(f'Playlist "{name}" already exists.')
        root[name] = []
        self._write_playlists(user, root)
        print(f'\nSuccessfully created playlist "{name}".')

    def delete_playlist(self, user: User, name: str) -> None:
        root = self._existing_playlists(user, name)
        del root[name]
        self._write_playlists(user, root)
        print(f'\nPlaylist "{name}" has been deleted.')

    def add_song_to_playlist(self, user: User, song_id: int, name: str) -> None:
        """Append a loaded song, by its id, to a playlist."""
        if not self.loaded:
            raise PlaylistError("No songs loaded. Use 'search' or 'weekpopular' first.")
        if not 0 <= song_id < len(self.loaded):
            raise PlaylistError("Invalid song ID.")
        root = self._read_playlists(user) or {}
        if name not in root:
            raise PlaylistError(f'Playlist "{name}" does not exist.')
        song = self.loaded[song_id]
        root[name] = list(root[name] or []) + [song.to_json()]
        self._write_playlists(user, root)
        print(f'\nAdded "{song.author} - {song.name}" to playlist "{name}".')

    def delete_song_from_playlist(self, user: User, song_id: int, name: str) -> None:
        """Remove the song at position song_id from a playlist."""
        self._playlists_file(user).parent.mkdir(parents=True, exist_ok=True)
        root = self._existing_playlists(user, name)
        songs = list(root[name] or [])
        if not 0 <= song_id < len(songs):
            raise PlaylistError("Invalid song ID.")
        del songs[song_id]
        root[name] = songs
        self._write_playlists(user, root)
        print(f'\nSong removed from playlist "{name}".')
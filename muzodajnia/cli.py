"""The interactive terminal client: a login screen, then the music player."""

from __future__ import annotations

import argparse
import os
import re
from pathlib import Path
from typing import Sequence

from muzodajnia.auth import Auth, User
from muzodajnia.player import MusicPlayer, PlaylistError
from muzodajnia.utils import (
    Command,
    login_help_message,
    login_screen_help_message,
    music_player_help_message,
    register_help_message,
    split_sentence,
    translate_prompt,
    url_encode,
    welcome_message,
)

API_URL_ENV = "MUZODAJNIA_API_URL"
CLIENT_ID_ENV = "MUZODAJNIA_CLIENT_ID"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_song_id(text: str) -> int | None:
    """Read the integer at the start of text, reporting malformed input."""
    match = _LEADING_INT.match(text)
    if match is None:
        print("\nInvalid number format.")
        return None
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        print("\nNumber out of range.")
        return None
    return value


def _catalogue_url(query: str) -> str | None:
    """Build a catalogue request from the configured endpoint and client id."""
    base = os.environ.get(API_URL_ENV)
    if not base:
        print(f"No song catalogue configured. Set {API_URL_ENV} and {CLIENT_ID_ENV}.")
        return None
    client_id = os.environ.get(CLIENT_ID_ENV, "")
    return f"{base}?client_id={url_encode(client_id)}&{query}"


def _show_catalogue(player: MusicPlayer, header: str, query: str) -> None:
    url = _catalogue_url(query)
    if url is None:
        return
    print(header)
    player.load_tracks(player.fetch_songs(url))
    player.list_loaded_songs()


def handle_login_command(auth: Auth, words: Sequence[str]) -> bool:
    """Carry out one login-screen command; return True when the user quits."""
    if not words:
        return False
    command = translate_prompt(words[0])
    if command is Command.REGISTER:
        if len(words) == 1:
            register_help_message()
        else:
            auth.interactive_register(words[1])
    elif command is Command.LOG_IN:
        if len(words) == 1:
            login_help_message()
        else:
            auth.interactive_log_in(words[1])
    elif command is Command.HELP:
        login_screen_help_message()
    elif command is Command.EXIT:
        return True
    else:
        print("Unknown command!")
    return False


def _playlist_command(player: MusicPlayer, user: User, command: Command, words: Sequence[str]) -> None:
    if command is Command.PLAYLISTS:
        player.list_playlists(user)
    elif command is Command.PLAYLIST:
        if len(words) < 2:
            print("Wrong number of parameters. Use 'help'.")
            return
        player.list_playlist_songs(user, words[1])
    elif command is Command.ADD:
        if len(words) <= 2:
            print("\nMissing argument for song ID.")
            return
        song_id = _parse_song_id(words[1])
        if song_id is not None:
            player.add_song_to_playlist(user, song_id, words[2])
    elif command is Command.DELETE_SONG:
        if len(words) <= 2:
            print("\nMissing argument for song ID.")
            return
        song_id = _parse_song_id(words[2])
        if song_id is not None:
            player.delete_song_from_playlist(user, song_id, words[1])
    elif command is Command.CREATE:
        if len(words) < 2:
            print("Wrong number of parameters. Use 'help'.")
            return
        player.create_playlist(user, words[1])
    elif command is Command.DELETE:
        if len(words) < 2:
            print("Wrong number of parameters. Use 'help'.")
            return
        player.delete_playlist(user, words[1])


_PLAYLIST_COMMANDS = frozenset(
    {
        Command.PLAYLISTS,
        Command.PLAYLIST,
        Command.ADD,
        Command.DELETE_SONG,
        Command.CREATE,
        Command.DELETE,
    }
)


def handle_player_command(player: MusicPlayer, user: User, words: Sequence[str]) -> bool:
    """Carry out one music-player command; return True when the user quits."""
    if not words:
        return False
    command = translate_prompt(words[0])
    if command is Command.PLAY:
        if len(words) == 1:
            print("Invalid ID of the song.")
        else:
            song_id = _parse_song_id(words[1])
            if song_id is not None:
                player.play(song_id)
    elif command is Command.HELP:
        music_player_help_message()
    elif command is Command.WEEK_POPULAR:
        _show_catalogue(
            player,
            "List of most popular songs this week:",
            "audioformat=ogg&order=popularity_week&limit=20",
        )
    elif command is Command.MONTH_POPULAR:
        _show_catalogue(
            player,
            "List of most popular songs this month:",
            "audioformat=ogg&order=popularity_month&limit=20",
        )
    elif command is Command.LAST_SONGS:
        if not player.last_songs:
            print("There are no songs you recently listened to...")
        else:
            print("List of last songs you listened to:")
            player.load_songs(list(player.last_songs))
            player.list_loaded_songs()
    elif command is Command.SEARCH:
        if len(words) < 2:
            print("What do you want to search?")
        else:
            query = " ".join(words[1:])
            _show_catalogue(
                player,
                f"\nSearch results for '{query}':",
                f"limit=200&namesearch={url_encode(query)}",
            )
    elif command in _PLAYLIST_COMMANDS:
        try:
            _playlist_command(player, user, command, words)
        except PlaylistError as error:
            print(f"\n{error}")
    elif command is Command.EXIT:
        player.save_last_songs(user)
        return True
    else:
        print("Unknown command! Try 'help'")
    return False


def _read_words() -> list[str] | None:
    try:
        return split_sentence(input())
    except EOFError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the terminal client until the user exits or input ends."""
    parser = argparse.ArgumentParser(prog="muzodajnia", description="Terminal music library.")
    parser.add_argument("--db-dir", default="db", help="directory holding the databases")
    args = parser.parse_args(argv)

    db_dir = Path(args.db_dir)
    auth = Auth(db_dir / "users.db")
    player = MusicPlayer(db_dir)

    welcome_message()

    while not auth.logged_in:
        words = _read_words()
        if words is None or handle_login_command(auth, words):
            player.save_last_songs(auth.user)
            return 0

    user = auth.user
    player.load_last_songs(user)

    while True:
        words = _read_words()
        if words is None:
            player.save_last_songs(user)
            return 0
        if handle_player_command(player, user, words):
            return 0
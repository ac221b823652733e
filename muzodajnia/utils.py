"""Command parsing, text helpers and the help screens of the terminal client."""

from __future__ import annotations

import getpass
import string
from enum import Enum, auto

_URL_SAFE = frozenset((string.ascii_letters + string.digits + "-_.~").encode("ascii"))


class Command(Enum):
    """Commands understood by the login screen and the music player screen."""

    HELP = auto()
    LOG_IN = auto()
    REGISTER = auto()
    WEEK_POPULAR = auto()
    MONTH_POPULAR = auto()
    LAST_SONGS = auto()
    SEARCH = auto()
    PLAY = auto()
    PLAYLIST = auto()
    PLAYLISTS = auto()
    ADD = auto()
    CREATE = auto()
    DELETE = auto()
    DELETE_SONG = auto()
    EXIT = auto()
    UNKNOWN = auto()


_COMMAND_WORDS = {
    "help": Command.HELP,
    "login": Command.LOG_IN,
    "register": Command.REGISTER,
    "weekpopular": Command.WEEK_POPULAR,
    "monthpopular": Command.MONTH_POPULAR,
    "lastsongs": Command.LAST_SONGS,
    "search": Command.SEARCH,
    "play": Command.PLAY,
    "playlist": Command.PLAYLIST,
    "playlists": Command.PLAYLISTS,
    "add": Command.ADD,
    "create": Command.CREATE,
    "delete": Command.DELETE,
    "deletesong": Command.DELETE_SONG,
    "exit": Command.EXIT,
}

_WELCOME = (
    "\n++======================================++",
    "        Welcome to Muzodajnia!",
    "   Your terminal-based music library",
    "++======================================++",
    "Type 'help' to see available commands.\n",
)

_LOGIN_SCREEN_HELP = (
    "\nAvailable commands:\n",
    "  help      - Show this help message",
    "  login     - Log in to your account",
    "  register  - Register a new user",
    "  exit      - Exit the application",
    "\nEnter one of the commands above and press Enter.\n",
)

_MUSIC_PLAYER_HELP = (
    "\n=== Music Command Help ===\n",
    "  weekpopular    - Show and load the most popular songs this week",
    "  monthpopular   - Show and load the most popular songs this month",
    "  lastsongs      - Show and load the most recently added songs",
    "  search <query> - Search for songs by title or artist and load them",
    "  play <track_id>      - Play a song by its ID. To play a song you need to "
    "first use 'weekpopular' 'monthpopular' or 'search' to load some songs.",
    "  playlist <playlist_name>      - Show songs in playlist",
    "  playlists      - Show your playlists",
    "  add <track_id> <playlist_name>     - Add song to playlist",
    "  create <playlist_name>      - Create a playlist",
    "  deletesong <playlist_name> <track_id>      - Delete song from playlist",
    "  delete <playlist_name>      - Delete playlist",
    "\nType a command followed by any required arguments and press Enter.\n",
    "==============================\n",
)

_LOGIN_HELP = (
    "\n=== Login Command Help ===\n",
    "Usage:",
    "  login <username>",
    "\nDescription:",
    "  Logs in to an existing user account.",
    "  You will be prompted to enter your password securely.",
    "\nExample:",
    "  login john_doe",
    "\n===========================\n",
)

_REGISTER_HELP = (
    "\n=== Register Command Help ===\n",
    "Usage:",
    "  register <username>",
    "\nDescription:",
    "  Registers a new user account.",
    "  You will be prompted to enter and confirm your password securely.",
    "\nExample:",
    "  register john_doe",
    "\nNotes:",
    "  - Usernames must be unique.",
    "  - Passwords are hidden as you type.",
    "  - Both password entries must match.",
    "\n==============================\n",
)


def translate_prompt(prompt: str) -> Command:
    """Map a command word, in any letter case, to its Command."""
    return _COMMAND_WORDS.get(prompt.lower(), Command.UNKNOWN)


def split_sentence(sentence: str) -> list[str]:
    """Split a line into its whitespace-separated words."""
    return sentence.split()


def url_encode(value: str) -> str:
    """Percent-encode every byte of the UTF-8 form except unreserved characters.

    Escapes use lower-case hexadecimal digits.
    """
    return "".join(
        chr(byte) if byte in _URL_SAFE else f"%{byte:02x}"
        for byte in value.encode("utf-8")
    )


def get_hidden_input(prompt_message: str) -> str:
    """Read a line from the terminal without echoing it."""
    return getpass.getpass(prompt_message)


def _show(lines: tuple[str, ...]) -> str:
    """Print the lines of a screen and return the text that was printed."""
    text = "\n".join(lines) + "\n"
    print(text, end="")
    return text


def welcome_message() -> str:
    """Print the greeting shown at start-up and return it."""
    return _show(_WELCOME)


def login_screen_help_message() -> str:
    """Print the commands of the login screen and return the text."""
    return _show(_LOGIN_SCREEN_HELP)


def music_player_help_message() -> str:
    """Print the commands of the music player screen and return the text."""
    return _show(_MUSIC_PLAYER_HELP)


def login_help_message() -> str:
    """Print the usage of the login command and return the text."""
    return _show(_LOGIN_HELP)


def register_help_message() -> str:
    """Print the usage of the register command and return the text."""
    return _show(_REGISTER_HELP)
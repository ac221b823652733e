# muzodajnia

A music library for the terminal. After logging in to an account you can
fetch track lists from a song catalogue (this week's or this month's most
popular tracks, or a search by name), stream a track with a one-line status
display, keep named playlists, and come back to the songs you played most
recently.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Running

```
muzodajnia [--db-dir DIR]
```

`--db-dir` names the directory that holds the data; it defaults to `db`
under the current working directory. Inside it:

- `users.db` holds the accounts, one per line: username, the unsalted
  SHA-256 hex digest of the password, and a role word.
- `playlists/<user>.json` holds the user's playlists, by name.
- `lastSongs/<user>.json` holds the user's recently played songs, newest first.

The program reads one command per line. It stops on `exit` or at the end of
input; in both cases, once a user has logged in, the recently played songs
are saved.

### Song catalogue

The catalogue commands (`weekpopular`, `monthpopular`, `search`) need two
environment variables:

- `MUZODAJNIA_API_URL` – the address of the catalogue's track query.
- `MUZODAJNIA_CLIENT_ID` – the client identifier sent with each query.

A request is made to
`$MUZODAJNIA_API_URL?client_id=<id>&<query>`, and the answer is expected to
be JSON with a `results` list whose entries carry `name`, `artist_name` and
`audio` (the URL of the audio). Without `MUZODAJNIA_API_URL` these commands
only print a message saying the catalogue is not configured.

### Before logging in

| Command | What it does |
|---|---|
| `help` | Shows the commands of this screen. |
| `register <username>` | Creates an account. The password is asked for twice and not echoed. |
| `login <username>` | Logs in to an existing account. |
| `exit` | Quits. |

### After logging in

| Command | What it does |
|---|---|
| `help` | Shows the commands of this screen. |
| `weekpopular` | Loads and lists the most popular tracks of the week (20). |
| `monthpopular` | Loads and lists the most popular tracks of the month (20). |
| `search <query>` | Searches tracks by name (up to 200) and loads the results. |
| `lastsongs` | Loads and lists the songs you played most recently. |
| `play <track_id>` | Plays a loaded track. |
| `playlists` | Lists your playlists, in name order. |
| `playlist <name>` | Shows a playlist and loads its songs. |
| `create <name>` | Creates an empty playlist. |
| `add <track_id> <name>` | Adds a loaded track to a playlist. |
| `deletesong <name> <track_id>` | Removes the track at that position from a playlist. |
| `delete <name>` | Deletes a playlist. |
| `exit` | Saves your recently played songs and quits. |

Track ids are positions in the loaded list, counted from 0. The listings
after `weekpopular`, `monthpopular`, `search` and `lastsongs` are numbered
from 1, so the first loaded track is not shown there; `playlist` lists every
song from 0.

### Playback keys

While a track plays:

| Key | Action |
|---|---|
| Space | Pause or resume. |
| Left | Go back one second. |
| Right | Go forward one second. |
| Up | Raise the volume by 10%. |
| Down | Lower the volume by 10%. |
| Esc | Stop playback. |

The whole track is downloaded first and then played through the pygame
mixer.

## Using it as a library

```python
from muzodajnia.auth import Auth, UserExistsError
from muzodajnia.player import MusicPlayer, PlaylistError
from muzodajnia.songs import Song

auth = Auth("db/users.db")
password = "password"
try:
    auth.register("alice", password)
except UserExistsError:
    pass

if auth.log_in("alice", password):
    user = auth.user
    player = MusicPlayer("db")
    player.create_playlist(user, "favourites")
    player.load_songs([Song("Song", "Artist", "https://example.com/song.ogg")])
    player.add_song_to_playlist(user, 0, "favourites")
    print(player.playlists(user))
```

Modules:

- `muzodajnia.auth` – `Auth` (`register`, `log_in`, `users`, `ensure_db`,
  `interactive_register`, `interactive_log_in`), `User`, `UserRole`,
  `UserExistsError`, `hash_password`, `role_from_string`.
- `muzodajnia.player` – `MusicPlayer` (loaded songs, history, playlists,
  `fetch_songs`, `play`) and `PlaylistError`, raised when a playlist
  operation cannot be carried out.
- `muzodajnia.songs` – `Song`, with `to_json`, `from_json` and `from_track`.
- `muzodajnia.playback` – `play_url`, `format_time`, `progress_bar`,
  `status_line`.
- `muzodajnia.utils` – `Command`, `translate_prompt`, `split_sentence`,
  `url_encode`, `get_hidden_input` and the help screens.
- `muzodajnia.cli` – `main`, `handle_login_command`, `handle_player_command`.

`MusicPlayer` takes a `playback` callable, `play_url` by default, which is
called with the link and the song to play.

## What it does not do

- It comes with no catalogue address or client identifier; the catalogue
  commands work only once the environment variables above are set.
- Accounts carry a role (`free`, `premium`, `admin`), but nothing in the
  program treats the roles differently, and new accounts are always free.
- There is no logging out or switching users within one run.
"""Terminal music library with user accounts, playlists, listening history and streaming playback."""

__version__ = "0.1.0"
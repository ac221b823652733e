"""Streaming playback of a single song with a one-line terminal display."""

from __future__ import annotations

import io
import math
import os
from typing import Any

import requests
from blessed import Terminal

from muzodajnia.songs import Song

BAR_WIDTH = 30
REFRESH_SECONDS = 0.2
SEEK_SECONDS = 1.0
VOLUME_STEP = 0.1
FETCH_TIMEOUT = 30


def format_time(seconds: float) -> str:
    """Format a duration as MM:SS, dropping fractions of a second."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def progress_bar(current: float, total: float, width: int = BAR_WIDTH) -> str:
    """Draw a bracketed bar with '#' marking the played share of the song."""
    filled = int(current / total * width) if total > 0 else 0
    filled = min(max(filled, 0), width)
    return "[" + "#" * filled + " " * (width - filled) + "]"


def status_line(current: float, total: float, playing: bool, volume: float) -> str:
    """Build the status line shown while a song plays."""
    state = "[PLAYING]" if playing else "[PAUSED]"
    percent = math.ceil(round(volume * 100, 6))
    return (
        f"Time: {format_time(current)} / {format_time(total)}"
        f"  {progress_bar(current, total)}"
        f"  {state}"
        f"  Volume: {percent:>3}%"
        "    "
    )


class _Session:
    """One song loaded into the mixer, with position tracking across seeks."""

    def __init__(self, mixer: Any, audio: bytes) -> None:
        self._music = mixer.music
        self.total = mixer.Sound(io.BytesIO(audio)).get_length()
        self._buffer = io.BytesIO(audio)
        self._music.load(self._buffer)
        self.volume = 1.0
        self._music.set_volume(self.volume)
        self._music.play()
        self._offset = 0.0

    @property
    def playing(self) -> bool:
        return bool(self._music.get_busy())

    @property
    def position(self) -> float:
        elapsed = self._music.get_pos()
        if elapsed < 0:
            return self.total
        return min(self._offset + elapsed / 1000, self.total)

    def toggle(self) -> None:
        if self.playing:
            self._music.pause()
        else:
            self._music.unpause()

    def seek(self, delta: float) -> None:
        target = min(max(self.position + delta, 0.0), self.total)
        was_playing = self.playing
        self._music.play(start=target)
        self._offset = target
        if not was_playing:
            self._music.pause()

    def change_volume(self, delta: float) -> None:
        self.volume = min(max(self.volume + delta, 0.0), 1.0)
        self._music.set_volume(self.volume)

    def stop(self) -> None:
        self._music.stop()

    def run(self, terminal: Terminal, song: Song) -> None:
        print(f"\nNow playing: {song.author} - {song.name}\n\n")
        with terminal.cbreak(), terminal.hidden_cursor():
            while True:
                key = terminal.inkey(timeout=REFRESH_SECONDS)
                if key.code == terminal.KEY_ESCAPE:
                    self.stop()
                    print(terminal.clear, end="", flush=True)
                    return
                if key == " ":
                    self.toggle()
                elif key.code == terminal.KEY_LEFT:
                    self.seek(-SEEK_SECONDS)
                elif key.code == terminal.KEY_RIGHT:
                    self.seek(SEEK_SECONDS)
                elif key.code == terminal.KEY_UP:
                    self.change_volume(VOLUME_STEP)
                elif key.code == terminal.KEY_DOWN:
                    self.change_volume(-VOLUME_STEP)
                line = status_line(self.position, self.total, self.playing, self.volume)
                print("\r" + line, end="", flush=True)


def play_url(url: str, song: Song) -> None:
    """Stream the audio at url and play it until the user presses Escape.

    Space pauses and resumes, the left and right arrows seek by a second,
    the up and down arrows change the volume.
    """
    terminal = Terminal()
    print(terminal.clear, end="", flush=True)
    try:
        response = requests.get(url, timeout=FETCH_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as error:
        print(f"\nCould not fetch the song: {error}\n")
        return

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.mixer.init(frequency=44100)
    try:
        _Session(pygame.mixer, response.content).run(terminal, song)
    except pygame.error as error:
        print(f"\nCould not play the song: {error}\n")
    finally:
        pygame.mixer.quit()
import pytest

from muzodajnia.playback import BAR_WIDTH, format_time, progress_bar, status_line


def _parse(text):
    minutes, seconds = text.split(":")
    return int(minutes) * 60 + int(seconds)


def test_format_time_minutes_and_seconds():
    assert format_time(65) == "01:05"


def test_format_time_drops_fraction():
    assert format_time(599.9) == "09:59"


@pytest.mark.parametrize("seconds", [0, 1, 59, 60, 61, 3599, 3600, 7261.5])
def test_format_time_round_trip(seconds):
    text = format_time(seconds)
    assert _parse(text) == int(seconds)
    minutes, secs = text.split(":")
    assert len(secs) == 2
    assert len(minutes) >= 2


def test_format_time_negative_clamped_to_zero():
    assert format_time(-5) == format_time(0)


def test_progress_bar_empty_at_start():
    assert progress_bar(0, 100, 10) == "[" + " " * 10 + "]"


def test_progress_bar_full_at_end():
    assert progress_bar(100, 100, 10) == "[" + "#" * 10 + "]"


def test_progress_bar_never_overflows():
    assert progress_bar(500, 100, 10) == "[" + "#" * 10 + "]"


def test_progress_bar_zero_total_is_empty():
    assert progress_bar(5, 0, 8) == "[" + " " * 8 + "]"


@pytest.mark.parametrize("current", [0, 10, 33.3, 50, 99, 100])
def test_progress_bar_length_is_constant(current):
    assert len(progress_bar(current, 100, BAR_WIDTH)) == BAR_WIDTH + 2


def test_progress_bar_grows_with_position():
    counts = [progress_bar(t, 60, BAR_WIDTH).count("#") for t in range(0, 61, 5)]
    assert counts == sorted(counts)
    assert counts[0] == 0
    assert counts[-1] == BAR_WIDTH


def test_progress_bar_half():
    assert progress_bar(50, 100, 10).count("#") == 5


def test_status_line_playing():
    line = status_line(0, 60, True, 1.0)
    assert "[PLAYING]" in line
    assert "[PAUSED]" not in line
    assert line.startswith(f"Time: {format_time(0)} / {format_time(60)}")
    assert progress_bar(0, 60) in line


def test_status_line_paused():
    assert "[PAUSED]" in status_line(10, 60, False, 0.5)


def test_status_line_full_volume():
    assert "Volume: 100%" in status_line(0, 60, True, 1.0)


def test_status_line_volume_is_padded():
    full = status_line(0, 60, True, 1.0)
    muted = status_line(0, 60, True, 0.0)
    assert len(full) == len(muted)
    assert muted.rstrip().endswith("Volume:   0%")
import os
import time

import pytest

from tuxtv.utils import (
    DATE_FORMAT_LONG,
    RecordingOptions,
    TranscodeFormat,
    add_seconds,
    build_recording_options,
    compare_timevals,
    format_size,
    format_time,
    format_time2,
    micros_to_string,
    remove_diacritics,
    string_to_micros,
    timeval_to_micros,
)


@pytest.mark.parametrize("h,m,s", [(0, 0, 0), (1, 2, 3), (12, 59, 59), (100, 0, 1)])
def test_format_time_splits_hours_minutes_seconds(h, m, s):
    total = h * 3600 + m * 60 + s
    assert format_time(total) == f"{h:02d}h{m:02d}m{s:02d}s"
    assert format_time2(total) == f"{h:02d}:{m:02d}:{s:02d}"


def test_format_size_bytes():
    assert format_size(0) == "0 byte"
    assert format_size(500) == "500 bytes"
    assert format_size(999) == "999 bytes"


def test_format_size_units():
    assert format_size(1500) == "1.5 kB"
    assert format_size(1000).endswith(" kB")
    assert format_size(1_000_000).endswith(" MB")
    assert format_size(999_999_999).endswith(" MB")
    assert format_size(1_000_000_000).endswith(" GB")


def test_recording_options_without_transcoding(tmp_path):
    directory = str(tmp_path)
    options = build_recording_options(directory, "show")
    assert isinstance(options, RecordingOptions)
    assert options.filename == os.path.join(directory, "show.ts")
    assert options.sout == (
        ':sout=#duplicate{dst=std{access=file,mux=ts,dst="'
        + directory
        + '/show.ts"},dst=display}'
    )


def test_recording_options_with_transcoding():
    fmt = TranscodeFormat(options="vcodec=mp4v", mux="mp4")
    options = build_recording_options("/rec", "news", fmt)
    assert options.filename == os.path.join("/rec", "news.mp4")
    assert options.sout.startswith(":sout=#transcode{vcodec=mp4v}:duplicate{")
    assert "mux=mp4" in options.sout
    assert 'dst="/rec/news.mp4"' in options.sout


def test_timeval_to_micros_and_add_seconds():
    t = timeval_to_micros(12, 34)
    assert t == 12 * 1_000_000 + 34
    assert add_seconds(t, 3) == timeval_to_micros(15, 34)
    assert add_seconds(t, -12) == 34


@pytest.mark.parametrize(
    "first,second,expected",
    [
        ((1, 0), (0, 999_999), 1),
        ((0, 999_999), (1, 0), -1),
        ((5, 10), (5, 20), -1),
        ((5, 20), (5, 10), 1),
        ((5, 20), (5, 20), 0),
    ],
)
def test_compare_timevals(first, second, expected):
    assert compare_timevals(first, second) == expected


def test_time_string_round_trip():
    fmt = "%Y-%m-%d %H:%M:%S"
    text = "2020-05-17 10:30:00"
    micros = string_to_micros(text, fmt)
    assert micros % 1_000_000 == 0
    assert micros_to_string(micros, fmt) == text


def test_time_string_round_trip_long_date_format():
    text = "03/15/2021"
    micros = string_to_micros(text, DATE_FORMAT_LONG)
    assert micros_to_string(micros, DATE_FORMAT_LONG) == text


def test_string_to_micros_keeps_today_for_missing_fields():
    micros = string_to_micros("10:30", "%H:%M")
    today = time.strftime("%Y-%m-%d")
    assert micros_to_string(micros, "%Y-%m-%d") == today
    assert micros_to_string(micros, "%H:%M") == "10:30"


def test_string_to_micros_rejects_mismatch():
    with pytest.raises(ValueError):
        string_to_micros("not a date", "%Y-%m-%d")


def test_micros_to_string_empty_result_is_none():
    assert micros_to_string(0, "") is None


def test_remove_diacritics():
    assert remove_diacritics("Éléphant") == "Elephant"
    assert remove_diacritics("plain") == "plain"
    assert remove_diacritics(None) is None
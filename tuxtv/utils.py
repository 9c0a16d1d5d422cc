"""Formatting, time and text helpers shared across the application."""

from __future__ import annotations

import gettext
import os
import re
import time
import unicodedata
from dataclasses import dataclass

_ = gettext.gettext

DATE_FORMAT = _("%m/%d/%y")
DATE_FORMAT_LONG = _("%m/%d/%Y")
DATETIME_FORMAT_SHORT = _("%m/%d/%Y %H:%M")

USEC_PER_SEC = 1_000_000

_STRFTIME_BUFFER = 1000


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def _split_hms(seconds: int) -> tuple[int, int, int]:
    s = _trunc_mod(seconds, 60)
    m = _trunc_mod(_trunc_div(seconds - s, 60), 60)
    h = _trunc_div(seconds - m * 60 - s, 3600)
    return h, m, s


def format_time(seconds: int) -> str:
    """Format a duration as ``HHhMMmSSs``."""
    h, m, s = _split_hms(seconds)
    return _("%02dh%02dm%02ds") % (h, m, s)


def format_time2(seconds: int) -> str:
    """Format a duration as ``HH:MM:SS``."""
    h, m, s = _split_hms(seconds)
    return _("%02d:%02d:%02d") % (h, m, s)


def format_size(size: int) -> str:
    """Format a byte count with a decimal unit."""
    if size < 1:
        return _("%d byte") % size
    if size < 1000:
        return _("%d bytes") % size
    if size < 1_000_000:
        return _("%1.1f kB") % (size / 1000.0)
    if size < 1_000_000_000:
        return _("%1.1f MB") % (size / 1_000_000.0)
    return _("%1.1f GB") % (size / 1_000_000_000.0)


@dataclass(frozen=True)
class TranscodeFormat:
    """A predefined transcoding format: stream options and container."""

    options: str
    mux: str


@dataclass(frozen=True)
class RecordingOptions:
    """The player output option and the file a recording is written to."""

    sout: str
    filename: str


def build_recording_options(
    directory: str,
    base_filename: str,
    transcode_format: TranscodeFormat | None = None,
) -> RecordingOptions:
    """Build the stream output option for recording into ``directory``.

    Without a transcoding format the stream is stored as MPEG-TS.
    """
    if transcode_format is None:
        mux = "ts"
        transcode = ""
    else:
        mux = transcode_format.mux
        transcode = f"transcode{{{transcode_format.options}}}:"

    filename = os.path.join(directory, f"{base_filename}.{mux}")
    sout = (
        f":sout=#{transcode}duplicate{{dst=std{{access=file,mux={mux},"
        f'dst="{directory}/{base_filename}.{mux}"}},dst=display}}'
    )
    return RecordingOptions(sout=sout, filename=filename)


def timeval_to_micros(seconds: int, microseconds: int) -> int:
    """Combine seconds and microseconds into microseconds."""
    return seconds * USEC_PER_SEC + microseconds


def add_seconds(time_us: int, seconds: int) -> int:
    """Return ``time_us`` moved by a number of seconds."""
    return time_us + seconds * USEC_PER_SEC


def compare_timevals(first: tuple[int, int], second: tuple[int, int]) -> int:
    """Compare two ``(seconds, microseconds)`` pairs, returning -1, 0 or 1."""
    if first > second:
        return 1
    if first < second:
        return -1
    return 0


def micros_to_string(time_us: int, fmt: str) -> str | None:
    """Format a microsecond timestamp in local time.

    Returns None when the formatted text is empty or too long.
    """
    moment = time.localtime(_trunc_div(time_us, USEC_PER_SEC))
    text = time.strftime(fmt, moment)
    if not text or len(text.encode("utf-8")) >= _STRFTIME_BUFFER:
        return None
    return text


_DIRECTIVE_FIELDS = {
    "Y": ("year",),
    "y": ("year",),
    "C": ("year",),
    "G": ("year",),
    "m": ("month",),
    "b": ("month",),
    "B": ("month",),
    "h": ("month",),
    "d": ("day",),
    "e": ("day",),
    "j": ("month", "day"),
    "H": ("hour",),
    "I": ("hour",),
    "p": ("hour",),
    "M": ("minute",),
    "S": ("second",),
    "T": ("hour", "minute", "second"),
    "R": ("hour", "minute"),
    "D": ("year", "month", "day"),
    "F": ("year", "month", "day"),
    "x": ("year", "month", "day"),
    "X": ("hour", "minute", "second"),
    "c": ("year", "month", "day", "hour", "minute", "second"),
}

_DIRECTIVE_RE = re.compile(r"%(.)")


def _parsed_fields(fmt: str) -> set[str]:
    fields: set[str] = set()
    for directive in _DIRECTIVE_RE.findall(fmt):
        fields.update(_DIRECTIVE_FIELDS.get(directive, ()))
    return fields


def string_to_micros(text: str, fmt: str) -> int:
    """Parse local time text into a microsecond timestamp.

    Fields that ``fmt`` does not mention are taken from the current local time.
    Raises ValueError when the text does not match the format.
    """
    parsed = time.strptime(text, fmt)
    now = time.localtime()
    fields = _parsed_fields(fmt)

    def pick(name: str, parsed_value: int, now_value: int) -> int:
        return parsed_value if name in fields else now_value

    moment = (
        pick("year", parsed.tm_year, now.tm_year),
        pick("month", parsed.tm_mon, now.tm_mon),
        pick("day", parsed.tm_mday, now.tm_mday),
        pick("hour", parsed.tm_hour, now.tm_hour),
        pick("minute", parsed.tm_min, now.tm_min),
        pick("second", parsed.tm_sec, now.tm_sec),
        0,
        0,
        -1,
    )
    return int(time.mktime(moment)) * USEC_PER_SEC


def remove_diacritics(text: str | None) -> str | None:
    """Strip combining marks from the canonical decomposition of ``text``."""
    if text is None:
        return None
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.category(c).startswith("M"))
"""The list of scheduled, running and finished recordings."""

from __future__ import annotations

import enum
import logging
import os
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol

from .utils import USEC_PER_SEC

log = logging.getLogger(__name__)

TrashFunction = Callable[[str], None]


class RecordingStatus(enum.IntEnum):
    """Lifecycle state of a recording."""

    WAITING = 0
    PROCESSING = 1
    FINISHED = 2
    SKIPPED = 3
    ERROR = 4


@dataclass
class Recording:
    """A recording of a channel between two instants, in microseconds."""

    title: str
    begin_time: int
    end_time: int
    channel_id: int
    status: RecordingStatus = RecordingStatus.WAITING
    filename: Optional[str] = None
    id: int = -1

    def is_in_progress(self) -> bool:
        """True while the recording is waiting to start or being recorded."""
        return self.status in (RecordingStatus.WAITING, RecordingStatus.PROCESSING)

    def has_time(self, time_us: int) -> bool:
        """True when ``time_us`` falls within the recording period."""
        return self.begin_time <= time_us <= self.end_time

    def is_time_greater(self, time_us: int) -> bool:
        """True when ``time_us`` lies after the end of the recording."""
        return time_us > self.end_time


class RecordingStore(Protocol):
    """Storage that keeps the recordings."""

    def select_recordings(self) -> Iterable[Recording]: ...

    def add_recording(self, recording: Recording) -> None: ...

    def update_recording(self, recording: Recording) -> None: ...

    def delete_recording(self, recording: Recording) -> None: ...


def _now_micros() -> int:
    return time.time_ns() // 1000


class RecordingsList:
    """Recordings kept in memory and mirrored in a store."""

    def __init__(self, store: RecordingStore) -> None:
        self.store = store
        self._recordings: list[Recording] = []

    def __len__(self) -> int:
        return len(self._recordings)

    def __iter__(self):
        return iter(list(self._recordings))

    def load(self) -> None:
        """Replace the list with the recordings held by the store."""
        self._recordings = list(self.store.select_recordings())

    def get(self, index: int) -> Recording:
        """Return the recording at ``index``; raises IndexError if absent."""
        if index < 0:
            raise IndexError(f"no recording at index {index}")
        return self._recordings[index]

    def add(self, recording: Recording) -> None:
        """Store a new recording and append it to the list."""
        self.store.add_recording(recording)
        self._recordings.append(recording)

    def delete(
        self,
        index: int,
        with_file: bool = False,
        trash: Optional[TrashFunction] = None,
    ) -> Recording:
        """Remove a recording from the store and the list.

        With ``with_file``, its file is handed to ``trash`` when it exists.
        Returns the removed recording.
        """
        if with_file and trash is None:
            raise ValueError("a trash function is required to remove the file")
        recording = self.get(index)
        filename = recording.filename
        self.store.delete_recording(recording)
        del self._recordings[index]
        if with_file and filename and os.path.exists(filename):
            log.info("Moving '%s' to the trash", filename)
            assert trash is not None
            trash(filename)
        return recording

    def in_progress(self) -> list[Recording]:
        """Recordings that are waiting or being recorded."""
        return [r for r in self._recordings if r.is_in_progress()]

    def terminated(self) -> list[Recording]:
        """Recordings that are finished, skipped or failed."""
        return [r for r in self._recordings if not r.is_in_progress()]

    def update_status(self, now: Optional[int] = None) -> list[Recording]:
        """Mark overdue recordings as skipped or failed and store them.

        A waiting recording whose end has passed becomes SKIPPED, a
        processing one becomes ERROR. If the store fails, the status of the
        recording is restored and the error propagates.
        Returns the recordings whose status changed.
        """
        if now is None:
            now = _now_micros()
        changed: list[Recording] = []
        for recording in self._recordings:
            new_status = recording.status
            if recording.end_time < now:
                if recording.status is RecordingStatus.WAITING:
                    new_status = RecordingStatus.SKIPPED
                elif recording.status is RecordingStatus.PROCESSING:
                    new_status = RecordingStatus.ERROR
            if new_status != recording.status:
                old_status = recording.status
                recording.status = new_status
                try:
                    self.store.update_recording(recording)
                except Exception:
                    recording.status = old_status
                    raise
                changed.append(recording)
        return changed

    def to_process(self, now: Optional[int] = None) -> list[Recording]:
        """Return the waiting recordings that should be started at ``now``.

        Waiting recordings whose period is over are marked SKIPPED in memory.
        """
        if now is None:
            now = _now_micros()
        ready: list[Recording] = []
        for recording in self._recordings:
            if recording.status is not RecordingStatus.WAITING:
                continue
            if recording.is_time_greater(now):
                recording.status = RecordingStatus.SKIPPED
            elif recording.has_time(now):
                ready.append(recording)
        return ready


def seconds(value: int) -> int:
    """Convert seconds into microseconds."""
    return value * USEC_PER_SEC
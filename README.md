# tuxtv

`tuxtv` is a small pure-Python library with the logic behind a TV and radio
stream viewer. It covers the TV channel catalog, channel logos, scheduled
recordings, and the formatting and time helpers they share. It needs no GUI
toolkit and no third-party packages.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `tuxtv.utils`

- `format_time(seconds)` gives `HHhMMmSSs`. `format_time2(seconds)` gives
  `HH:MM:SS`.
- `format_size(size)` gives a decimal unit: `byte`/`bytes`, then `kB`, `MB`
  and `GB` with one decimal.
- Microsecond timestamps:
  - `timeval_to_micros(seconds, microseconds)` and `add_seconds(time_us, seconds)`.
  - `compare_timevals(first, second)` compares `(seconds, microseconds)` pairs
    and returns -1, 0 or 1.
  - `micros_to_string(time_us, fmt)` formats in local time. It returns `None`
    when the result is empty or too long.
  - `string_to_micros(text, fmt)` parses local time. Fields missing from `fmt`
    are taken from the current time, and text that does not match raises
    `ValueError`.
- `remove_diacritics(text)` strips combining marks after NFD normalisation.
- `build_recording_options(directory, base_filename, transcode_format=None)`
  returns a `RecordingOptions` with `sout` and `filename`:
  - `sout` is the stream-output option that records to a file while still
    displaying the stream.
  - `filename` is the path of the file that is written.
  - Without a `TranscodeFormat(options, mux)` the stream is stored as `.ts`.
- `DATE_FORMAT`, `DATE_FORMAT_LONG` and `DATETIME_FORMAT_SHORT` are the
  translatable date formats.

### `tuxtv.channel_infos`

`TvChannelInfos` is a catalog entry. It holds `name`, `id` (default `-1`),
`logo_filename` and `labels`, and has an `add_label(label)` method.

### `tuxtv.tv_channels`

- `parse_tv_channels(xml_text, progress=None)` yields one `TvChannelInfos`
  for each `<tvchannel>` element, in document order.
  - The channel name is the element's first attribute.
  - Text of `<logo_filename>` and `<label>` child elements is collected.
  - `progress` is called with each name as the element opens.
  - Malformed XML, or a channel with no attribute, raises `ValueError`.
- `synchronize(store, xml_text, logos_url=None, fetch=None, logos_dir=None, progress=None)`
  rebuilds the catalog in `store` and returns the channels it added.
  - It first calls `store.delete_tvchannels()`, then `store.add_tvchannel(...)`
    for each channel.
  - When `logos_url` is given, it calls `fetch(url, destination)` for each
    logo. An `OSError` from `fetch` is logged and skipped.
  - `logos_url` without `fetch` raises `ValueError`.
- `catalog_path(cache_dir, data_dir)` picks the file to read:
  `cache_dir/tv_channels.dat` if it exists, otherwise `data_dir/tv_channels.xml`.
- `logo_url(base_url, logo_name)` joins the two with exactly one `/`.
- `LogoLocator(data_dir, user_logos_dir=...)` finds logos with
  `logo_path(logo_name, none_icon=True)`.
  - It looks in the user logos directory first, then in
    `data_dir/images/channels`.
  - When no logo is found and `none_icon` is true, it returns the data
    directory's `_none.png`. It returns `None` instead if the user directory
    has its own `_none.png`.
  - The default user directory is
    `$XDG_DATA_HOME/tuxtv/images/channels`, falling back to
    `~/.local/share/tuxtv/images/channels`.

### `tuxtv.channel_properties`

`describe_channel(name, url, vlc_options=None, deinterlace_mode=None)` returns
a `ChannelProperties`, the read-only values shown for a channel:

- player options are joined one per line;
- a missing deinterlace mode is shown as `"none"`;
- `editable` is `False`.

### `tuxtv.recordings`

`Recording` has these fields:

- `title`;
- `begin_time` and `end_time`, in microseconds;
- `channel_id`;
- `status`, a `RecordingStatus`: `WAITING`, `PROCESSING`, `FINISHED`,
  `SKIPPED` or `ERROR`;
- `filename` and `id`.

It has `is_in_progress()`, `has_time(time_us)` and `is_time_greater(time_us)`.

`RecordingsList(store)` keeps recordings in memory and mirrors each change in
a store:

- `load()`, `get(index)` and `add(recording)`.
- `delete(index, with_file=False, trash=None)` removes a recording. With
  `with_file`, its file is passed to `trash` if the file exists.
- `in_progress()` and `terminated()` split the list by status.
- `update_status(now=None)` handles overdue recordings. A waiting one becomes
  `SKIPPED` and a processing one becomes `ERROR`, and each change is written
  to the store. If the store raises, the old status is restored.
- `to_process(now=None)` returns the waiting recordings whose period contains
  `now`. Overdue waiting ones are marked `SKIPPED` in memory only.

`seconds(value)` converts seconds to microseconds.

## Example

```python
from tuxtv.utils import format_size, format_time

format_time(3725)   # '01h02m05s'
format_size(1500)   # '1.5 kB'
```

```python
from tuxtv.recordings import Recording, RecordingsList, RecordingStatus, seconds


class MemoryStore:
    def __init__(self):
        self.rows = []

    def select_recordings(self):
        return list(self.rows)

    def add_recording(self, recording):
        self.rows.append(recording)

    def update_recording(self, recording):
        pass

    def delete_recording(self, recording):
        self.rows.remove(recording)


recordings = RecordingsList(MemoryStore())
recordings.add(Recording("News", seconds(100), seconds(200), channel_id=1))
recordings.to_process(seconds(150))      # [the "News" recording]
recordings.update_status(seconds(300))   # its status becomes SKIPPED
```

## What this package does not do

`tuxtv` has no user interface and no command-line program, and it does not
play or record streams itself.

It keeps no storage of its own. The catalog and recordings are written through
a store object that you supply, as in the example above.

It performs no network access. Logos are downloaded only through the `fetch`
function passed to `synchronize`, and files are moved to the trash only
through the `trash` function passed to `RecordingsList.delete`.
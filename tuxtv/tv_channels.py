"""Catalog of known TV channels: parsing, synchronisation and logo lookup."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Protocol, Union

from .channel_infos import TvChannelInfos

log = logging.getLogger(__name__)

NONE_LOGO = "_none.png"
CATALOG_CACHE_FILE = "tv_channels.dat"
CATALOG_DATA_FILE = "tv_channels.xml"

ProgressCallback = Callable[[str], None]
Fetcher = Callable[[str, str], None]


class TvChannelStore(Protocol):
    """Storage that keeps the catalog of TV channels."""

    def delete_tvchannels(self) -> None: ...

    def add_tvchannel(self, infos: TvChannelInfos) -> None: ...


def default_user_logos_dir() -> str:
    """Directory holding logos downloaded for the current user."""
    base = os.environ.get("XDG_DATA_HOME") or os.path.join(
        os.path.expanduser("~"), ".local", "share"
    )
    return os.path.join(base, "tuxtv", "images", "channels")


@dataclass
class LogoLocator:
    """Finds the image file of a channel logo on disk."""

    data_dir: str
    user_logos_dir: str = field(default_factory=default_user_logos_dir)

    @property
    def data_logos_dir(self) -> str:
        return os.path.join(self.data_dir, "images", "channels")

    def logo_path(self, logo_name: Optional[str], none_icon: bool = True) -> Optional[str]:
        """Return the path of a logo, looking in the user directory first.

        When the logo is missing and ``none_icon`` is set, the placeholder of
        the data directory is returned, unless the user directory holds its
        own placeholder, in which case no path is returned.
        """
        if logo_name is not None:
            for directory in (self.user_logos_dir, self.data_logos_dir):
                candidate = os.path.join(directory, logo_name)
                if os.path.exists(candidate):
                    return candidate
        if not none_icon:
            return None
        if os.path.exists(os.path.join(self.user_logos_dir, NONE_LOGO)):
            return None
        return os.path.join(self.data_logos_dir, NONE_LOGO)


def logo_url(base_url: str, logo_name: str) -> str:
    """Join a logos directory URL and a logo file name."""
    if base_url.endswith("/"):
        return base_url + logo_name
    return f"{base_url}/{logo_name}"


def catalog_path(cache_dir: str, data_dir: str) -> str:
    """Return the catalog file to read: the cached copy if there is one."""
    cached = os.path.join(cache_dir, CATALOG_CACHE_FILE)
    if os.path.isfile(cached):
        return cached
    return os.path.join(data_dir, CATALOG_DATA_FILE)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1].lower()


def parse_tv_channels(
    xml_text: Union[str, bytes],
    progress: Optional[ProgressCallback] = None,
) -> Iterator[TvChannelInfos]:
    """Yield the channels described in a catalog document, in order.

    ``progress`` is called with each channel name as its element opens.
    Raises ValueError on malformed XML or a channel element without a name.
    """
    parser = ET.XMLPullParser(events=("start", "end"))
    current: Optional[TvChannelInfos] = None

    def drain() -> Iterator[TvChannelInfos]:
        nonlocal current
        for event, elem in parser.read_events():
            tag = _local_name(elem.tag)
            if event == "start":
                if tag == "tvchannel":
                    if not elem.attrib:
                        raise ValueError("tvchannel element has no name attribute")
                    name = next(iter(elem.attrib.values()))
                    if progress is not None:
                        progress(name)
                    current = TvChannelInfos(name=name)
                    log.debug("Add TV channel '%s' in database", name)
                continue
            if tag == "tvchannel":
                if current is not None:
                    finished, current = current, None
                    yield finished
            elif current is not None and elem.text:
                if tag == "logo_filename":
                    current.logo_filename = elem.text
                elif tag == "label":
                    current.add_label(elem.text)

    try:
        for line in xml_text.splitlines(keepends=True):
            parser.feed(line)
            yield from drain()
        parser.close()
        yield from drain()
    except ET.ParseError as exc:
        raise ValueError(f"invalid TV channels catalog: {exc}") from exc


def _download_logo(fetch: Fetcher, base_url: str, logos_dir: str, logo_name: str) -> None:
    url = logo_url(base_url, logo_name)
    destination = os.path.join(logos_dir, logo_name)
    log.info("Downloading file : %s", url)
    try:
        fetch(url, destination)
    except OSError as exc:
        log.warning("Error : %s", exc)


def synchronize(
    store: TvChannelStore,
    xml_text: Union[str, bytes],
    logos_url: Optional[str] = None,
    fetch: Optional[Fetcher] = None,
    logos_dir: Optional[str] = None,
    progress: Optional[ProgressCallback] = None,
) -> list[TvChannelInfos]:
    """Replace the stored catalog with the channels of ``xml_text``.

    When ``logos_url`` is given, each channel logo is fetched into
    ``logos_dir``; failed downloads are logged and skipped.
    Returns the channels that were stored.
    """
    if logos_url is not None and fetch is None:
        raise ValueError("a fetch function is required to download logos")
    if logos_dir is None:
        logos_dir = default_user_logos_dir()

    log.info("Synchronizing the tv channels list")
    store.delete_tvchannels()

    added: list[TvChannelInfos] = []
    for channel in parse_tv_channels(xml_text, progress):
        store.add_tvchannel(channel)
        if channel.logo_filename and logos_url and fetch is not None:
            _download_logo(fetch, logos_url, logos_dir, channel.logo_filename)
        added.append(channel)
    return added
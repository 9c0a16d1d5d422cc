"""Read-only summary of a channel shown in its properties dialog."""

from __future__ import annotations

import gettext
from dataclasses import dataclass
from typing import Optional, Sequence

_ = gettext.gettext


@dataclass(frozen=True)
class ChannelProperties:
    """Field values displayed for a channel; none of them is editable."""

    name: str
    url: str
    vlc_options: str
    deinterlace: str
    editable: bool = False


def describe_channel(
    name: str,
    url: str,
    vlc_options: Optional[Sequence[str]] = None,
    deinterlace_mode: Optional[str] = None,
) -> ChannelProperties:
    """Build the values shown for a channel.

    Player options are shown one per line; a missing deinterlace mode is
    shown as "none".
    """
    options_text = "\n".join(vlc_options) if vlc_options else ""
    deinterlace = deinterlace_mode if deinterlace_mode else _("none")
    return ChannelProperties(
        name=name,
        url=url,
        vlc_options=options_text,
        deinterlace=deinterlace,
    )
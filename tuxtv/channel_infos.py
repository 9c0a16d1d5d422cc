"""Description of a TV channel from the channels catalog."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TvChannelInfos:
    """A catalog TV channel: its name, logo file and alternative labels."""

    name: str | None = None
    id: int = -1
    logo_filename: str | None = None
    labels: list[str] = field(default_factory=list)

    def add_label(self, label: str) -> None:
        """Append an alternative label for the channel."""
        self.labels.append(label)
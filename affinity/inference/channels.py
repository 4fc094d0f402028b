"""Preferred communication channel from a counterpart's contact fields."""

from dataclasses import dataclass
from typing import Dict, Optional

from ..schema import ContactFields


@dataclass(frozen=True)
class ChannelHint:
    """Channel to reach a counterpart and the message style that suits it."""
    channel: str
    style: str

    def to_dict(self) -> Dict[str, str]:
        return {"channel": self.channel, "style": self.style}


# Priority order: professional network, short-form social, photo social, website
CHANNEL_PRIORITY = (
    ("linkedin", ChannelHint("linkedin", "numeric")),
    ("twitter", ChannelHint("twitter", "direct")),
    ("instagram", ChannelHint("instagram", "narrative")),
    ("website", ChannelHint("email", "balanced")),
)

UNSPECIFIED = ChannelHint("unspecified", "balanced")


def infer_channel(contact: Optional[ContactFields]) -> ChannelHint:
    """First populated contact field in priority order."""
    if contact is None:
        return UNSPECIFIED
    for field_name, hint in CHANNEL_PRIORITY:
        value = getattr(contact, field_name, None)
        if value and str(value).strip():
            return hint
    return UNSPECIFIED

"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class IncomingMessage:
    """Discord/Slack/CLI-agnostic message representation.

    ``payload`` keeps a reference to the raw platform message the other
    fields were read from, so sender and channel never mix two events.
    """

    text: Optional[str]
    sender_id: Any = None
    channel_id: Any = None
    is_from_bot: bool = False
    payload: Any = None

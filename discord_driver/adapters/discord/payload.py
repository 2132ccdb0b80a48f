"""Outbound payload — canonical reply → Discord message content + embed."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import discord

from discord_driver.domain.models import Attachment, Image, OutgoingMessage


# "" is the empty embed, mirroring the wire shape the channel send expects.
EmbedBlock = Union[Dict[str, Any], str]


@dataclass(frozen=True)
class Payload:
    message: str = ""
    embed: EmbedBlock = ""

    def to_embed(self) -> Optional[discord.Embed]:
        if not self.embed:
            return None
        return discord.Embed.from_dict(self.embed)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "embed": self.embed}


def embed_for(attachment: Optional[Attachment]) -> EmbedBlock:
    """Embed block for an attachment.

    Only images map to an embed; every other kind is sent as text only.
    """
    if attachment is None:
        return ""
    if isinstance(attachment, Image):
        return {"image": {"url": attachment.url}}
    return ""


def build_payload(message: Any) -> Payload:
    """Build the wire payload. Anything that is not an OutgoingMessage is sent as text."""
    if isinstance(message, OutgoingMessage):
        return Payload(message=message.text, embed=embed_for(message.attachment))
    return Payload(message="" if message is None else str(message))

"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from discord_driver.ports.inbound import IncomingMessage


# ── Attachments ─────────────────────────────────────────────


@dataclass(frozen=True)
class Attachment:
    """Base of the attachment variants an outgoing message may carry."""

    kind = "attachment"


@dataclass(frozen=True)
class Image(Attachment):
    url: str
    title: Optional[str] = None

    kind = "image"


@dataclass(frozen=True)
class Video(Attachment):
    url: str

    kind = "video"


@dataclass(frozen=True)
class Audio(Attachment):
    url: str

    kind = "audio"


@dataclass(frozen=True)
class File(Attachment):
    url: str

    kind = "file"


@dataclass(frozen=True)
class Location(Attachment):
    latitude: float
    longitude: float

    kind = "location"


# ── Outgoing ────────────────────────────────────────────────


@dataclass(frozen=True)
class OutgoingMessage:
    """Reply produced by the conversation engine."""

    text: str = ""
    attachment: Optional[Attachment] = None

    def with_attachment(self, attachment: Attachment) -> "OutgoingMessage":
        return replace(self, attachment=attachment)


@dataclass(frozen=True)
class Button:
    text: str
    value: Optional[str] = None


@dataclass(frozen=True)
class Question:
    """Prompt with optional buttons. Drivers without button support send the text."""

    text: str
    buttons: List[Button] = field(default_factory=list)

    def __str__(self) -> str:
        return self.text


# ── Incoming ────────────────────────────────────────────────


@dataclass(frozen=True)
class Answer:
    """A user's reply to a pending question."""

    text: Optional[str]
    message: Optional["IncomingMessage"] = None
    value: Any = None
    is_interactive_reply: bool = False


@dataclass(frozen=True)
class User:
    """Platform user as seen by the conversation engine.

    ``degraded`` marks users built from the raw message author only, without a
    profile lookup (first/last name left empty).
    """

    id: Any
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    degraded: bool = False

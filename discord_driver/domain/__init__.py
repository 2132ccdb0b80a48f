"""Domain layer — pure Python, no discord dependency."""

from discord_driver.domain.models import (
    Answer,
    Attachment,
    Audio,
    Button,
    File,
    Image,
    Location,
    OutgoingMessage,
    Question,
    User,
    Video,
)

__all__ = [
    "Answer",
    "Attachment",
    "Audio",
    "Button",
    "File",
    "Image",
    "Location",
    "OutgoingMessage",
    "Question",
    "User",
    "Video",
]

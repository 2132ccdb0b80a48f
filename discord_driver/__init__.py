"""Discord driver — adapts a discord.py client to a platform-agnostic chat bot."""

from discord_driver.config import CONFIG, DriverConfig
from discord_driver.domain.bot import ChatBot
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
from discord_driver.ports.inbound import IncomingMessage
from discord_driver.registry import DriverRegistrationError, DriverRegistry, UnknownDriverError

__version__ = "0.1.0"

__all__ = [
    "CONFIG",
    "DriverConfig",
    "ChatBot",
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
    "IncomingMessage",
    "DriverRegistrationError",
    "DriverRegistry",
    "UnknownDriverError",
]

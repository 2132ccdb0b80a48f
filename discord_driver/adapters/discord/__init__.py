"""Discord adapter — discord.py client behind the DriverPort contract."""

from discord_driver.adapters.discord.driver import DiscordDriver
from discord_driver.adapters.discord.factory import DiscordFactory
from discord_driver.adapters.discord.payload import Payload, build_payload

__all__ = [
    "DiscordDriver",
    "DiscordFactory",
    "Payload",
    "build_payload",
]

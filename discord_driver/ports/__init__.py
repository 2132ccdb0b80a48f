"""Port interfaces (Hexagonal Architecture)."""

from discord_driver.ports.inbound import IncomingMessage
from discord_driver.ports.outbound import DriverPort, GatewayClientPort

__all__ = [
    "IncomingMessage",
    "DriverPort",
    "GatewayClientPort",
]

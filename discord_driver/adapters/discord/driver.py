"""Discord driver — bridges a discord.py client to the DriverPort contract.

The gateway pushes messages; the driver keeps the most recent one and
normalizes it on demand. It never claims inbound HTTP requests.

Only one raw message is held at a time. If a new message arrives between
``get_messages()`` and ``send_payload(payload)`` the reply goes to the newer
message's channel, unless the turn's IncomingMessage is passed along as
``matching_message``.
"""

import asyncio
import sys
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

import discord

from discord_driver.adapters.discord.payload import Payload, build_payload
from discord_driver.domain.models import Answer, User
from discord_driver.ports.inbound import IncomingMessage
from discord_driver.ports.outbound import GatewayClientPort
from discord_driver.registry import DriverRegistry


def _log(msg: str):
    print(msg, file=sys.stderr)


def _dig(obj: Any, *path: str, default: Any = None) -> Any:
    """Follow an attribute path, returning ``default`` at the first missing link."""
    for name in path:
        obj = getattr(obj, name, None)
        if obj is None:
            return default
    return obj


class DiscordDriver:
    """DriverPort implementation for a discord.py gateway client."""

    DRIVER_NAME = "Discord"

    def __init__(self, config: Mapping[str, Any], client: GatewayClientPort):
        self._config = MappingProxyType(dict(config))
        self._client = client
        self._message: Optional[discord.Message] = None
        self.bot_id: Optional[str] = None

        client.add_listener(self._capture, "on_message")
        client.add_listener(self._on_ready, "on_ready")

    # -- Gateway listeners --

    async def _capture(self, message: discord.Message) -> None:
        self._message = message

    async def _on_ready(self) -> None:
        self.connected()

    def connected(self) -> None:
        """Remember the bot's own tag once the gateway session is up."""
        user = getattr(self._client, "user", None)
        self.bot_id = str(user) if user is not None else None
        _log(f"[discord] logged in as {self.bot_id}")

    # -- Identity / matching --

    def get_name(self) -> str:
        return self.DRIVER_NAME

    def matches_request(self) -> bool:
        return False

    def has_matching_event(self) -> bool:
        return False

    @property
    def is_configured(self) -> bool:
        return bool(self._config.get("token"))

    def serializes_callbacks(self) -> bool:
        return False

    # -- Inbound --

    def get_messages(self) -> List[IncomingMessage]:
        raw = self._message
        return [
            IncomingMessage(
                text=_dig(raw, "content"),
                sender_id=_dig(raw, "author", "id"),
                channel_id=_dig(raw, "channel", "id"),
                is_from_bot=bool(_dig(raw, "author", "bot", default=False)),
                payload=raw,
            )
        ]

    def get_conversation_answer(self, message: IncomingMessage) -> Answer:
        raw = self._raw_for(message)
        return Answer(text=_dig(raw, "content"), message=message)

    def _raw_for(self, message: Optional[IncomingMessage]) -> Optional[discord.Message]:
        # Prefer the raw message the turn was normalized from.
        if message is not None and message.payload is not None:
            return message.payload
        return self._message

    # -- Outbound --

    def build_service_payload(
        self,
        message: Any,
        matching_message: Optional[IncomingMessage],
        additional_parameters: Optional[Dict[str, Any]] = None,
    ) -> Payload:
        return build_payload(message)

    def send_payload(
        self,
        payload: Payload,
        matching_message: Optional[IncomingMessage] = None,
    ) -> Optional["asyncio.Task[Any]"]:
        """Schedule the send and return its task, or None if no message was ever seen."""
        if self._message is None:
            return None

        channel = _dig(self._raw_for(matching_message), "channel")
        if channel is None:
            return None

        # Raises RuntimeError outside a running loop, before any send is created.
        loop = asyncio.get_running_loop()
        return loop.create_task(
            channel.send(payload.message, tts=False, embed=payload.to_embed())
        )

    def types(self, matching_message: IncomingMessage) -> None:
        return None

    def types_and_waits(self, matching_message: IncomingMessage, seconds: float) -> None:
        return None

    def send_request(
        self,
        endpoint: str,
        parameters: Mapping[str, Any],
        matching_message: IncomingMessage,
    ) -> None:
        return None

    # -- Users --

    def get_user(self, matching_message: Optional[IncomingMessage]) -> User:
        """User from the raw message author only; first/last name stay empty."""
        author = _dig(self._raw_for(matching_message), "author")
        return User(
            id=_dig(author, "id"),
            username=_dig(author, "name", default=""),
            degraded=True,
        )

    async def fetch_user(self, matching_message: IncomingMessage) -> User:
        """Look the sender up through the client. Lookup errors propagate.

        Without a sender there is nothing to look up; the degraded user is returned.
        """
        if matching_message.sender_id is None:
            return self.get_user(matching_message)
        profile = await self._client.fetch_user(int(matching_message.sender_id))
        return User(
            id=matching_message.sender_id,
            first_name=_dig(profile, "global_name", default="") or "",
            last_name="",
            username=_dig(profile, "name", default=""),
        )

    def get_client(self) -> GatewayClientPort:
        return self._client

    # -- Registration --

    @staticmethod
    def load_extension(registry: DriverRegistry) -> None:
        """Register the Discord factory constructors. Call once from the composition root."""
        from discord_driver.adapters.discord.factory import DiscordFactory

        factory = DiscordFactory()
        registry.extend("create_for_discord", factory.create_for_discord)
        registry.extend("create_using_discord", factory.create_using_discord)

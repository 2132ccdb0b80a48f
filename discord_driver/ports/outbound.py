"""Outbound ports — interfaces for the driver and the platform client it wraps."""

from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from discord_driver.domain.models import Answer, User
from discord_driver.ports.inbound import IncomingMessage


@runtime_checkable
class GatewayClientPort(Protocol):
    """The slice of a gateway client the driver relies on.

    ``discord.ext.commands.Bot`` satisfies it as-is.
    """

    def add_listener(self, func: Callable[..., Awaitable[Any]], name: str = ...) -> None: ...

    async def fetch_user(self, user_id: int) -> Any: ...


@runtime_checkable
class DriverPort(Protocol):
    """Uniform contract every chat platform driver implements."""

    def get_name(self) -> str: ...

    def matches_request(self) -> bool: ...

    def has_matching_event(self) -> Any: ...

    def get_conversation_answer(self, message: IncomingMessage) -> Answer: ...

    def get_messages(self) -> List[IncomingMessage]: ...

    def build_service_payload(
        self,
        message: Any,
        matching_message: Optional[IncomingMessage],
        additional_parameters: Optional[Dict[str, Any]] = None,
    ) -> Any: ...

    def send_payload(
        self,
        payload: Any,
        matching_message: Optional[IncomingMessage] = None,
    ) -> Optional[Awaitable[Any]]: ...

    @property
    def is_configured(self) -> bool: ...

    def types(self, matching_message: IncomingMessage) -> None: ...

    def types_and_waits(self, matching_message: IncomingMessage, seconds: float) -> None: ...

    def get_user(self, matching_message: Optional[IncomingMessage]) -> User: ...

    async def fetch_user(self, matching_message: IncomingMessage) -> User: ...

    def get_client(self) -> Any: ...

    def send_request(
        self,
        endpoint: str,
        parameters: Mapping[str, Any],
        matching_message: IncomingMessage,
    ) -> Any: ...

    def serializes_callbacks(self) -> bool: ...

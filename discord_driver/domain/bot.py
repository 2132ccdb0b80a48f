"""ChatBot — conversation host, no framework dependencies.

Schedules conversation turns over any DriverPort:
pull normalized messages, route them to handlers, send replies back
through the same driver.
"""

import inspect
import re
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Pattern

from discord_driver.domain.models import Answer, User
from discord_driver.ports.inbound import IncomingMessage
from discord_driver.ports.outbound import DriverPort


def _log(msg: str):
    print(msg, file=sys.stderr)


Handler = Callable[..., Any]


@dataclass
class _Listener:
    pattern: Pattern[str]
    handler: Handler


class ChatBot:
    """Pure conversation routing — testable with a fake driver.

    Handlers are called as ``handler(bot, message, *groups)`` and may be
    plain functions or coroutines.
    """

    def __init__(self, driver: DriverPort, ignore_bots: bool = True):
        self._driver = driver
        self._ignore_bots = ignore_bots
        self._listeners: List[_Listener] = []
        self._fallback: Optional[Handler] = None
        # Each listener task runs in its own context, so overlapping turns
        # never see each other's message.
        self._current: ContextVar[Optional[IncomingMessage]] = ContextVar(
            f"chatbot_turn_{id(self)}", default=None
        )

    @property
    def driver(self) -> DriverPort:
        return self._driver

    @property
    def message(self) -> Optional[IncomingMessage]:
        """Message of the turn being processed, None between turns."""
        return self._current.get()

    def hears(self, pattern: str, handler: Handler) -> None:
        self._listeners.append(_Listener(re.compile(pattern, re.IGNORECASE), handler))

    def fallback(self, handler: Handler) -> None:
        self._fallback = handler

    async def listen(self) -> int:
        """Process the driver's pending messages. Returns the number of handlers run."""
        handled = 0
        for message in self._driver.get_messages():
            if message.text is None:
                continue
            if message.is_from_bot and self._ignore_bots:
                continue

            token = self._current.set(message)
            try:
                handled += await self._dispatch(message)
            finally:
                self._current.reset(token)
        return handled

    async def _dispatch(self, message: IncomingMessage) -> int:
        handled = 0
        for listener in self._listeners:
            match = listener.pattern.search(message.text)
            if match:
                await self._call(listener.handler, message, *match.groups())
                handled += 1

        if not handled and self._fallback is not None:
            await self._call(self._fallback, message)
            handled = 1
        return handled

    async def _call(self, handler: Handler, message: IncomingMessage, *args) -> None:
        result = handler(self, message, *args)
        if inspect.isawaitable(result):
            await result

    async def reply(
        self,
        message: Any,
        matching_message: Optional[IncomingMessage] = None,
        additional_parameters: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Build and send a reply for the current (or given) turn.

        Returns whatever the platform send resolved to, or None when the
        driver had no channel to send to.
        """
        matching = matching_message or self._current.get()
        payload = self._driver.build_service_payload(message, matching, additional_parameters or {})
        handle = self._driver.send_payload(payload, matching)
        if handle is None:
            _log(f"[{self._driver.get_name()}] no target channel, reply dropped")
            return None
        return await handle

    def get_user(self) -> User:
        return self._driver.get_user(self._current.get())

    async def fetch_user(self) -> User:
        current = self._current.get()
        if current is None:
            return self._driver.get_user(None)
        return await self._driver.fetch_user(current)

    def get_conversation_answer(self) -> Optional[Answer]:
        current = self._current.get()
        if current is None:
            return None
        return self._driver.get_conversation_answer(current)

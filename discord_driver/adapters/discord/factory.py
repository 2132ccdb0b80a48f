"""Factory constructors registered by DiscordDriver.load_extension."""

import sys
from typing import Any, Mapping

import discord
from discord.ext import commands

from discord_driver.adapters.discord.driver import DiscordDriver
from discord_driver.domain.bot import ChatBot
from discord_driver.ports.outbound import GatewayClientPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_client(command_prefix: str = "!") -> commands.Bot:
    intents = discord.Intents.default()
    intents.message_content = True
    return commands.Bot(command_prefix=command_prefix, intents=intents)


class DiscordFactory:
    """Creates ChatBot instances driven by Discord."""

    def create_for_discord(self, config: Mapping[str, Any]) -> ChatBot:
        """Build a fresh discord client and a bot on top of it.

        The caller still has to run the client, e.g.
        ``bot.driver.get_client().run(token)``.
        """
        client = build_client(config.get("command_prefix") or "!")
        _log("[discord] client created")
        return self.create_using_discord(config, client)

    def create_using_discord(self, config: Mapping[str, Any], client: GatewayClientPort) -> ChatBot:
        """Wrap an existing client; every captured message starts a turn."""
        driver = DiscordDriver(config, client)
        bot = ChatBot(driver)

        # Registered after the driver's own listener, so the message is
        # already captured when the turn starts.
        async def _on_message(message: discord.Message) -> None:
            await bot.listen()

        client.add_listener(_on_message, "on_message")
        return bot

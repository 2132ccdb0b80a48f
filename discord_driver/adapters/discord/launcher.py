"""Launcher — composition root for a single Discord-driven bot."""

import re
import sys

from discord_driver.adapters.discord.driver import DiscordDriver
from discord_driver.config import DriverConfig
from discord_driver.domain.bot import ChatBot
from discord_driver.ports.inbound import IncomingMessage
from discord_driver.registry import DriverRegistry


def _log(msg: str):
    print(msg, file=sys.stderr)


async def _pong(bot: ChatBot, message: IncomingMessage):
    await bot.reply("pong")


async def _whoami(bot: ChatBot, message: IncomingMessage):
    user = await bot.fetch_user()
    name = user.first_name or user.username
    await bot.reply(f"{name} ({user.id})")


def build_bot(config: DriverConfig, registry: DriverRegistry) -> ChatBot:
    bot = registry.create("create_for_discord", config.to_mapping())
    bot.hears(r"^ping$", _pong)
    bot.hears(rf"^{re.escape(config.command_prefix)}whoami$", _whoami)
    return bot


def main() -> int:
    config = DriverConfig.from_env()
    if not config.has_token:
        _log("DISCORD_TOKEN not set, refusing to start")
        return 1

    registry = DriverRegistry()
    DiscordDriver.load_extension(registry)

    bot = build_bot(config, registry)
    _log(f"[discord] starting ({', '.join(registry.names())})")
    bot.driver.get_client().run(config.token)
    return 0


if __name__ == "__main__":
    sys.exit(main())

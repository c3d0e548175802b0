# id_photo_bot/bot.py
import asyncio
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.fsm.storage.memory import MemoryStorage

from id_photo_bot import utils
from id_photo_bot.data.settings import settings
from id_photo_bot.handlers import error, menu, options_handler, photo_handler
from id_photo_bot.services import IdPhotoGenerator


def setup_handlers(dp: Dispatcher) -> None:
    dp.include_router(error.router)
    dp.include_router(menu.router)
    dp.include_router(options_handler.router)
    dp.include_router(photo_handler.router)


def setup_logging(dp: Dispatcher) -> None:
    dp["aiogram_logger"] = utils.logging.setup_logger().bind(type="aiogram")


async def aiogram_on_startup(dispatcher: Dispatcher, bot: Bot) -> None:
    logger = dispatcher["aiogram_logger"]
    logger.debug("Configuring aiogram")
    await utils.bot_commands.set_bot_commands(bot)
    await utils.bot_commands.set_bot_description(bot)
    if not dispatcher["id_photo_generator"].is_configured:
        logger.warning("Starting without GEMINI__API_KEY; every generation will fail.")
    logger.info("Configured aiogram")


async def aiogram_on_shutdown(dispatcher: Dispatcher) -> None:
    dispatcher["aiogram_logger"].debug("Stopping polling")
    await dispatcher.storage.close()
    dispatcher["aiogram_logger"].info("Stopped polling")


def main() -> None:
    dp = Dispatcher(storage=MemoryStorage())
    setup_logging(dp)

    if settings.bot is None:
        dp["aiogram_logger"].error("BOT__TOKEN is not set.")
        sys.exit(1)

    bot = Bot(
        token=settings.bot.token.get_secret_value(),
        default=DefaultBotProperties(parse_mode="HTML"),
    )
    # The credential is read once here; handlers receive the generator by name.
    dp["id_photo_generator"] = IdPhotoGenerator.from_config(settings.gemini)

    setup_handlers(dp)
    dp.startup.register(aiogram_on_startup)
    dp.shutdown.register(aiogram_on_shutdown)

    asyncio.run(dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types()))


if __name__ == "__main__":
    main()

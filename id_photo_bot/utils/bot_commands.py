# id_photo_bot/utils/bot_commands.py
from collections.abc import Iterator

from aiogram import Bot
from aiogram.types import BotCommand, BotCommandScopeAllPrivateChats

from id_photo_bot.data import texts
from id_photo_bot.data.texts.dto import LocaleTexts


def _profiles() -> Iterator[tuple[str | None, LocaleTexts]]:
    """
    Yields (language_code, texts) pairs: the unlocalized fallback first, then each locale.

    Telegram shows the fallback to users whose language has no dedicated entry.
    """
    yield None, texts.get_texts(texts.DEFAULT_LOCALE)
    yield from texts.ALL_TEXTS.items()


async def set_bot_commands(bot: Bot) -> None:
    """
    Registers the menu commands. The flow only runs in private chats, so that is the only scope.
    """
    scope = BotCommandScopeAllPrivateChats()
    for lang_code, lang_texts in _profiles():
        await bot.set_my_commands(
            [BotCommand(command=cmd.command, description=cmd.description) for cmd in lang_texts.commands],
            scope=scope,
            language_code=lang_code,
        )


async def set_bot_description(bot: Bot) -> None:
    for lang_code, lang_texts in _profiles():
        await bot.set_my_description(
            description=lang_texts.bot_info.description,
            language_code=lang_code,
        )
        await bot.set_my_short_description(
            short_description=lang_texts.bot_info.short_description,
            language_code=lang_code,
        )

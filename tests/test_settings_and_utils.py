"""
Settings parsing, upload validation, status message rotation and bot command registration.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.exceptions import TelegramNetworkError
from aiogram.types import BotCommandScopeAllPrivateChats

from id_photo_bot.data import texts
from id_photo_bot.data.constants import MediaType
from id_photo_bot.data.settings import Settings
from id_photo_bot.utils.bot_commands import set_bot_commands, set_bot_description
from id_photo_bot.utils.image import detect_media_type
from id_photo_bot.utils.status_manager import StatusMessageManager


class TestSettings:
    def test_defaults_without_environment(self, monkeypatch):
        for name in ("BOT__TOKEN", "GEMINI__API_KEY", "GEMINI__MODEL", "LOGGING_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.bot is None
        assert settings.gemini.api_key is None
        assert settings.gemini.model == "gemini-2.5-flash-image"
        assert settings.logging_level == 20

    def test_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("BOT__TOKEN", "123456:ABC")
        monkeypatch.setenv("GEMINI__API_KEY", "secret")
        monkeypatch.setenv("STATUS_ROTATION_SECONDS", "1.0")

        settings = Settings(_env_file=None)

        assert settings.bot.id == 123456
        assert settings.gemini.api_key.get_secret_value() == "secret"
        assert settings.status_rotation_seconds == 1.0


class TestDetectMediaType:
    def test_jpeg(self, jpeg_bytes):
        assert detect_media_type(jpeg_bytes) is MediaType.JPEG

    def test_png(self, png_bytes):
        assert detect_media_type(png_bytes) is MediaType.PNG

    def test_garbage(self):
        assert detect_media_type(b"not an image at all") is None

    def test_unsupported_format(self):
        from conftest import encode_image

        assert detect_media_type(encode_image("GIF")) is None


class TestStatusMessageManager:
    @pytest.mark.asyncio
    async def test_rotation_cycles_messages_until_deleted(self):
        bot = AsyncMock()
        manager = StatusMessageManager(bot, chat_id=1, message_id=2, min_duration=0)

        manager.start_rotation("Working", ["one", "two"], interval=0.01)
        await asyncio.sleep(0.1)
        await manager.delete()

        texts = [call.kwargs["text"] for call in bot.edit_message_text.await_args_list]
        assert texts[:2] == ["Working\n\n<i>one</i>", "Working\n\n<i>two</i>"]
        bot.delete_message.assert_awaited_once_with(chat_id=1, message_id=2)

        edits = bot.edit_message_text.await_count
        await asyncio.sleep(0.05)
        assert bot.edit_message_text.await_count == edits

    @pytest.mark.asyncio
    async def test_empty_rotation_is_noop(self):
        bot = AsyncMock()
        manager = StatusMessageManager(bot, chat_id=1, message_id=2, min_duration=0)

        manager.start_rotation("Working", [], interval=0.01)
        await manager.stop_rotation()

        bot.edit_message_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_edit_stops_rotation_quietly(self):
        bot = AsyncMock()
        bot.edit_message_text.side_effect = RuntimeError("edit failed")
        manager = StatusMessageManager(bot, chat_id=1, message_id=2, min_duration=0)

        manager.start_rotation("Working", ["one"], interval=0.01)
        await asyncio.sleep(0.05)
        await manager.delete()

        bot.edit_message_text.assert_awaited_once()
        bot.delete_message.assert_awaited_once_with(chat_id=1, message_id=2)

    @pytest.mark.asyncio
    async def test_delete_network_error_is_not_raised(self):
        bot = AsyncMock()
        bot.delete_message.side_effect = TelegramNetworkError(method=MagicMock(), message="timeout")
        manager = StatusMessageManager(bot, chat_id=1, message_id=2, min_duration=0)

        await manager.delete()

        bot.delete_message.assert_awaited_once()


class TestBotCommands:
    @pytest.mark.asyncio
    async def test_commands_registered_for_fallback_and_each_locale(self):
        bot = AsyncMock()

        await set_bot_commands(bot)

        calls = bot.set_my_commands.await_args_list
        assert [call.kwargs["language_code"] for call in calls] == [None, *texts.ALL_TEXTS]
        assert all(isinstance(call.kwargs["scope"], BotCommandScopeAllPrivateChats) for call in calls)
        fallback = [command.command for command in calls[0].args[0]]
        assert fallback == [cmd.command for cmd in texts.get_texts(texts.DEFAULT_LOCALE).commands]

    @pytest.mark.parametrize("locale", list(texts.ALL_TEXTS))
    def test_every_command_has_a_handler(self, locale):
        handled = {"start", "menu", "cancel", "guide", "help"}
        assert {cmd.command for cmd in texts.ALL_TEXTS[locale].commands} <= handled

    @pytest.mark.asyncio
    async def test_descriptions_per_locale(self):
        bot = AsyncMock()

        await set_bot_description(bot)

        ja_call = bot.set_my_description.await_args_list[-1]
        assert ja_call.kwargs == {
            "description": texts.ALL_TEXTS["ja"].bot_info.description,
            "language_code": "ja",
        }
        assert bot.set_my_short_description.await_count == len(texts.ALL_TEXTS) + 1

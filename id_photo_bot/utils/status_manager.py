# id_photo_bot/utils/status_manager.py
import asyncio
import itertools
import time
from collections.abc import Sequence
from contextlib import suppress

import structlog
from aiogram import Bot
from aiogram.exceptions import TelegramAPIError, TelegramBadRequest

logger = structlog.get_logger(__name__)


class StatusMessageManager:
    """
    Manages a single status message, ensuring each update is visible for a minimum duration.
    """

    def __init__(
        self,
        bot: Bot,
        chat_id: int,
        message_id: int,
        min_duration: float = 1.5,
    ) -> None:
        self.bot = bot
        self.chat_id = chat_id
        self.message_id = message_id
        self.min_duration = min_duration
        self._last_update_time = time.monotonic()
        self._rotation_task: asyncio.Task | None = None

    async def _wait_if_needed(self) -> None:
        """Waits for the remainder of the minimum duration if necessary."""
        elapsed = time.monotonic() - self._last_update_time
        if elapsed < self.min_duration:
            await asyncio.sleep(self.min_duration - elapsed)

    async def update(self, text: str) -> None:
        """
        Updates the status message text, waiting if the previous message was shown too briefly.
        """
        await self._wait_if_needed()
        with suppress(TelegramBadRequest):
            await self.bot.edit_message_text(
                text=text,
                chat_id=self.chat_id,
                message_id=self.message_id,
            )
        self._last_update_time = time.monotonic()

    async def _rotate(self, header: str, messages: Sequence[str], interval: float) -> None:
        try:
            for message in itertools.cycle(messages):
                await asyncio.sleep(interval)
                await self.update(f"{header}\n\n<i>{message}</i>")
        except asyncio.CancelledError:
            raise
        except Exception:
            # The status text is cosmetic; a failed edit must not reach the caller.
            logger.exception("Status rotation stopped", chat_id=self.chat_id)

    def start_rotation(self, header: str, messages: Sequence[str], interval: float) -> None:
        """Cycles through loading messages in the background until stopped."""
        if not messages or self._rotation_task is not None:
            return
        self._rotation_task = asyncio.create_task(self._rotate(header, messages, interval))

    async def stop_rotation(self) -> None:
        if self._rotation_task is None:
            return
        self._rotation_task.cancel()
        with suppress(asyncio.CancelledError):
            await self._rotation_task
        self._rotation_task = None

    async def delete(self) -> None:
        """
        Stops any rotation and deletes the status message. Telegram failures are logged, not raised.
        """
        await self.stop_rotation()
        try:
            await self.bot.delete_message(chat_id=self.chat_id, message_id=self.message_id)
        except TelegramBadRequest:
            pass
        except TelegramAPIError as e:
            logger.warning("Could not delete status message", chat_id=self.chat_id, error=str(e))

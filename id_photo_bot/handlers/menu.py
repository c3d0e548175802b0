# id_photo_bot/handlers/menu.py
from aiogram import Router
from aiogram.filters import Command, StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from id_photo_bot.data import texts
from id_photo_bot.data.settings import settings
from id_photo_bot.states.user import IdPhoto

router = Router(name="menu-handlers")


def locale_of(msg: Message) -> str | None:
    return msg.from_user.language_code if msg.from_user else None


async def send_welcome_message(msg: Message, state: FSMContext, is_restart: bool = False) -> None:
    """Resets the session and asks for a photo."""
    await state.clear()
    await state.set_state(IdPhoto.waiting_for_photo)

    locale_texts = texts.get_texts(locale_of(msg))
    await msg.answer(locale_texts.restart if is_restart else locale_texts.welcome)


@router.message(Command("start", "menu"), StateFilter("*"))
async def start_flow(msg: Message, state: FSMContext) -> None:
    """Handles /start and /menu."""
    await send_welcome_message(msg, state)


@router.message(Command("cancel"), StateFilter("*"))
async def cancel_flow(msg: Message, state: FSMContext) -> None:
    """Handles /cancel command."""
    await send_welcome_message(msg, state, is_restart=True)


@router.message(Command("guide"), StateFilter("*"))
async def guide(msg: Message) -> None:
    await msg.answer(texts.get_texts(locale_of(msg)).guide)


@router.message(Command("help"), StateFilter("*"))
async def help_cmd(msg: Message) -> None:
    support_email = settings.bot.support_email if settings.bot else "support@example.com"
    await msg.answer(texts.get_texts(locale_of(msg)).help.format(email=support_email))

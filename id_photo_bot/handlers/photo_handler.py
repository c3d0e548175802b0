# id_photo_bot/handlers/photo_handler.py
import structlog
from aiogram import Bot, F, Router
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from id_photo_bot.data import texts
from id_photo_bot.data.constants import MediaType
from id_photo_bot.dto.id_photo import GenerationOptions
from id_photo_bot.keyboards.inline.options import options_kb
from id_photo_bot.states.user import IdPhoto
from id_photo_bot.utils.image import detect_media_type

router = Router(name="photo-handler")

ACCEPTED_DOCUMENT_TYPES = {m.value for m in MediaType}
UPLOAD_STATES = StateFilter(None, IdPhoto.waiting_for_photo, IdPhoto.choosing_options)


async def download_file_bytes(bot: Bot, file_id: str) -> bytes | None:
    """
    Downloads a Telegram file using the get_file -> download_file sequence.
    """
    try:
        file_info = await bot.get_file(file_id)
        if not file_info.file_path:
            return None
        file_io = await bot.download_file(file_info.file_path)
        if not file_io:
            return None
        return file_io.read()
    except Exception:
        structlog.get_logger(__name__).warning("Failed to download file", file_id=file_id)
        return None


async def _accept_upload(msg: Message, state: FSMContext, bot: Bot, file_id: str) -> None:
    locale_texts = texts.get_texts(msg.from_user.language_code if msg.from_user else None)
    log = structlog.get_logger(__name__).bind(user_id=msg.from_user.id if msg.from_user else None)

    data = await download_file_bytes(bot, file_id)
    media_type = detect_media_type(data) if data else None
    if media_type is None:
        log.info("Rejected unreadable upload", file_id=file_id)
        await msg.answer(locale_texts.unreadable_image)
        return

    user_data = await state.get_data()
    # Keep previously chosen options when the user swaps the photo.
    options = GenerationOptions.from_fsm_data(user_data)
    await state.update_data(
        photo_file_id=file_id,
        media_type=media_type.value,
        **options.model_dump(mode="json"),
    )
    await state.set_state(IdPhoto.choosing_options)
    log.info("Photo accepted", media_type=media_type.value, size=len(data))

    await msg.answer(
        locale_texts.options_prompt,
        reply_markup=options_kb(options, locale_texts),
    )


@router.message(UPLOAD_STATES, F.photo)
async def photo_received(msg: Message, state: FSMContext, bot: Bot) -> None:
    largest = max(msg.photo, key=lambda p: p.width * p.height)
    await _accept_upload(msg, state, bot, largest.file_id)


@router.message(UPLOAD_STATES, F.document)
async def document_received(msg: Message, state: FSMContext, bot: Bot) -> None:
    if msg.document.mime_type not in ACCEPTED_DOCUMENT_TYPES:
        locale_texts = texts.get_texts(msg.from_user.language_code if msg.from_user else None)
        await msg.answer(locale_texts.not_an_image)
        return
    await _accept_upload(msg, state, bot, msg.document.file_id)


@router.message(StateFilter(None, IdPhoto.waiting_for_photo))
async def unexpected_input(msg: Message) -> None:
    locale_texts = texts.get_texts(msg.from_user.language_code if msg.from_user else None)
    await msg.answer(locale_texts.send_photo_first)

# id_photo_bot/handlers/options_handler.py
import html
from contextlib import suppress

import structlog
from aiogram import Bot, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import BufferedInputFile, CallbackQuery

from id_photo_bot.data import texts
from id_photo_bot.data.constants import (
    PHOTO_STANDARD_SIZES_MM,
    BackgroundColor,
    Outfit,
    PhotoStandard,
)
from id_photo_bot.data.settings import settings
from id_photo_bot.data.texts.dto import LocaleTexts
from id_photo_bot.dto.id_photo import GenerationOptions, SourceImage
from id_photo_bot.handlers.photo_handler import download_file_bytes
from id_photo_bot.keyboards.inline.callbacks import (
    GenerateCallback,
    OptionCallback,
    SessionActionCallback,
)
from id_photo_bot.keyboards.inline.options import options_kb, result_kb
from id_photo_bot.services import IdPhotoError, IdPhotoGenerator
from id_photo_bot.states.user import IdPhoto
from id_photo_bot.utils.status_manager import StatusMessageManager

router = Router(name="options-handler")

# Values a keyboard button can carry; anything else is a stale or forged callback.
OPTION_CHOICES: dict[str, set[str]] = {
    "photo_standard": {m.value for m in PhotoStandard},
    "background_color": {m.value for m in BackgroundColor},
    "outfit": {m.value for m in Outfit},
}


def _texts_for(cb: CallbackQuery) -> LocaleTexts:
    return texts.get_texts(cb.from_user.language_code if cb.from_user else None)


@router.callback_query(StateFilter(IdPhoto.generating))
async def generation_in_progress(cb: CallbackQuery) -> None:
    """Ignores any button while a generation is outstanding."""
    await cb.answer(_texts_for(cb).still_generating)


@router.callback_query(OptionCallback.filter(), StateFilter(IdPhoto.choosing_options))
async def option_changed(
    cb: CallbackQuery,
    callback_data: OptionCallback,
    state: FSMContext,
) -> None:
    await cb.answer()

    if callback_data.field == "beautify":
        if callback_data.value not in ("on", "off"):
            return
        update = {"beautify": callback_data.value == "on"}
    elif callback_data.field in OPTION_CHOICES:
        if callback_data.value not in OPTION_CHOICES[callback_data.field]:
            structlog.get_logger(__name__).warning(
                "Ignored unknown option value",
                field=callback_data.field,
                value=callback_data.value,
            )
            return
        update = {callback_data.field: callback_data.value}
    else:
        return

    await state.update_data(**update)
    options = GenerationOptions.from_fsm_data(await state.get_data())
    with suppress(TelegramBadRequest):
        await cb.message.edit_reply_markup(reply_markup=options_kb(options, _texts_for(cb)))


async def run_generation(
    cb: CallbackQuery,
    state: FSMContext,
    bot: Bot,
    id_photo_generator: IdPhotoGenerator,
) -> None:
    """
    Generates one ID photo from the stored upload and options and sends the
    result (or a localized error) to the chat.
    """
    locale_texts = _texts_for(cb)
    chat_id = cb.message.chat.id
    log = structlog.get_logger(__name__).bind(user_id=cb.from_user.id)

    user_data = await state.get_data()
    file_id = user_data.get("photo_file_id")
    if not file_id:
        await state.set_state(IdPhoto.waiting_for_photo)
        await bot.send_message(chat_id, locale_texts.send_photo_first)
        return

    options = GenerationOptions.from_fsm_data(user_data)
    await state.set_state(IdPhoto.generating)

    status_msg = await bot.send_message(chat_id, locale_texts.generating)
    status = StatusMessageManager(bot, chat_id, status_msg.message_id)
    status.start_rotation(
        locale_texts.generating,
        locale_texts.loading_messages,
        settings.status_rotation_seconds,
    )

    image_bytes: bytes | None = None
    error: IdPhotoError | None = None
    try:
        source_bytes = await download_file_bytes(bot, file_id)
        if source_bytes is not None:
            image_bytes = await id_photo_generator.generate_photo(
                SourceImage(data=source_bytes, media_type=user_data["media_type"]),
                options,
            )
    except IdPhotoError as e:
        error = e
    finally:
        # State first: the busy gate must lift even if cleanup fails.
        await state.set_state(IdPhoto.choosing_options)
        await status.delete()

    if error is not None:
        log.info("Generation failed", error_code=error.code)
        message = locale_texts.error_text(
            error.code, text=html.escape(getattr(error, "text", ""))
        )
        await bot.send_message(chat_id, message, reply_markup=result_kb(locale_texts))
        return

    if image_bytes is None:
        await state.set_state(IdPhoto.waiting_for_photo)
        await bot.send_message(chat_id, locale_texts.unreadable_image)
        return

    standard = options.photo_standard
    width, height = PHOTO_STANDARD_SIZES_MM[standard]
    caption = locale_texts.result_caption.format(
        standard=locale_texts.buttons.photo_standards.get(standard.value, standard.value),
        width=width,
        height=height,
    )
    filename = f"id_photo_{standard.value}.png"
    await bot.send_photo(chat_id, BufferedInputFile(image_bytes, filename=filename), caption=caption)
    await bot.send_document(
        chat_id,
        BufferedInputFile(image_bytes, filename=filename),
        reply_markup=result_kb(locale_texts),
    )
    log.info("ID photo delivered", size=len(image_bytes))


@router.callback_query(GenerateCallback.filter(), StateFilter(IdPhoto.choosing_options))
async def generate_pressed(
    cb: CallbackQuery,
    state: FSMContext,
    bot: Bot,
    id_photo_generator: IdPhotoGenerator,
) -> None:
    await cb.answer()
    with suppress(TelegramBadRequest):
        await cb.message.edit_reply_markup(reply_markup=None)
    await run_generation(cb, state, bot, id_photo_generator)


@router.callback_query(SessionActionCallback.filter(), StateFilter(IdPhoto.choosing_options))
async def session_action(
    cb: CallbackQuery,
    callback_data: SessionActionCallback,
    state: FSMContext,
    bot: Bot,
    id_photo_generator: IdPhotoGenerator,
) -> None:
    await cb.answer()
    with suppress(TelegramBadRequest):
        await cb.message.edit_reply_markup(reply_markup=None)

    if callback_data.action_type == "retry":
        await run_generation(cb, state, bot, id_photo_generator)
    elif callback_data.action_type == "options":
        locale_texts = _texts_for(cb)
        options = GenerationOptions.from_fsm_data(await state.get_data())
        await bot.send_message(
            cb.message.chat.id,
            locale_texts.options_prompt,
            reply_markup=options_kb(options, locale_texts),
        )
    elif callback_data.action_type == "new_photo":
        await state.clear()
        await state.set_state(IdPhoto.waiting_for_photo)
        await bot.send_message(cb.message.chat.id, _texts_for(cb).restart)

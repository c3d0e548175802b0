# id_photo_bot/keyboards/inline/options.py
from enum import Enum

from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from id_photo_bot.data.constants import BackgroundColor, Outfit, PhotoStandard
from id_photo_bot.data.texts.dto import LocaleTexts
from id_photo_bot.dto.id_photo import GenerationOptions
from .callbacks import GenerateCallback, OptionCallback, SessionActionCallback

SELECTED_MARK = "✅ "


def _option_row(
    field: str,
    members: type[Enum],
    labels: dict[str, str],
    selected: str,
) -> list[InlineKeyboardButton]:
    row = []
    for member in members:
        label = labels.get(member.value, member.value)
        if member.value == selected:
            label = SELECTED_MARK + label
        row.append(
            InlineKeyboardButton(
                text=label,
                callback_data=OptionCallback(field=field, value=member.value).pack(),
            )
        )
    return row


def _value(option: Enum | str) -> str:
    return getattr(option, "value", option)


def options_kb(options: GenerationOptions, texts: LocaleTexts) -> InlineKeyboardMarkup:
    """
    Creates the options keyboard: one row per option group, the
    beautification toggle and the generate button. Current choices are marked.
    """
    buttons = texts.buttons
    beautify_label = buttons.beautify_on if options.beautify else buttons.beautify_off
    rows = [
        _option_row("photo_standard", PhotoStandard, buttons.photo_standards, _value(options.photo_standard)),
        _option_row("background_color", BackgroundColor, buttons.background_colors, _value(options.background_color)),
        _option_row("outfit", Outfit, buttons.outfits, _value(options.outfit)),
        [
            InlineKeyboardButton(
                text=beautify_label,
                callback_data=OptionCallback(
                    field="beautify", value="off" if options.beautify else "on"
                ).pack(),
            )
        ],
        [InlineKeyboardButton(text=buttons.generate, callback_data=GenerateCallback().pack())],
    ]
    return InlineKeyboardMarkup(inline_keyboard=rows)


def result_kb(texts: LocaleTexts) -> InlineKeyboardMarkup:
    """Keyboard attached to a finished (or failed) generation."""
    return InlineKeyboardMarkup(inline_keyboard=[
        [
            InlineKeyboardButton(
                text=texts.buttons.retry,
                callback_data=SessionActionCallback(action_type="retry").pack(),
            ),
            InlineKeyboardButton(
                text=texts.buttons.new_photo,
                callback_data=SessionActionCallback(action_type="new_photo").pack(),
            ),
        ],
        [
            InlineKeyboardButton(
                text=texts.buttons.change_options,
                callback_data=SessionActionCallback(action_type="options").pack(),
            ),
        ],
    ])

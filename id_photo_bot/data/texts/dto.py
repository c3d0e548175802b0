# id_photo_bot/data/texts/dto.py
from pydantic import BaseModel
from typing import List


class BotCommandInfo(BaseModel):
    """Stores information for a single bot command."""
    command: str
    description: str


class BotInfo(BaseModel):
    """Stores the bot's description and short description."""
    description: str
    short_description: str


class ButtonTexts(BaseModel):
    """Labels for the options keyboard."""
    photo_standards: dict[str, str]
    background_colors: dict[str, str]
    outfits: dict[str, str]
    beautify_on: str
    beautify_off: str
    generate: str
    retry: str
    new_photo: str
    change_options: str


class LocaleTexts(BaseModel):
    """A collection of all texts for a specific locale."""
    commands: List[BotCommandInfo]
    bot_info: BotInfo
    buttons: ButtonTexts

    welcome: str
    restart: str
    help: str
    guide: str
    send_photo_first: str
    not_an_image: str
    unreadable_image: str
    options_prompt: str
    generating: str
    loading_messages: List[str]
    still_generating: str
    result_caption: str
    unexpected_error: str
    # Keyed by IdPhotoError.code
    errors: dict[str, str]

    def error_text(self, code: str, **kwargs: str) -> str:
        """Returns the localized message for an error code, falling back to the generic one."""
        template = self.errors.get(code)
        if template is None:
            return self.unexpected_error
        return template.format(**kwargs)

# id_photo_bot/keyboards/inline/callbacks.py
from aiogram.filters.callback_data import CallbackData


class OptionCallback(CallbackData, prefix="opt"):
    """Callback for changing one of the generation options."""
    field: str  # photo_standard | background_color | outfit | beautify
    value: str


class GenerateCallback(CallbackData, prefix="generate"):
    """Callback to start generation with the current options."""


class SessionActionCallback(CallbackData, prefix="session_action"):
    """Callback for actions after a result (e.g., generate again, new photo)."""
    action_type: str

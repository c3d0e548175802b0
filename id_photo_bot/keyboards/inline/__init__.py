# id_photo_bot/keyboards/inline/__init__.py
from .callbacks import GenerateCallback, OptionCallback, SessionActionCallback
from .options import options_kb, result_kb

__all__ = [
    "GenerateCallback",
    "OptionCallback",
    "SessionActionCallback",
    "options_kb",
    "result_kb",
]

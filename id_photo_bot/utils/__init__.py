# id_photo_bot/utils/__init__.py
from . import bot_commands, image, logging, status_manager

__all__ = [
    "bot_commands",
    "image",
    "logging",
    "status_manager",
]

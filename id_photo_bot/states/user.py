# id_photo_bot/states/user.py
from aiogram.fsm.state import State, StatesGroup


class IdPhoto(StatesGroup):
    """
    The ID photo flow: upload, option selection, then a single in-flight
    generation at a time.
    """
    waiting_for_photo = State()
    choosing_options = State()
    generating = State()

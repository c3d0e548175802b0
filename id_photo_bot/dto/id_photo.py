# id_photo_bot/dto/id_photo.py
from pydantic import BaseModel, ConfigDict

from id_photo_bot.data.constants import BackgroundColor, MediaType, Outfit, PhotoStandard


class SourceImage(BaseModel):
    """The user's uploaded photo, exactly as received."""
    model_config = ConfigDict(frozen=True)

    data: bytes
    media_type: MediaType


class GenerationOptions(BaseModel):
    """
    Formatting choices for a single generation request.

    Background color and outfit also accept unknown strings; the prompt
    builder falls back to its defaults for those.
    """
    model_config = ConfigDict(frozen=True)

    photo_standard: PhotoStandard = PhotoStandard.RESUME
    background_color: BackgroundColor | str = BackgroundColor.BLUE
    outfit: Outfit | str = Outfit.MALE_SUIT
    beautify: bool = False

    @classmethod
    def from_fsm_data(cls, fsm_data: dict) -> "GenerationOptions":
        """Factory method to safely create an instance from FSM state data."""
        return cls.model_validate(
            {k: v for k, v in fsm_data.items() if k in cls.model_fields}
        )


class GenerationRequest(BaseModel):
    """Everything the provider gateway needs for one call."""
    model_config = ConfigDict(frozen=True)

    image: SourceImage
    options: GenerationOptions
    instruction: str

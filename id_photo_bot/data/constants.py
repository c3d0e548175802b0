# id_photo_bot/data/constants.py
from enum import Enum


class PhotoStandard(str, Enum):
    """Target ID photo standards offered to the user."""
    RESUME = "resume"
    PASSPORT = "passport"
    MY_NUMBER = "my_number"  # Japanese "My Number" card


class BackgroundColor(str, Enum):
    BLUE = "blue"
    WHITE = "white"
    GRAY = "gray"


class Outfit(str, Enum):
    MALE_SUIT = "male_suit"
    FEMALE_SUIT = "female_suit"


class MediaType(str, Enum):
    """Still-image formats accepted as a source photo."""
    JPEG = "image/jpeg"
    PNG = "image/png"


# Print size (width, height) in millimetres for each standard.
PHOTO_STANDARD_SIZES_MM: dict[PhotoStandard, tuple[int, int]] = {
    PhotoStandard.RESUME: (30, 40),
    PhotoStandard.PASSPORT: (35, 45),
    PhotoStandard.MY_NUMBER: (35, 45),
}

BACKGROUND_HEX: dict[str, str] = {
    BackgroundColor.BLUE: "#a0d8ef",
    BackgroundColor.WHITE: "#ffffff",
    BackgroundColor.GRAY: "#f0f0f0",
}
DEFAULT_BACKGROUND_HEX = "#ffffff"

OUTFIT_DESCRIPTIONS: dict[str, str] = {
    Outfit.MALE_SUIT: "dark-colored business suit with a white collared shirt and a simple tie",
    Outfit.FEMALE_SUIT: "dark-colored business suit with a white blouse",
}
DEFAULT_OUTFIT_DESCRIPTION = "professional business attire"

# Gemini finish reasons that mean the request was refused on policy grounds.
SAFETY_FINISH_REASONS = frozenset({
    "SAFETY",
    "IMAGE_SAFETY",
    "PROHIBITED_CONTENT",
    "IMAGE_PROHIBITED_CONTENT",
})

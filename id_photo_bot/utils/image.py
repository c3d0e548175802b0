# id_photo_bot/utils/image.py
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from id_photo_bot.data.constants import MediaType

_PIL_FORMATS: dict[str, MediaType] = {
    "JPEG": MediaType.JPEG,
    "PNG": MediaType.PNG,
}


def detect_media_type(data: bytes) -> MediaType | None:
    """
    Returns the media type of an uploaded image, or None when it is not a
    readable JPEG or PNG.
    """
    try:
        with Image.open(BytesIO(data)) as img:
            img.verify()
            return _PIL_FORMATS.get(img.format or "")
    except (UnidentifiedImageError, OSError, SyntaxError):
        return None

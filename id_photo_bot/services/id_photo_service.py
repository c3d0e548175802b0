# id_photo_bot/services/id_photo_service.py
import time

import structlog
from pydantic import ValidationError

from id_photo_bot.data.constants import BackgroundColor, MediaType, Outfit, PhotoStandard
from id_photo_bot.data.settings import GeminiConfig
from id_photo_bot.dto.id_photo import GenerationOptions, SourceImage
from .clients.google_ai_client import GoogleGeminiClient, create_gemini_client
from .errors import ConfigurationError, IdPhotoError, InvalidInputError, TransportFailureError
from .prompting.id_photo import build_request
from .response_interpreter import interpret_response

logger = structlog.get_logger(__name__)


class IdPhotoGenerator:
    """
    Entry point for ID photo generation: build request, call Gemini once,
    interpret the reply.

    Every failure leaves this class as an `IdPhotoError` subclass.
    """

    def __init__(self, client: GoogleGeminiClient | None) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: GeminiConfig) -> "IdPhotoGenerator":
        return cls(create_gemini_client(config))

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def _require_client(self) -> GoogleGeminiClient:
        if self._client is None:
            logger.error("ID photo generation requested without a configured API key.")
            raise ConfigurationError()
        return self._client

    async def generate(
        self,
        image_bytes: bytes,
        media_type: MediaType | str,
        background_color: BackgroundColor | str,
        outfit: Outfit | str,
        beautify: bool,
        photo_standard: PhotoStandard = PhotoStandard.RESUME,
    ) -> bytes:
        """Returns the encoded bytes of the generated ID photo."""
        self._require_client()
        try:
            options = GenerationOptions(
                photo_standard=photo_standard,
                background_color=background_color,
                outfit=outfit,
                beautify=beautify,
            )
            image = SourceImage(data=image_bytes, media_type=media_type)
        except ValidationError as e:
            logger.warning(
                "Rejected generation input",
                errors=e.errors(include_url=False, include_input=False),
            )
            raise InvalidInputError() from e
        return await self.generate_photo(image, options)

    async def generate_photo(self, image: SourceImage, options: GenerationOptions) -> bytes:
        log = logger.bind(
            media_type=image.media_type.value,
            background_color=str(getattr(options.background_color, "value", options.background_color)),
            outfit=str(getattr(options.outfit, "value", options.outfit)),
            beautify=options.beautify,
        )

        client = self._require_client()
        request = build_request(image, options)
        start_time = time.monotonic()

        try:
            response = await client.generate_content(request)
            image_bytes = interpret_response(response)
        except IdPhotoError as e:
            log.warning(
                "ID photo generation failed",
                error_code=e.code,
                generation_time_ms=int((time.monotonic() - start_time) * 1000),
            )
            raise
        except Exception as e:
            log.exception("An error occurred during ID photo generation")
            raise TransportFailureError(str(e) or None) from e

        log.info(
            "ID photo generation successful",
            image_size=len(image_bytes),
            generation_time_ms=int((time.monotonic() - start_time) * 1000),
        )
        return image_bytes

# id_photo_bot/services/errors.py
"""Classified failures of an ID photo generation attempt."""


class IdPhotoError(Exception):
    """Base class. `code` selects the localized message shown to the user."""

    code = "unknown_failure"
    default_message = "Photo generation failed for an unknown reason."

    def __init__(self, message: str | None = None) -> None:
        self.user_message = message or self.default_message
        super().__init__(self.user_message)


class ConfigurationError(IdPhotoError):
    code = "configuration"
    default_message = (
        "The Gemini API key is not configured. "
        "Set the GEMINI__API_KEY environment variable."
    )


class SafetyBlockedError(IdPhotoError):
    code = "safety_blocked"
    default_message = (
        "Generation was blocked by the safety policy. "
        "The image may be inappropriate."
    )


class EmptyResponseError(IdPhotoError):
    code = "empty_response"
    default_message = "The AI returned an empty response. Please try again later."


class ProviderMessageError(IdPhotoError):
    """The provider answered with text instead of an image."""

    code = "provider_message"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Message from the AI: {text}")


class UnknownFailureError(IdPhotoError):
    code = "unknown_failure"
    default_message = (
        "The AI could not generate an image. "
        "Try a different photo or change the options."
    )


class TransportFailureError(IdPhotoError):
    code = "transport_failure"
    default_message = "Photo generation failed due to an unknown error."


class InvalidInputError(IdPhotoError):
    """The image or options handed to the generator failed validation."""

    code = "invalid_input"
    default_message = "The photo or options could not be used. Upload a JPEG or PNG image."

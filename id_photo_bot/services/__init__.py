# id_photo_bot/services/__init__.py
from .errors import (
    ConfigurationError,
    EmptyResponseError,
    IdPhotoError,
    InvalidInputError,
    ProviderMessageError,
    SafetyBlockedError,
    TransportFailureError,
    UnknownFailureError,
)
from .id_photo_service import IdPhotoGenerator

__all__ = [
    "ConfigurationError",
    "EmptyResponseError",
    "IdPhotoError",
    "IdPhotoGenerator",
    "InvalidInputError",
    "ProviderMessageError",
    "SafetyBlockedError",
    "TransportFailureError",
    "UnknownFailureError",
]

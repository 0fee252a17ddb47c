"""Translation client: one HTTP request per translation, tolerant response parsing."""

from multitranslate.translation.base import (
    EmptyInputError,
    ErrorKind,
    HttpStatusError,
    NetworkError,
    TranslationError,
    TranslationOutcome,
    TranslationRequest,
)
from multitranslate.translation.client import TranslationClient
from multitranslate.translation.config import (
    AUTO_DETECT,
    DEFAULT_ENDPOINT,
    LANGUAGES,
    TARGET_LANGUAGES,
    EndpointConfig,
)
from multitranslate.translation.parsing import extract_translation, interpret_response

__all__ = [
    "AUTO_DETECT",
    "DEFAULT_ENDPOINT",
    "EmptyInputError",
    "EndpointConfig",
    "ErrorKind",
    "HttpStatusError",
    "LANGUAGES",
    "NetworkError",
    "TARGET_LANGUAGES",
    "TranslationClient",
    "TranslationError",
    "TranslationOutcome",
    "TranslationRequest",
    "extract_translation",
    "interpret_response",
]

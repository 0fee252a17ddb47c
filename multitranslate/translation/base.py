"""Request, outcome and error types shared by the translation client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Why a translation did not produce text."""

    EMPTY_INPUT = "empty_input"
    HTTP_STATUS = "http_status"
    NETWORK = "network"


class TranslationError(Exception):
    """Base class for every failure surfaced by the translation client."""

    kind: ErrorKind


class EmptyInputError(TranslationError):
    """Raised before any network activity when there is nothing to translate."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "Please enter text to translate.") -> None:
        super().__init__(message)


class HttpStatusError(TranslationError):
    """The backend answered with a non-success status code."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API returned {status_code}: {body}")


class NetworkError(TranslationError):
    """Transport-level failure (connection refused, DNS, timeout...)."""

    kind = ErrorKind.NETWORK


@dataclass(frozen=True)
class TranslationRequest:
    """A single outbound translation request."""

    text: str
    source_language: str
    target_language: str
    format: str = "text"

    @classmethod
    def build(
        cls,
        text: str | None,
        source_language: str,
        target_language: str,
    ) -> TranslationRequest:
        """Trim the input and validate it.

        Raises:
            EmptyInputError: If the text is empty or whitespace only.
        """
        trimmed = (text or "").strip()
        if not trimmed:
            raise EmptyInputError()
        return cls(
            text=trimmed,
            source_language=source_language,
            target_language=target_language,
        )

    def to_payload(self) -> dict[str, str]:
        return {
            "q": self.text,
            "source": self.source_language,
            "target": self.target_language,
            "format": self.format,
        }


@dataclass(frozen=True)
class TranslationOutcome:
    """Tagged result of a translation: either ``text`` or ``error`` is set."""

    text: str | None = None
    error: TranslationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> str:
        """Return the translated text, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.text or ""

"""Endpoint configuration and the language table offered in the UI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://translate.argosopentech.com/translate"
DEFAULT_TIMEOUT = 30.0

ENV_API_URL = "TRANSLATE_API_URL"
ENV_API_KEY = "TRANSLATE_API_KEY"
ENV_API_TIMEOUT = "TRANSLATE_API_TIMEOUT"

AUTO_DETECT = "auto"

# Display name -> language code, in menu order.
LANGUAGES: dict[str, str] = {
    "Auto Detect": AUTO_DETECT,
    "English": "en",
    "Turkish": "tr",
    "Spanish": "es",
    "French": "fr",
    "German": "de",
    "Italian": "it",
    "Portuguese": "pt",
    "Russian": "ru",
    "Arabic": "ar",
    "Chinese (Simplified)": "zh",
    "Japanese": "ja",
    "Korean": "ko",
}

TARGET_LANGUAGES: dict[str, str] = {
    name: code for name, code in LANGUAGES.items() if code != AUTO_DETECT
}


@dataclass(frozen=True)
class EndpointConfig:
    """Where to send translation requests and how to authenticate.

    Empty strings are treated the same as ``None`` (not configured).
    """

    url: str | None = None
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @property
    def is_custom(self) -> bool:
        return bool(self.url)

    @property
    def resolved_url(self) -> str:
        return self.url if self.url else DEFAULT_ENDPOINT

    def auth_headers(self) -> dict[str, str]:
        # Sent whenever a key is set, including against the default endpoint.
        if self.api_key:
            return {"Authorization": f"Bearer {self.api_key}"}
        return {}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EndpointConfig:
        """Read the endpoint override, credential and timeout from the environment.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            An EndpointConfig snapshot; later environment changes do not affect it.
        """
        if environ is None:
            environ = os.environ

        url = (environ.get(ENV_API_URL) or "").strip() or None
        api_key = (environ.get(ENV_API_KEY) or "").strip() or None

        timeout = DEFAULT_TIMEOUT
        raw_timeout = (environ.get(ENV_API_TIMEOUT) or "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                logger.warning(
                    "Ignoring invalid %s=%r, using %.0fs",
                    ENV_API_TIMEOUT,
                    raw_timeout,
                    DEFAULT_TIMEOUT,
                )
            else:
                if timeout <= 0:
                    logger.warning(
                        "Ignoring non-positive %s=%r, using %.0fs",
                        ENV_API_TIMEOUT,
                        raw_timeout,
                        DEFAULT_TIMEOUT,
                    )
                    timeout = DEFAULT_TIMEOUT

        return cls(url=url, api_key=api_key, timeout=timeout)

"""HTTP translation client for LibreTranslate-compatible endpoints."""

from __future__ import annotations

import json
import logging
import time

import httpx

from multitranslate.translation.base import (
    HttpStatusError,
    NetworkError,
    TranslationError,
    TranslationOutcome,
    TranslationRequest,
)
from multitranslate.translation.config import EndpointConfig
from multitranslate.translation.parsing import interpret_response

logger = logging.getLogger(__name__)


class TranslationClient:
    """Sends one POST per translation to the configured endpoint.

    Args:
        config:      Endpoint and credential. Defaults to the public endpoint
                     with no credential.
        http_client: Optional shared ``httpx.AsyncClient``. When omitted a
                     fresh client is opened and closed for every call. A
                     shared client is never closed here.
    """

    def __init__(
        self,
        config: EndpointConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or EndpointConfig()
        self._http_client = http_client

    @property
    def config(self) -> EndpointConfig:
        return self._config

    @property
    def endpoint(self) -> str:
        return self._config.resolved_url

    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
    ) -> str:
        """Translate ``text`` from ``source_language`` into ``target_language``.

        Args:
            text: Text to translate; surrounding whitespace is trimmed.
            source_language: Language code, or ``"auto"`` for auto-detection.
            target_language: Language code to translate into.

        Returns:
            The translated text, or the raw response body when the backend
            answered successfully in a shape we do not recognise.

        Raises:
            EmptyInputError: If ``text`` is empty or whitespace only.
            NetworkError: If the request could not be completed.
            HttpStatusError: If the backend returned a non-2xx status.
        """
        request = TranslationRequest.build(text, source_language, target_language)
        body = await self._post(request)
        translated, shape = interpret_response(body)
        logger.debug("Response matched shape %r", shape)
        return translated

    async def translate_outcome(
        self,
        text: str,
        source_language: str,
        target_language: str,
    ) -> TranslationOutcome:
        """Like :meth:`translate` but returns a tagged outcome instead of raising."""
        try:
            translated = await self.translate(text, source_language, target_language)
        except TranslationError as exc:
            return TranslationOutcome(error=exc)
        return TranslationOutcome(text=translated)

    async def _post(self, request: TranslationRequest) -> str:
        url = self.endpoint
        headers = {"Content-Type": "application/json"}
        headers.update(self._config.auth_headers())
        content = _encode_payload(request)

        logger.info(
            "[INFO] Sending translation request to %s (%s -> %s, %d chars)",
            url,
            request.source_language,
            request.target_language,
            len(request.text),
        )
        start_time = time.perf_counter()

        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    url,
                    content=content,
                    headers=headers,
                    timeout=self._config.timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                    response = await client.post(url, content=content, headers=headers)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning("Translation request to %s failed: %s", url, exc)
            raise NetworkError(str(exc) or exc.__class__.__name__) from exc

        duration = time.perf_counter() - start_time
        body = response.text
        logger.info(
            "[INFO] Translation response %d from %s took %.2fs",
            response.status_code,
            url,
            duration,
        )

        if not response.is_success:
            logger.warning("Translation API returned %d: %s", response.status_code, body)
            raise HttpStatusError(response.status_code, body)

        return body


def _encode_payload(request: TranslationRequest) -> bytes:
    return json.dumps(request.to_payload(), ensure_ascii=False).encode("utf-8")

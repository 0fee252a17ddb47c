"""Shared fixtures: a recording fake HTTP backend and a stand-in flet Page."""

from __future__ import annotations

import json
from types import SimpleNamespace

import httpx
import pytest

from multitranslate.translation import EndpointConfig, TranslationClient


class FakeBackend:
    """Answers every request with a canned response and records what it saw."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: str | bytes = '{"translatedText": "ok"}'
        self.content_type = "application/json"
        self.error: Exception | None = None

    def respond(self, body, status_code: int = 200, content_type: str = "application/json") -> None:
        self.body = body
        self.status_code = status_code
        self.content_type = content_type

    def fail(self, error: Exception) -> None:
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        content = self.body.encode("utf-8") if isinstance(self.body, str) else self.body
        return httpx.Response(
            self.status_code,
            content=content,
            headers={"Content-Type": f"{self.content_type}; charset=utf-8"},
        )

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_payload(self) -> dict:
        return json.loads(self.last_request.content.decode("utf-8"))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def make_client(backend):
    """Build a TranslationClient whose HTTP traffic goes to ``backend``."""

    def _make(config: EndpointConfig | None = None) -> TranslationClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(backend))
        return TranslationClient(config, http_client=http_client)

    return _make


class FakePage:
    """Just enough of ft.Page for the translator window and the startup gate."""

    def __init__(self) -> None:
        self.controls: list = []
        self.services: list = []
        self.dialogs: list = []
        self.window = SimpleNamespace()
        self.updates = 0

    def add(self, *controls) -> None:
        self.controls.extend(controls)

    def update(self) -> None:
        self.updates += 1

    def show_dialog(self, dialog) -> None:
        self.dialogs.append(dialog)

    def pop_dialog(self) -> None:
        if self.dialogs:
            self.dialogs.pop()


@pytest.fixture
def page() -> FakePage:
    return FakePage()

"""Shared fixtures: a recording fake client and a recording logger."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest
from shopify_resource import Client, Credentials, Deletable, Readable, ResourceDescriptor


class FakeClient(Client):
    """Client returning queued responses and recording every call."""

    def __init__(self, responses: list[dict[str, Any]] | None = None) -> None:
        self.responses = list(responses or [])
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []

    def get(
        self,
        credentials: Credentials,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        self.calls.append(("GET", path, dict(params) if params is not None else None))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def delete(self, credentials: Credentials, path: str) -> None:
        self.calls.append(("DELETE", path, None))


class RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def info(self, event: str, **kw: Any) -> None:
        self.events.append((event, kw))


class OrderRepository(Readable, Deletable):
    descriptor = ResourceDescriptor("orders")


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(myshopify_domain="example.myshopify.com", access_token="token")


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


def pages(*ids: list[int]) -> list[dict[str, Any]]:
    """Build 'orders' page responses from lists of ids."""
    return [{"orders": [{"id": i} for i in page]} for page in ids]

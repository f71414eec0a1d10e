"""Shopify API value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    """Shop credentials, passed through to the client on every request."""

    myshopify_domain: str
    access_token: str

    def __repr__(self) -> str:
        return f"Credentials(myshopify_domain={self.myshopify_domain!r}, access_token='***')"

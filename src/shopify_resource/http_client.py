"""httpx implementation of the Client contract."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .client import Client
from .config import ClientConfig
from .exceptions import ShopifyError, ShopifyErrorCodes
from .models import Credentials


class HttpClient(Client):
    """Synchronous Shopify admin API client built on httpx.

    Neither retries nor throttles; callers that need either wrap this
    client or supply their own.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        # an injected client belongs to the caller and is left open
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=self._config.timeout_seconds)

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def _url(self, credentials: Credentials, path: str) -> str:
        return (
            f"https://{credentials.myshopify_domain}"
            f"/admin/api/{self._config.api_version}/{path}.json"
        )

    def _headers(self, credentials: Credentials) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "X-Shopify-Access-Token": credentials.access_token,
        }

    def _handle_error(self, resp: httpx.Response, context: str) -> None:
        if resp.status_code in (401, 403):
            raise ShopifyError(
                code=ShopifyErrorCodes.UNAUTHORIZED,
                message=f"{context}: HTTP {resp.status_code}",
            )
        if resp.status_code == 404:
            raise ShopifyError(
                code=ShopifyErrorCodes.NOT_FOUND,
                message=f"{context}: not found",
            )
        if resp.status_code == 422:
            raise ShopifyError(
                code=ShopifyErrorCodes.UNPROCESSABLE,
                message=f"{context}: HTTP 422: {resp.text}",
            )
        if resp.status_code >= 400:
            raise ShopifyError(
                code=ShopifyErrorCodes.HTTP_ERROR,
                message=f"{context}: HTTP {resp.status_code}: {resp.text}",
            )

    def get(
        self,
        credentials: Credentials,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        query = {
            k: ",".join(v) if isinstance(v, list) else v for k, v in (params or {}).items()
        }
        try:
            resp = self._http.get(
                self._url(credentials, path),
                params=query,
                headers=self._headers(credentials),
            )
            self._handle_error(resp, f"GET {path}")
            data: dict[str, Any] = resp.json()
            return data
        except ShopifyError:
            raise
        except Exception as e:
            raise ShopifyError(
                code=ShopifyErrorCodes.HTTP_ERROR,
                message=f"GET {path} failed: {e}",
                cause=e,
            ) from e

    def delete(self, credentials: Credentials, path: str) -> None:
        try:
            resp = self._http.delete(
                self._url(credentials, path),
                headers=self._headers(credentials),
            )
            self._handle_error(resp, f"DELETE {path}")
        except ShopifyError:
            raise
        except Exception as e:
            raise ShopifyError(
                code=ShopifyErrorCodes.HTTP_ERROR,
                message=f"DELETE {path} failed: {e}",
                cause=e,
            ) from e

"""Client abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .models import Credentials


class Client(ABC):
    """HTTP collaborator used by resource capabilities.

    Implementations return decoded response bodies and raise on transport or
    HTTP failure.
    """

    @abstractmethod
    def get(
        self,
        credentials: Credentials,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Issue a GET request for ``path`` and return the decoded body."""
        ...

    @abstractmethod
    def delete(self, credentials: Credentials, path: str) -> None:
        """Issue a DELETE request for ``path``."""
        ...

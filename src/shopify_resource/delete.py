"""Delete capability."""

from __future__ import annotations

from .models import Credentials
from .resource import Resource


class Deletable(Resource):
    """Adds ``delete`` to a repository."""

    def delete(self, credentials: Credentials, id: int) -> None:
        self.logger.info("deleting record", resource=self.resource_singular, id=id)

        self.client.delete(credentials, f"{self.resource}/{id}")

"""Resource descriptor and the base capability shared by repositories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from .client import Client
from .logger import get_logger

_ES_SUFFIXES = ("sses", "xes", "ches", "shes")


def singularize(resource: str) -> str:
    """Derive the singular envelope key from a plural resource name."""
    if resource.endswith("ies"):
        return resource[:-3] + "y"
    if resource.endswith(_ES_SUFFIXES):
        return resource[:-2]
    if resource.endswith("s"):
        return resource[:-1]
    return resource


@dataclass(frozen=True)
class ResourceDescriptor:
    """Collection path segment and single-item envelope key of a resource.

    ``resource`` is the plural name used in URLs and collection envelopes
    (``orders``); ``resource_singular`` keys single-item responses
    (``order``) and is derived from ``resource`` when omitted.
    """

    resource: str
    resource_singular: str = field(default="")

    def __post_init__(self) -> None:
        if not self.resource:
            raise ValueError("resource name must not be empty")
        if not self.resource_singular:
            object.__setattr__(self, "resource_singular", singularize(self.resource))


class Resource:
    """Base capability binding a resource descriptor to a client and logger.

    Concrete repositories declare ``descriptor`` at class level::

        class OrderRepository(Readable, Deletable):
            descriptor = ResourceDescriptor("orders")
    """

    descriptor: ClassVar[ResourceDescriptor]

    def __init__(self, client: Client, *, logger: Any = None) -> None:
        if getattr(type(self), "descriptor", None) is None:
            raise TypeError(f"{type(self).__name__} does not declare a resource descriptor")
        self._client = client
        self._logger = logger or get_logger()

    @property
    def resource(self) -> str:
        return self.descriptor.resource

    @property
    def resource_singular(self) -> str:
        return self.descriptor.resource_singular

    @property
    def client(self) -> Client:
        return self._client

    @property
    def logger(self) -> Any:
        return self._logger

"""Read capability: find, count and since_id paginated iteration."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any, ClassVar, overload

from .client import Client
from .exceptions import PaginationFieldsError
from .models import Credentials
from .params import Params, ParamValue, field_names, finalise_params
from .resource import Resource

Record = dict[str, Any]


class Readable(Resource):
    """Adds ``find``, ``count`` and ``each`` to a repository.

    Resource default params sit between the Shopify defaults and call-site
    params. They come from the ``default_params`` constructor argument, or
    from the class attribute of the same name when none is given. A list
    under 'fields' is sent comma-joined.

    Example::

        class OrderRepository(Readable):
            descriptor = ResourceDescriptor("orders")

        orders = OrderRepository(client, default_params={"fields": ["id", "tags"]})
        for order in orders.each(credentials, {"status": "any"}):
            ...
    """

    default_params: ClassVar[Mapping[Any, ParamValue]] = {}

    def __init__(
        self,
        client: Client,
        *,
        default_params: Mapping[Any, ParamValue] | None = None,
        logger: Any = None,
    ) -> None:
        super().__init__(client, logger=logger)
        source = type(self).default_params if default_params is None else default_params
        self._default_params: Params = {str(k): v for k, v in source.items()}

    @property
    def resource_default_params(self) -> Params:
        return dict(self._default_params)

    def find(
        self,
        credentials: Credentials,
        id: int,
        params: Mapping[Any, ParamValue] | None = None,
    ) -> Record:
        final = self._finalise_params(params)

        self.logger.info("fetching record", resource=self.resource_singular, id=id)

        return self.client.get(credentials, f"{self.resource}/{id}", final)[
            self.resource_singular
        ]

    def count(
        self,
        credentials: Credentials,
        params: Mapping[Any, ParamValue] | None = None,
    ) -> int:
        final = self._finalise_params(params)

        self.logger.info("fetching count", resource=self.resource)

        return self.client.get(credentials, f"{self.resource}/count", final)["count"]

    @overload
    def each(
        self,
        credentials: Credentials,
        params: Mapping[Any, ParamValue] | None = None,
        callback: None = None,
    ) -> Iterator[Record]: ...

    @overload
    def each(
        self,
        credentials: Credentials,
        params: Mapping[Any, ParamValue] | None,
        callback: Callable[[Record], Any],
    ) -> None: ...

    @overload
    def each(
        self,
        credentials: Credentials,
        *,
        callback: Callable[[Record], Any],
    ) -> None: ...

    def each(
        self,
        credentials: Credentials,
        params: Mapping[Any, ParamValue] | None = None,
        callback: Callable[[Record], Any] | None = None,
    ) -> Iterator[Record] | None:
        """Iterate over every matching record, following the since_id cursor.

        Without ``callback`` a lazy iterator is returned (the same as
        :meth:`iterate`); pages are fetched as it is consumed and nothing more
        is fetched once it is abandoned. With ``callback`` each record is
        passed to it in fetch order and None is returned.

        Raises:
            PaginationFieldsError: 'fields' is set but does not include 'id'.
                Raised before any request is made.
        """
        records = self.iterate(credentials, params)
        if callback is None:
            return records
        for record in records:
            callback(record)
        return None

    def iterate(
        self,
        credentials: Credentials,
        params: Mapping[Any, ParamValue] | None = None,
    ) -> Iterator[Record]:
        """Return the lazy iterator form of :meth:`each`."""
        final = self._finalise_params(params)
        self._assert_fields_id(final)
        since_id = final.pop("since_id", 1)

        return self._paginate(credentials, final, since_id)

    def _paginate(
        self,
        credentials: Credentials,
        params: Params,
        since_id: ParamValue,
    ) -> Iterator[Record]:
        while True:
            self.logger.info("fetching page", resource=self.resource, since_id=since_id)

            page = self.client.get(credentials, self.resource, {**params, "since_id": since_id})[
                self.resource
            ]
            yield from page

            if not page:
                return

            since_id = page[-1]["id"]

    def _assert_fields_id(self, params: Params) -> None:
        fields = params.get("fields")
        if fields is None:
            return
        names = field_names(fields)
        if "id" not in names:
            raise PaginationFieldsError(names)

    def _finalise_params(self, params: Mapping[Any, ParamValue] | None) -> Params:
        return finalise_params(params, self._default_params)

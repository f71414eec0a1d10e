"""shopify_resource exception types."""

from __future__ import annotations


class ShopifyError(Exception):
    """Base error for the shopify_resource library."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ShopifyErrorCodes:
    """Error code constants for ShopifyError."""

    NOT_FOUND: str = "NOT_FOUND"
    UNAUTHORIZED: str = "UNAUTHORIZED"
    UNPROCESSABLE: str = "UNPROCESSABLE"
    HTTP_ERROR: str = "HTTP_ERROR"
    INVALID_CONFIG: str = "INVALID_CONFIG"


class ConfigError(ShopifyError):
    """Raised when a configuration file cannot be read, parsed or validated."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(ShopifyErrorCodes.INVALID_CONFIG, message, cause)


class PaginationFieldsError(ValueError):
    """Raised when pagination is requested with a 'fields' filter lacking 'id'."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__("attempt to paginate without id field")
        self.fields = fields

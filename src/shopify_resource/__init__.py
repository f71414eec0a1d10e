"""shopify_resource: read and delete capabilities for Shopify REST resources."""

from .client import Client
from .config import ClientConfig, LogConfig, Settings, load
from .delete import Deletable
from .exceptions import (
    ConfigError,
    PaginationFieldsError,
    ShopifyError,
    ShopifyErrorCodes,
)
from .http_client import HttpClient
from .logger import configure_logging, get_logger
from .models import Credentials
from .params import DEFAULT_SHOPIFY_PARAMS, ParamValue, Params, field_names, finalise_params
from .read import Readable, Record
from .resource import Resource, ResourceDescriptor, singularize

__all__ = [
    "Client",
    "ClientConfig",
    "ConfigError",
    "Credentials",
    "DEFAULT_SHOPIFY_PARAMS",
    "Deletable",
    "HttpClient",
    "LogConfig",
    "PaginationFieldsError",
    "ParamValue",
    "Params",
    "Readable",
    "Record",
    "Resource",
    "ResourceDescriptor",
    "Settings",
    "ShopifyError",
    "ShopifyErrorCodes",
    "configure_logging",
    "field_names",
    "finalise_params",
    "get_logger",
    "load",
    "singularize",
]

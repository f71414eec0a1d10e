"""Query parameter layering and finalisation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

ParamValue = str | int | list[str]
Params = dict[str, ParamValue]

# Defaults applied by Shopify when not specified.
DEFAULT_SHOPIFY_PARAMS: Mapping[str, ParamValue] = {"limit": 50}


def _stringify_keys(params: Mapping[Any, ParamValue] | None) -> Params:
    return {str(k): v for k, v in (params or {}).items()}


def finalise_params(
    params: Mapping[Any, ParamValue] | None = None,
    defaults: Mapping[Any, ParamValue] | None = None,
) -> Params:
    """Merge params over the default layers and format them for a query string.

    Precedence, lowest first: DEFAULT_SHOPIFY_PARAMS, ``defaults``, ``params``.
    Same-key values are replaced whole. A list under 'fields' is joined with
    commas. Neither input is mutated.
    """
    result: Params = {
        **_stringify_keys(DEFAULT_SHOPIFY_PARAMS),
        **_stringify_keys(defaults),
        **_stringify_keys(params),
    }
    fields = result.get("fields")
    if isinstance(fields, list):
        result["fields"] = ",".join(fields)
    return result


def field_names(value: ParamValue) -> list[str]:
    """Return the logical field list of a 'fields' value."""
    if isinstance(value, list):
        return [str(v).strip() for v in value]
    return [name.strip() for name in str(value).split(",") if name.strip()]

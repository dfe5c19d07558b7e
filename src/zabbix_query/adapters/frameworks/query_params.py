"""Shared query parameter parsing utilities for framework adapters.

Invalid values never raise here; each helper falls back to its default
and leaves validation of filter syntax to the core.
"""

from zabbix_query.core.config import VALID_MODES, VALUE_TYPES

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _first(params: dict[str, list[str]], name: str) -> str | None:
    values = params.get(name)
    return values[0] if values else None


def _parse_filter_param(params: dict[str, list[str]], name: str) -> str:
    """Return the raw filter string for name, or "" when missing.

    Args:
        params: Parsed query string parameters (as returned by urllib.parse.parse_qs
            with keep_blank_values=True).
        name: Parameter name ("group", "host", "application" or "item").
    """
    # @tra: Adapter.ASGI.QueryParameter.Filter
    return _first(params, name) or ""


def _parse_mode_param(params: dict[str, list[str]]) -> str:
    """Parse the 'mode' query parameter, defaulting to "history"."""
    # @tra: Adapter.ASGI.QueryParameter.Mode
    mode = (_first(params, "mode") or "").lower()
    return mode if mode in VALID_MODES else "history"


def _parse_value_type_param(params: dict[str, list[str]]) -> str:
    """Parse the 'value_type' query parameter, defaulting to "avg"."""
    # @tra: Adapter.ASGI.QueryParameter.ValueType
    value_type = (_first(params, "value_type") or "").lower()
    return value_type if value_type in VALUE_TYPES else "avg"


def _parse_bool_param(params: dict[str, list[str]], name: str) -> bool:
    """Parse a boolean flag such as 'add_host'. Missing means False."""
    # @tra: Adapter.ASGI.QueryParameter.Bool
    raw = _first(params, name)
    return raw is not None and raw.lower() in _TRUE_VALUES


def _parse_time_param(
    params: dict[str, list[str]], name: str, default: int | None
) -> int | None:
    """Parse a Unix timestamp parameter ('from' or 'till').

    Returns:
        Timestamp in whole seconds, or default if invalid or missing.
        Rejects negative, NaN, and infinite values.
    """
    # @tra: Adapter.ASGI.QueryParameter.Time
    raw = _first(params, name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if value < 0 or value != value or value in (float("inf"), float("-inf")):
        return default
    return int(value)

"""ASGI generic adapter exposing filter resolution and sample conversion.

This adapter provides a framework-agnostic ASGI application that can be used
with any ASGI server (uvicorn, hypercorn, daphne) without requiring a web
framework as a dependency.
"""

import json
import logging
from collections.abc import Callable, Coroutine
from typing import Any
from urllib.parse import parse_qs

from zabbix_query.adapters.frameworks.query_params import (
    _parse_bool_param,
    _parse_filter_param,
    _parse_mode_param,
    _parse_time_param,
    _parse_value_type_param,
)
from zabbix_query.core.config import QueryConfig
from zabbix_query.core.converter import convert
from zabbix_query.core.encoding.grafana import encode_items, encode_timeseries_json
from zabbix_query.core.errors import InvalidFilterSyntax
from zabbix_query.core.models import ResolvedItem
from zabbix_query.core.ports import InventorySnapshotPort, SampleSourcePort
from zabbix_query.core.resolver import resolve

logger = logging.getLogger(__name__)

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]


def _parse_query_params(scope: Scope) -> dict[str, list[str]]:
    """Parse query string from ASGI scope into parameter dictionary.

    Blank values are kept so that an explicitly empty filter stays empty.

    Args:
        scope: ASGI scope dictionary containing request metadata.

    Returns:
        Dictionary mapping parameter names to lists of values.
        Returns empty dict if query_string is missing or empty.
    """
    # @tra: Adapter.ASGI.QueryParameter.InvalidUTF8
    query_string = scope.get("query_string", b"").decode(errors="replace")
    return parse_qs(query_string, keep_blank_values=True)


async def _send_response(send: Send, status: int, content_type: str, body: str) -> None:
    """Send an HTTP response with headers and body.

    Args:
        send: ASGI send callable for writing response.
        status: HTTP status code.
        content_type: Content-Type header value.
        body: Response body as string (will be encoded to bytes).
    """
    headers = [(b"content-type", content_type.encode())]
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body.encode()})


async def _handle_endpoint(
    send: Send,
    endpoint_func: Callable[[], str],
    log_message: str,
) -> None:
    """Execute an endpoint function with error handling and send response.

    Malformed filters are the caller's fault and map to 400; anything else
    is logged and reported as 500.

    Args:
        send: ASGI send callable for writing response.
        endpoint_func: Function that returns the JSON response body.
        log_message: Message to log on unexpected errors.
    """
    try:
        body = endpoint_func()
    # @tra: Adapter.ASGI.ItemsEndpoint.InvalidFilter
    # @tra: Adapter.ASGI.TimeseriesEndpoint.SourceError
    except InvalidFilterSyntax as e:
        error_body = json.dumps({"error": str(e)})
        await _send_response(send, 400, "application/json", error_body)
        return
    except Exception:
        logger.exception(log_message)
        error_body = json.dumps({"error": "Internal Server Error"})
        await _send_response(send, 500, "application/json", error_body)
        return
    await _send_response(send, 200, "application/json", body)


def _resolve_from_params(
    params: dict[str, list[str]], snapshot: InventorySnapshotPort
) -> list[ResolvedItem]:
    return resolve(
        _parse_filter_param(params, "group"),
        _parse_filter_param(params, "host"),
        _parse_filter_param(params, "application"),
        _parse_filter_param(params, "item"),
        snapshot,
    )


def create_asgi_app(
    snapshot: InventorySnapshotPort,
    samples: SampleSourcePort,
) -> ASGIApp:
    """Create an ASGI app with /items and /timeseries endpoints.

    Both endpoints take group, host, application and item filters as query
    parameters. /timeseries also accepts mode, value_type, add_host, from
    and till.

    Args:
        snapshot: Inventory view implementing InventorySnapshotPort.
        samples: Sample source implementing SampleSourcePort.

    Returns:
        ASGI application callable.
    """

    # @tra: Adapter.ASGI.ItemsEndpoint.Resolve
    def items_body(params: dict[str, list[str]]) -> str:
        return json.dumps(encode_items(_resolve_from_params(params, snapshot)))

    # @tra: Adapter.ASGI.TimeseriesEndpoint.History
    # @tra: Adapter.ASGI.TimeseriesEndpoint.Trends
    def timeseries_body(params: dict[str, list[str]]) -> str:
        config = QueryConfig(
            mode=_parse_mode_param(params),
            value_type=_parse_value_type_param(params),
            add_host_name=_parse_bool_param(params, "add_host"),
        )
        resolved = _resolve_from_params(params, snapshot)
        if not resolved:
            return encode_timeseries_json([])
        itemids = [r.itemid for r in resolved]
        time_from = _parse_time_param(params, "from", 0) or 0
        time_till = _parse_time_param(params, "till", None)
        fetch = samples.trends if config.mode == "trends" else samples.history
        records = fetch(itemids, time_from, time_till)
        series = convert(records, config.add_host_name, config.extractor(), snapshot)
        return encode_timeseries_json(series)

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        # @tra: Adapter.ASGI.NonHTTPScope
        if scope["type"] != "http":
            return

        path = scope["path"]
        params = _parse_query_params(scope)

        if path == "/items":
            await _handle_endpoint(
                send,
                lambda: items_body(params),
                "Error resolving items endpoint",
            )
        elif path == "/timeseries":
            await _handle_endpoint(
                send,
                lambda: timeseries_body(params),
                "Error converting timeseries endpoint",
            )
        else:
            # @tra: Adapter.ASGI.RoutingUnknownPath
            await _send_response(send, 404, "text/plain", "Not Found")

    return app

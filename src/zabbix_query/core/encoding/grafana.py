"""JSON encoders for dashboard consumers."""

import json
import math
from collections.abc import Iterable
from typing import Any

from zabbix_query.core.models import ResolvedItem, Timeseries


def _json_value(value: float) -> float | None:
    # NaN is not valid JSON; dashboards render null as a gap
    return None if math.isnan(value) else value


def encode_timeseries(series: Iterable[Timeseries]) -> list[dict[str, Any]]:
    """Encode timeseries to the dashboard shape.

    Args:
        series: Timeseries objects.

    Returns:
        List of {"label": ..., "datapoints": [[value, timestamp_ms], ...]}
        dicts, value first and milliseconds second.
    """
    return [
        {
            "label": ts.label,
            "datapoints": [
                [_json_value(value), clock] for value, clock in ts.datapoints
            ],
        }
        for ts in series
    ]


def encode_timeseries_json(series: Iterable[Timeseries]) -> str:
    """Encode timeseries to a JSON document."""
    return json.dumps(encode_timeseries(series))


def encode_items(resolved: Iterable[ResolvedItem]) -> list[dict[str, str]]:
    """Encode resolved items with their host names."""
    return [
        {
            "itemid": r.itemid,
            "name": r.name,
            "hostid": r.hostid,
            "host": r.host_name,
        }
        for r in resolved
    ]

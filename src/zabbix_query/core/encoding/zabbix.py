"""Decoders for Zabbix API-shaped records.

The API reports identifiers and numeric fields as strings and nests
membership lists as objects (``{"groupid": "4"}``) or plain ids depending
on the request options. Both forms are accepted.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from zabbix_query.core.models import (
    Application,
    Group,
    HistorySample,
    Host,
    Item,
    TrendSample,
)


def _ids(refs: Iterable[Any] | None, key: str) -> tuple[str, ...]:
    """Normalize a membership list of ids or {key: id} objects to id strings."""
    if not refs:
        return ()
    return tuple(
        str(ref[key]) if isinstance(ref, Mapping) else str(ref) for ref in refs
    )


def decode_group(record: Mapping[str, Any]) -> Group:
    return Group(groupid=str(record["groupid"]), name=record["name"])


def decode_host(record: Mapping[str, Any]) -> Host:
    """Decode a host.get record.

    Hosts prefer the visible "name" and fall back to the technical "host".
    """
    name = record.get("name") or record["host"]
    return Host(
        hostid=str(record["hostid"]),
        name=name,
        groups=_ids(record.get("groups"), "groupid"),
    )


def decode_application(record: Mapping[str, Any]) -> Application:
    return Application(
        applicationid=str(record["applicationid"]),
        name=record["name"],
        itemids=_ids(record.get("items") or record.get("itemids"), "itemid"),
    )


def decode_item(record: Mapping[str, Any]) -> Item:
    return Item(
        itemid=str(record["itemid"]),
        name=record["name"],
        hostid=str(record["hostid"]),
        applications=_ids(record.get("applications"), "applicationid"),
    )


def decode_history(record: Mapping[str, Any]) -> HistorySample:
    return HistorySample(
        itemid=str(record["itemid"]),
        value=record.get("value"),
        clock=int(record["clock"]),
    )


def decode_trend(record: Mapping[str, Any]) -> TrendSample:
    return TrendSample(
        itemid=str(record["itemid"]),
        clock=int(record["clock"]),
        value_min=record.get("value_min"),
        value_max=record.get("value_max"),
        value_avg=record.get("value_avg"),
    )

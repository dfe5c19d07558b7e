"""Convert raw history and trend records into labeled timeseries."""

import logging
import math
import re
from collections.abc import Callable, Iterable
from functools import partial
from typing import Any, TypeVar

from zabbix_query.core.models import HistorySample, Timeseries, TrendSample
from zabbix_query.core.ports import InventorySnapshotPort

logger = logging.getLogger(__name__)

S = TypeVar("S", HistorySample, TrendSample)

Datapoint = tuple[float, int]

_DECIMAL = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_PREFIXED_INT = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def _parse_numeric_string(text: str) -> float | None:
    text = text.strip()
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _PREFIXED_INT.fullmatch(text):
        return float(int(text, 0))
    return None


def to_number(value: Any) -> float:
    """Coerce a raw sample value to float the way JavaScript Number() does.

    Strings accept signed decimals, signed "Infinity" and unsigned
    0x/0o/0b integers; blank strings are 0.0. Anything else, including
    None and Python-only spellings like "inf" or "1_000", becomes NaN so
    one malformed sample does not discard a series.
    """
    # @tra: Converter.ToNumber.NumberCoercion
    if isinstance(value, (int, float)):
        # bool is an int, so True/False coerce to 1.0/0.0
        return float(value)
    if isinstance(value, str):
        number = _parse_numeric_string(value)
        if number is not None:
            return number
    # @tra: Converter.ToNumber.NaNFallback
    logger.debug("Non-numeric sample value %r replaced with NaN", value)
    return math.nan


def history_point(sample: HistorySample) -> Datapoint:
    """Convert a history record to a (value, timestamp_ms) pair."""
    return to_number(sample.value), int(sample.clock) * 1000


def trend_point(sample: TrendSample, value_type: str = "avg") -> Datapoint:
    """Convert a trend record to a (value, timestamp_ms) pair.

    Args:
        sample: Trend record carrying min/max/avg aggregates.
        value_type: Aggregate to use, "min", "max" or "avg". Anything else
            falls back to "avg".
    """
    if value_type == "min":
        value = sample.value_min
    elif value_type == "max":
        value = sample.value_max
    else:
        value = sample.value_avg
    return to_number(value), int(sample.clock) * 1000


def trend_extractor(value_type: str = "avg") -> Callable[[TrendSample], Datapoint]:
    """Return a trend extraction rule bound to an aggregate selector."""
    return partial(trend_point, value_type=value_type)


def _group_by_item(samples: Iterable[S]) -> dict[str, list[S]]:
    # dicts keep first-seen key order
    # @tra: Converter.Property.Grouping
    grouped: dict[str, list[S]] = {}
    for sample in samples:
        grouped.setdefault(str(sample.itemid), []).append(sample)
    return grouped


def _series_label(
    itemid: str, add_host_name: bool, snapshot: InventorySnapshotPort
) -> str:
    item = snapshot.get_item(itemid)
    if item is None:
        logger.warning("Item %s not found in inventory, labeling by id", itemid)
        return itemid
    if not add_host_name:
        return item.name
    host = snapshot.get_host(item.hostid)
    if host is None:
        logger.warning(
            "Host %s of item %s not found in inventory", item.hostid, itemid
        )
        return item.name
    return f"{host.name}: {item.name}"


def convert(
    samples: Iterable[S],
    add_host_name: bool,
    extract: Callable[[S], Datapoint],
    snapshot: InventorySnapshotPort,
) -> list[Timeseries]:
    """Group samples by item and convert each group to a Timeseries.

    Args:
        samples: History or trend records, in any item order.
        add_host_name: Prefix each label with "<host name>: ".
        extract: Rule mapping one record to a (value, timestamp_ms) pair.
        snapshot: Inventory view used to look up item and host names.

    Returns:
        One Timeseries per distinct item id, in first-seen order. Datapoints
        keep the input order of their item's samples.
    """
    return [
        Timeseries(
            label=_series_label(itemid, add_host_name, snapshot),
            datapoints=tuple(extract(sample) for sample in group),
        )
        for itemid, group in _group_by_item(samples).items()
    ]


def convert_history(
    samples: Iterable[HistorySample],
    add_host_name: bool,
    snapshot: InventorySnapshotPort,
) -> list[Timeseries]:
    """Convert history records using the history extraction rule."""
    return convert(samples, add_host_name, history_point, snapshot)


def convert_trends(
    samples: Iterable[TrendSample],
    add_host_name: bool,
    snapshot: InventorySnapshotPort,
    value_type: str = "avg",
) -> list[Timeseries]:
    """Convert trend records, plotting the selected aggregate."""
    return convert(samples, add_host_name, trend_extractor(value_type), snapshot)

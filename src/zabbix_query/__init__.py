"""Resolve Zabbix-style inventory filters and convert samples to timeseries."""

from zabbix_query.adapters.storage.in_memory import (
    InMemoryInventorySnapshot,
    InMemorySampleSource,
)
from zabbix_query.core.config import QueryConfig
from zabbix_query.core.converter import (
    convert,
    convert_history,
    convert_trends,
    history_point,
    trend_extractor,
    trend_point,
)
from zabbix_query.core.errors import InvalidFilterSyntax
from zabbix_query.core.filters import (
    FilterExpr,
    LiteralFilter,
    PatternFilter,
    compile_pattern,
    is_pattern,
    parse_filter,
)
from zabbix_query.core.models import (
    Application,
    Group,
    HistorySample,
    Host,
    Item,
    ResolvedItem,
    Timeseries,
    TrendSample,
)
from zabbix_query.core.ports import InventorySnapshotPort, SampleSourcePort
from zabbix_query.core.resolver import resolve

__all__ = [
    "Application",
    "FilterExpr",
    "Group",
    "HistorySample",
    "Host",
    "InMemoryInventorySnapshot",
    "InMemorySampleSource",
    "InvalidFilterSyntax",
    "InventorySnapshotPort",
    "Item",
    "LiteralFilter",
    "PatternFilter",
    "QueryConfig",
    "ResolvedItem",
    "SampleSourcePort",
    "Timeseries",
    "TrendSample",
    "compile_pattern",
    "convert",
    "convert_history",
    "convert_trends",
    "history_point",
    "is_pattern",
    "parse_filter",
    "resolve",
    "trend_extractor",
    "trend_point",
]

"""Query configuration consumed by adapters."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from zabbix_query.core.converter import history_point, trend_extractor

VALID_MODES = ("history", "trends")
VALUE_TYPES = ("min", "max", "avg")


@dataclass(frozen=True)
class QueryConfig:
    """How samples for resolved items should be fetched and converted.

    Attributes:
        mode: "history" for raw records, "trends" for hourly aggregates.
        value_type: Trend aggregate to plot ("min", "max" or "avg").
        add_host_name: Prefix series labels with the host name.
    """

    mode: str = "history"
    value_type: str = "avg"
    add_host_name: bool = False

    def __post_init__(self) -> None:
        if self.mode not in VALID_MODES:
            raise ValueError(
                f"mode must be one of {', '.join(VALID_MODES)}, got {self.mode!r}"
            )
        if self.value_type not in VALUE_TYPES:
            raise ValueError(
                f"value_type must be one of {', '.join(VALUE_TYPES)}, "
                f"got {self.value_type!r}"
            )

    def extractor(self) -> Callable[[Any], tuple[float, int]]:
        """Return the datapoint extraction rule for this configuration."""
        if self.mode == "trends":
            return trend_extractor(self.value_type)
        return history_point

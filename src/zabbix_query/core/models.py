"""Core domain models for inventory and sample data."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Group:
    """A host group.

    Attributes:
        groupid: Group identifier.
        name: Group name (e.g., "Linux servers").
    """

    groupid: str
    name: str


@dataclass(frozen=True)
class Host:
    """A monitored host.

    Attributes:
        hostid: Host identifier.
        name: Visible host name.
        groups: Identifiers of the groups the host belongs to.
    """

    hostid: str
    name: str
    groups: tuple[str, ...] = ()


@dataclass(frozen=True)
class Application:
    """A named set of items on a host.

    Attributes:
        applicationid: Application identifier.
        name: Application name (e.g., "CPU").
        itemids: Identifiers of the items grouped by this application.
    """

    applicationid: str
    name: str
    itemids: tuple[str, ...] = ()


@dataclass(frozen=True)
class Item:
    """A monitored item.

    Attributes:
        itemid: Item identifier.
        name: Item name (e.g., "CPU idle time").
        hostid: Identifier of the owning host.
        applications: Identifiers of the applications the item belongs to.
    """

    itemid: str
    name: str
    hostid: str
    applications: tuple[str, ...] = ()


@dataclass(frozen=True)
class HistorySample:
    """A raw history record.

    Attributes:
        itemid: Identifier of the item the value was collected for.
        value: The value as reported by the backend, usually a string.
        clock: Unix timestamp in seconds.
    """

    itemid: str
    value: str | float | int | None
    clock: int


@dataclass(frozen=True)
class TrendSample:
    """A pre-aggregated trend record (one hour of history)."""

    itemid: str
    clock: int
    value_min: str | float | int | None = None
    value_max: str | float | int | None = None
    value_avg: str | float | int | None = None


@dataclass(frozen=True)
class ResolvedItem:
    """An item selected by a filter, paired with its host name.

    Attributes:
        item: The snapshot item, untouched.
        host_name: Name of the host the item was resolved through.
    """

    item: Item
    host_name: str

    @property
    def itemid(self) -> str:
        return str(self.item.itemid)

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def hostid(self) -> str:
        return str(self.item.hostid)


@dataclass(frozen=True)
class Timeseries:
    """A labeled series of datapoints.

    Attributes:
        label: Human-readable series name (item name, optionally host-prefixed).
        datapoints: (value, timestamp in milliseconds) pairs in input order.
    """

    label: str
    datapoints: tuple[tuple[float, int], ...] = field(default_factory=tuple)

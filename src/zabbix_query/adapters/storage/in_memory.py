"""In-memory adapters for inventory snapshots and samples."""

from collections.abc import Iterable, Mapping
from typing import Any

from zabbix_query.core.encoding.zabbix import (
    decode_application,
    decode_group,
    decode_host,
    decode_item,
)
from zabbix_query.core.models import (
    Application,
    Group,
    HistorySample,
    Host,
    Item,
    TrendSample,
)


class InMemoryInventorySnapshot:
    """In-memory implementation of InventorySnapshotPort.

    Holds immutable tuples of entities, indexed by identifier. A refreshing
    cache swaps in a new snapshot instead of mutating this one, so a single
    instance can be shared across concurrent resolutions.
    """

    def __init__(
        self,
        groups: Iterable[Group] = (),
        hosts: Iterable[Host] = (),
        applications: Iterable[Application] = (),
        items: Iterable[Item] = (),
    ) -> None:
        self._groups = tuple(groups)
        self._hosts = tuple(hosts)
        self._applications = tuple(applications)
        self._items = tuple(items)
        self._hosts_by_id = {str(h.hostid): h for h in self._hosts}
        self._items_by_id = {str(i.itemid): i for i in self._items}

    @classmethod
    def from_api(
        cls,
        groups: Iterable[Mapping[str, Any]] = (),
        hosts: Iterable[Mapping[str, Any]] = (),
        applications: Iterable[Mapping[str, Any]] = (),
        items: Iterable[Mapping[str, Any]] = (),
    ) -> "InMemoryInventorySnapshot":
        """Build a snapshot from Zabbix API-shaped records."""
        return cls(
            groups=[decode_group(g) for g in groups],
            hosts=[decode_host(h) for h in hosts],
            applications=[decode_application(a) for a in applications],
            items=[decode_item(i) for i in items],
        )

    def list_groups(self) -> tuple[Group, ...]:
        return self._groups

    def list_hosts(self) -> tuple[Host, ...]:
        return self._hosts

    def list_applications(self) -> tuple[Application, ...]:
        return self._applications

    def list_items(self) -> tuple[Item, ...]:
        return self._items

    def get_item(self, itemid: str) -> Item | None:
        return self._items_by_id.get(str(itemid))

    def get_host(self, hostid: str) -> Host | None:
        return self._hosts_by_id.get(str(hostid))


class InMemorySampleSource:
    """In-memory implementation of SampleSourcePort.

    Stores history and trend records in lists. Suitable for testing and
    for serving samples that were fetched elsewhere.
    """

    def __init__(
        self,
        history: Iterable[HistorySample] = (),
        trends: Iterable[TrendSample] = (),
    ) -> None:
        self._history = list(history)
        self._trends = list(trends)

    def history(
        self,
        itemids: Iterable[str],
        time_from: int,
        time_till: int | None = None,
    ) -> list[HistorySample]:
        """Return history records for the items within [time_from, time_till]."""
        return _select(self._history, itemids, time_from, time_till)

    def trends(
        self,
        itemids: Iterable[str],
        time_from: int,
        time_till: int | None = None,
    ) -> list[TrendSample]:
        """Return trend records for the items within [time_from, time_till]."""
        return _select(self._trends, itemids, time_from, time_till)


def _select(
    samples: list[Any],
    itemids: Iterable[str],
    time_from: int,
    time_till: int | None,
) -> list[Any]:
    wanted = {str(i) for i in itemids}
    selected = [
        s
        for s in samples
        if str(s.itemid) in wanted
        and s.clock >= time_from
        and (time_till is None or s.clock <= time_till)
    ]
    return sorted(selected, key=lambda s: s.clock)

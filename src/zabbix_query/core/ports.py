"""Port interfaces for inventory and sample adapters.

These protocols define the contracts that adapters must implement.
The core depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from zabbix_query.core.models import (
    Application,
    Group,
    HistorySample,
    Host,
    Item,
    TrendSample,
)


@runtime_checkable
class InventorySnapshotPort(Protocol):
    """Port for a point-in-time, read-only inventory view.

    Identifiers must stay consistent across all calls made during one
    resolve or convert invocation.
    Examples: InMemoryInventorySnapshot.
    """

    def list_groups(self) -> Sequence[Group]:
        """Return all host groups."""
        ...

    def list_hosts(self) -> Sequence[Host]:
        """Return all hosts."""
        ...

    def list_applications(self) -> Sequence[Application]:
        """Return all applications."""
        ...

    def list_items(self) -> Sequence[Item]:
        """Return all items."""
        ...

    def get_item(self, itemid: str) -> Item | None:
        """Return the item with the given identifier, or None."""
        ...

    def get_host(self, hostid: str) -> Host | None:
        """Return the host with the given identifier, or None."""
        ...


@runtime_checkable
class SampleSourcePort(Protocol):
    """Port for raw sample retrieval.

    Examples: InMemorySampleSource.
    """

    def history(
        self,
        itemids: Iterable[str],
        time_from: int,
        time_till: int | None = None,
    ) -> Iterable[HistorySample]:
        """Return history records for the items within [time_from, time_till].

        Args:
            itemids: Item identifiers to fetch.
            time_from: Unix timestamp in seconds, inclusive.
            time_till: Unix timestamp in seconds, inclusive. None means now.

        Returns:
            Iterable of HistorySample objects ordered by clock ascending.
        """
        ...

    def trends(
        self,
        itemids: Iterable[str],
        time_from: int,
        time_till: int | None = None,
    ) -> Iterable[TrendSample]:
        """Return trend records for the items within [time_from, time_till]."""
        ...

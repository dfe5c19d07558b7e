"""Storage adapters implementing core ports."""

from zabbix_query.adapters.storage.in_memory import (
    InMemoryInventorySnapshot,
    InMemorySampleSource,
)

__all__ = [
    "InMemoryInventorySnapshot",
    "InMemorySampleSource",
]

"""Shared test fixtures for all test modules."""

import pytest

from zabbix_query.adapters.storage.in_memory import (
    InMemoryInventorySnapshot,
    InMemorySampleSource,
)
from zabbix_query.core.models import (
    Application,
    Group,
    HistorySample,
    Host,
    Item,
    TrendSample,
)

try:
    import httpx
except ImportError:
    httpx = None


# === Inventory Fixtures ===


@pytest.fixture
def inventory() -> InMemoryInventorySnapshot:
    """Small inventory: two web hosts in Servers, one outside it, a DB host.

    Layout:
        Servers:        web1, web2, backup
        Databases:      db-main
        Web frontends:  web1, web3
    """
    return InMemoryInventorySnapshot(
        groups=[
            Group(groupid="1", name="Servers"),
            Group(groupid="2", name="Databases"),
            Group(groupid="3", name="Web frontends"),
        ],
        hosts=[
            Host(hostid="10", name="web1", groups=("1", "3")),
            Host(hostid="11", name="web2", groups=("1",)),
            Host(hostid="12", name="web3", groups=("3",)),
            Host(hostid="13", name="db-main", groups=("2",)),
            Host(hostid="14", name="backup", groups=("1",)),
        ],
        applications=[
            Application(applicationid="100", name="CPU", itemids=("1000", "1001")),
            Application(applicationid="101", name="CPU", itemids=("1010",)),
            Application(applicationid="102", name="Memory", itemids=("1002",)),
            Application(applicationid="103", name="CPU", itemids=("1020",)),
        ],
        items=[
            Item(itemid="1000", name="CPU idle time", hostid="10", applications=("100",)),
            Item(itemid="1001", name="cpu load", hostid="10", applications=("100",)),
            Item(itemid="1002", name="Free memory", hostid="10", applications=("102",)),
            Item(itemid="1010", name="cpu load", hostid="11", applications=("101",)),
            Item(itemid="1011", name="Free memory", hostid="11"),
            Item(itemid="1020", name="cpu load", hostid="12", applications=("103",)),
            Item(itemid="1030", name="cpu load", hostid="13"),
            Item(itemid="1040", name="Disk free", hostid="14"),
        ],
    )


@pytest.fixture
def sample_source() -> InMemorySampleSource:
    """Sample source with history and trends for the web1/web2 cpu load items."""
    return InMemorySampleSource(
        history=[
            HistorySample(itemid="1001", value="0.5", clock=1000),
            HistorySample(itemid="1010", value="1.25", clock=1000),
            HistorySample(itemid="1001", value="0.75", clock=1060),
            HistorySample(itemid="1010", value="n/a", clock=1060),
            HistorySample(itemid="1001", value="0.9", clock=5000),
        ],
        trends=[
            TrendSample(
                itemid="1001", clock=3600, value_min="0.1", value_max="0.9", value_avg="0.4"
            ),
            TrendSample(
                itemid="1010", clock=3600, value_min="1", value_max="3", value_avg="2"
            ),
        ],
    )


# === ASGI Test Fixtures ===


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            app = create_asgi_app(inventory, sample_source)
            async with asgi_test_client(app) as client:
                response = await client.get("/items")
    """
    if httpx is None:
        pytest.skip("httpx not installed")

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client


@pytest.fixture
def asgi_client(inventory, sample_source, asgi_test_client):
    """Fixture returning a client context manager for the query app."""
    from zabbix_query.adapters.frameworks.asgi import create_asgi_app

    return asgi_test_client(create_asgi_app(inventory, sample_source))

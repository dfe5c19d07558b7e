"""Resolve group/host/application/item filters to concrete items.

Resolution walks the inventory top-down, narrowing the candidate set at
each level. Literal filters that match nothing end resolution with an
empty result; they are never an error.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from zabbix_query.core.filters import (
    FilterExpr,
    LiteralFilter,
    PatternFilter,
    parse_filter,
)
from zabbix_query.core.models import Application, Group, Host, Item, ResolvedItem
from zabbix_query.core.ports import InventorySnapshotPort

logger = logging.getLogger(__name__)

_Named = TypeVar("_Named", Group, Host, Application, Item)


def _find_by_name(entities: Iterable[_Named], name: str) -> _Named | None:
    """Return the first entity with exactly the given name."""
    for entity in entities:
        if entity.name == name:
            return entity
    return None


def _select_groups(
    group_filter: FilterExpr, snapshot: InventorySnapshotPort
) -> list[Group]:
    if isinstance(group_filter, PatternFilter):
        return [g for g in snapshot.list_groups() if group_filter.matches(g.name)]
    group = _find_by_name(snapshot.list_groups(), group_filter.value)
    return [group] if group is not None else []


def _resolve_hosts(
    group_filter: FilterExpr,
    host_filter: FilterExpr,
    snapshot: InventorySnapshotPort,
) -> list[Host]:
    """Return the hosts selected by the group and host filters.

    A literal host filter is looked up by name across all hosts and the
    group filter is not consulted.
    """
    if isinstance(host_filter, LiteralFilter):
        host = _find_by_name(snapshot.list_hosts(), host_filter.value)
        return [host] if host is not None else []

    groups = _select_groups(group_filter, snapshot)
    if not groups:
        return []
    groupids = {str(g.groupid) for g in groups}
    return [
        h
        for h in snapshot.list_hosts()
        if groupids.intersection(map(str, h.groups)) and host_filter.matches(h.name)
    ]


def _select_applications(
    app_filter: FilterExpr, snapshot: InventorySnapshotPort
) -> list[Application] | None:
    """Return the selected applications, or None if applications are not filtered.

    A literal filter selects every application carrying that name, since the
    same application name is defined separately on each host.
    """
    if isinstance(app_filter, PatternFilter):
        return [a for a in snapshot.list_applications() if app_filter.matches(a.name)]
    if app_filter.is_empty:
        return None
    return [a for a in snapshot.list_applications() if a.name == app_filter.value]


def _narrow_items(
    items: Sequence[Item],
    app_filter: FilterExpr,
    item_filter: FilterExpr,
    snapshot: InventorySnapshotPort,
) -> list[Item]:
    if isinstance(item_filter, LiteralFilter):
        return [i for i in items if i.name == item_filter.value]

    apps = _select_applications(app_filter, snapshot)
    if apps is not None:
        if not apps and isinstance(app_filter, LiteralFilter):
            return []
        appids = {str(a.applicationid) for a in apps}
        items = [i for i in items if appids.intersection(map(str, i.applications))]
    return [i for i in items if item_filter.matches(i.name)]


def resolve(
    group_filter: str | FilterExpr | None,
    host_filter: str | FilterExpr | None,
    app_filter: str | FilterExpr | None,
    item_filter: str | FilterExpr | None,
    snapshot: InventorySnapshotPort,
) -> list[ResolvedItem]:
    """Resolve filters against an inventory snapshot.

    Each filter is either a literal name or a /pattern/flags expression.
    An empty application filter disables application narrowing.

    Args:
        group_filter: Host group filter, used only with a host pattern.
        host_filter: Host filter.
        app_filter: Application filter, used only with an item pattern.
        item_filter: Item filter.
        snapshot: Read-only inventory view.

    Returns:
        Matching items paired with their host names, in snapshot order.
        Empty if any literal filter matches nothing.

    Raises:
        InvalidFilterSyntax: If any pattern filter does not compile.
    """
    group_expr = parse_filter(group_filter)
    host_expr = parse_filter(host_filter)
    app_expr = parse_filter(app_filter)
    item_expr = parse_filter(item_filter)

    hosts = _resolve_hosts(group_expr, host_expr, snapshot)
    if not hosts:
        return []
    hosts_by_id = {str(h.hostid): h for h in hosts}

    # @tra: Resolver.ItemStage.OrphanedItems
    items: list[Item] = []
    orphaned: list[str] = []
    for item in snapshot.list_items():
        hostid = str(item.hostid)
        if hostid in hosts_by_id:
            items.append(item)
        elif snapshot.get_host(hostid) is None:
            orphaned.append(str(item.itemid))
    if orphaned:
        logger.warning(
            "Skipping %d item(s) whose host is missing from the inventory: %s",
            len(orphaned),
            ", ".join(orphaned),
        )

    items = _narrow_items(items, app_expr, item_expr, snapshot)
    return [
        ResolvedItem(item=item, host_name=hosts_by_id[str(item.hostid)].name)
        for item in items
    ]

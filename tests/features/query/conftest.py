"""Step definitions for query BDD scenarios."""

import math
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from zabbix_query.adapters.storage.in_memory import InMemoryInventorySnapshot
from zabbix_query.core.converter import convert, history_point, trend_extractor
from zabbix_query.core.errors import InvalidFilterSyntax
from zabbix_query.core.models import HistorySample, ResolvedItem, Timeseries, TrendSample
from zabbix_query.core.resolver import resolve

FILTERS = (
    r'group "(?P<group>[^"]*)", host "(?P<host>[^"]*)", '
    r'application "(?P<application>[^"]*)", item "(?P<item>[^"]*)"'
)


@dataclass
class QueryScenarioContext:
    """Shared state between steps in a query scenario."""

    snapshot: InMemoryInventorySnapshot | None = None
    resolved: list[ResolvedItem] = field(default_factory=list)
    error: InvalidFilterSyntax | None = None
    samples: list[HistorySample | TrendSample] = field(default_factory=list)
    series: list[Timeseries] = field(default_factory=list)


@pytest.fixture
def context() -> QueryScenarioContext:
    return QueryScenarioContext()


def _parse_datapoints(text: str) -> list[tuple[float, int]]:
    points = []
    for part in text.split(","):
        value, clock = part.strip().split("@")
        points.append((float(value), int(clock)))
    return points


# === Given ===


@given("the standard inventory")
def given_inventory(context: QueryScenarioContext, inventory) -> None:
    context.snapshot = inventory


@given(
    parsers.parse(
        'a history sample for item "{itemid}" with value "{value}" at clock {clock:d}'
    )
)
def given_history_sample(
    context: QueryScenarioContext, itemid: str, value: str, clock: int
) -> None:
    context.samples.append(HistorySample(itemid=itemid, value=value, clock=clock))


@given(
    parsers.parse(
        'a trend sample for item "{itemid}" with min {vmin:d}, max {vmax:d} '
        "and avg {vavg:d} at clock {clock:d}"
    )
)
def given_trend_sample(
    context: QueryScenarioContext,
    itemid: str,
    vmin: int,
    vmax: int,
    vavg: int,
    clock: int,
) -> None:
    context.samples.append(
        TrendSample(
            itemid=itemid, clock=clock, value_min=vmin, value_max=vmax, value_avg=vavg
        )
    )


# === When ===


@when(parsers.re(f"I resolve {FILTERS}"))
def when_resolve(
    context: QueryScenarioContext, group: str, host: str, application: str, item: str
) -> None:
    context.resolved = resolve(group, host, application, item, context.snapshot)


@when(parsers.re(f"I try to resolve {FILTERS}"))
def when_try_resolve(
    context: QueryScenarioContext, group: str, host: str, application: str, item: str
) -> None:
    try:
        context.resolved = resolve(group, host, application, item, context.snapshot)
    except InvalidFilterSyntax as e:
        context.error = e


@when("I convert the samples as history")
def when_convert_history(context: QueryScenarioContext) -> None:
    context.series = convert(context.samples, False, history_point, context.snapshot)


@when("I convert the samples as history with host names")
def when_convert_history_with_hosts(context: QueryScenarioContext) -> None:
    context.series = convert(context.samples, True, history_point, context.snapshot)


@when(parsers.parse('I convert the samples as trends using "{value_type}"'))
def when_convert_trends(context: QueryScenarioContext, value_type: str) -> None:
    context.series = convert(
        context.samples, False, trend_extractor(value_type), context.snapshot
    )


# === Then ===


@then(parsers.parse('the resolved items are "{expected}"'))
def then_resolved_items(context: QueryScenarioContext, expected: str) -> None:
    actual = [f"{r.name}@{r.host_name}" for r in context.resolved]
    assert actual == [part.strip() for part in expected.split(",")]


@then("no items are resolved")
def then_no_items(context: QueryScenarioContext) -> None:
    assert context.resolved == []


@then(parsers.parse('the filter "{filter_text}" is reported as invalid'))
def then_invalid_filter(context: QueryScenarioContext, filter_text: str) -> None:
    assert context.error is not None
    assert context.error.filter_text == filter_text


@then(parsers.re(r"there (?:is|are) (?P<count>\d+) series"), converters={"count": int})
def then_series_count(context: QueryScenarioContext, count: int) -> None:
    assert len(context.series) == count


@then(parsers.parse('the series "{label}" has datapoints "{expected}"'))
def then_series_datapoints(
    context: QueryScenarioContext, label: str, expected: str
) -> None:
    (series,) = [s for s in context.series if s.label == label]
    expected_points = _parse_datapoints(expected)
    assert len(series.datapoints) == len(expected_points)
    for (value, clock), (want_value, want_clock) in zip(
        series.datapoints, expected_points
    ):
        assert clock == want_clock
        if math.isnan(want_value):
            assert math.isnan(value)
        else:
            assert value == want_value

"""BDD step definitions for conversion features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from kubeopenmetrics import (
    FixedClock,
    events_to_openmetrics,
    namespace_stats_to_openmetrics,
)


@dataclass
class ConversionScenarioContext:
    """Shared state between steps in a conversion scenario."""

    raw: str = ""
    clock: FixedClock | None = None
    output: str | None = None
    errors: list[Exception] = field(default_factory=list)

    def report(self, error: Exception) -> None:
        self.errors.append(error)


@pytest.fixture
def ctx() -> ConversionScenarioContext:
    """Fresh scenario context for each test."""
    return ConversionScenarioContext()


@given(parsers.parse("the resource list '{raw}'"))
def step_resource_list(ctx: ConversionScenarioContext, raw: str) -> None:
    ctx.raw = raw


@given(parsers.parse("the clock reads {now:d}"))
def step_clock(ctx: ConversionScenarioContext, now: int) -> None:
    ctx.clock = FixedClock(now)


@when(parsers.parse('it is converted with namespace stats for "{namespace}"'))
def step_convert_namespace_stats(
    ctx: ConversionScenarioContext, namespace: str
) -> None:
    ctx.output = namespace_stats_to_openmetrics(
        namespace, ctx.raw, reporter=ctx.report
    )


@when("it is converted as events")
def step_convert_events(ctx: ConversionScenarioContext) -> None:
    ctx.output = events_to_openmetrics(ctx.raw, clock=ctx.clock, reporter=ctx.report)


@then(parsers.parse("the output contains the line '{line}'"))
def step_output_contains_line(ctx: ConversionScenarioContext, line: str) -> None:
    assert ctx.output is not None
    assert line in ctx.output.splitlines()


@then(parsers.parse("the output has {n:d} HELP lines"))
def step_help_line_count(ctx: ConversionScenarioContext, n: int) -> None:
    assert ctx.output is not None
    assert sum(1 for line in ctx.output.splitlines() if line.startswith("# HELP ")) == n


@then("the output is empty")
def step_output_empty(ctx: ConversionScenarioContext) -> None:
    assert ctx.output == ""


@then(parsers.parse("{n:d} decode error is reported"))
def step_decode_errors(ctx: ConversionScenarioContext, n: int) -> None:
    assert len(ctx.errors) == n

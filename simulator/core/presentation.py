"""Summary figures, chart series and yen formatting for the frontend."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Sequence, Tuple

from simulator.schemas.presentation import ChartSeries, ResultSummary
from simulator.schemas.simulation import SimulationResult, YearlyResult

OKU = 100_000_000
MAN = 10_000

# enough digits for any finite float
_WIDE = Context(prec=400)


def _round_half_up(value: float) -> float:
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def _fixed(value: float, places: int) -> str:
    """Fixed-point text with halves rounded away from zero, like JS toFixed."""
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP, context=_WIDE))


def format_yen_value(value: float) -> str:
    """Format an amount the way the dashboard labels it (億円 / 万円 / 円)."""
    if not math.isfinite(value):
        return "-"
    if value >= OKU:
        return f"{_fixed(value / OKU, 1)}億円"
    if value >= MAN:
        return f"{_fixed(value / MAN, 0)}万円"
    return f"{value:,.3f}".rstrip("0").rstrip(".") + "円"


def format_percent(value: float, decimal_places: int = 1) -> str:
    return f"{value:.{decimal_places}f}%"


def format_years(value: int) -> str:
    return f"{value}年"


def summarize(result: SimulationResult) -> ResultSummary:
    gain = result.final_value - result.total_contribution
    return ResultSummary(
        total_contribution=result.total_contribution,
        final_value=result.final_value,
        gain=gain,
        display={
            "total_contribution": format_yen_value(result.total_contribution),
            "final_value": format_yen_value(_round_half_up(result.final_value)),
            "gain": format_yen_value(_round_half_up(gain)),
        },
    )


def y_axis_domain(trajectory: Sequence[YearlyResult]) -> Tuple[float, float]:
    """
    Upper bound for the chart's value axis.

    The peak across all three series is rounded up to the next multiple of its
    leading power of ten (e.g. 3,213,709 -> 4,000,000). Overflowed values are
    left off the axis; nothing positive to plot gives (0, 0).
    """
    peak = max(
        (
            value
            for row in trajectory
            for value in (row.total_value, row.cumulative_contribution, row.gain)
            if math.isfinite(value)
        ),
        default=0.0,
    )
    if peak <= 0:
        return (0.0, 0.0)
    step = 10.0 ** math.floor(math.log10(peak))
    return (0.0, math.ceil(peak / step) * step)


def to_series(result: SimulationResult) -> ChartSeries:
    trajectory = result.trajectory
    return ChartSeries(
        period=[row.period for row in trajectory],
        cumulative_contribution=[row.cumulative_contribution for row in trajectory],
        total_value=[row.total_value for row in trajectory],
        gain=[row.gain for row in trajectory],
        y_domain=y_axis_domain(trajectory),
    )


__all__ = [
    "format_percent",
    "format_yen_value",
    "format_years",
    "summarize",
    "to_series",
    "y_axis_domain",
]

"""Shapes the frontend renders from a simulation result."""

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict


class ResultSummary(BaseModel):
    """Headline figures: invested, final value and gain."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_contribution: float
    final_value: float
    gain: float
    # same figures rounded and formatted for display, keyed like the numbers above
    display: Dict[str, str]


class ChartSeries(BaseModel):
    """Parallel series keyed by period, in trajectory order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    period: List[int]
    cumulative_contribution: List[float]
    total_value: List[float]
    gain: List[float]
    y_domain: Tuple[float, float]

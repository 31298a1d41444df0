"""Compound growth projection for a lump sum plus monthly contributions."""

from simulator.schemas.simulation import (
    InvestmentParams,
    SimulationResult,
    YearlyResult,
)

# monthly contributions folded into each yearly period
CONTRIBUTIONS_PER_PERIOD = 12


def project(params: InvestmentParams) -> SimulationResult:
    """
    Build the year-by-year trajectory for a constant-rate savings plan.

    Order of operations (per period):
      1) Add the period's contributions (monthly amount * 12).
      2) Apply growth to the whole new balance.
      3) Record cumulative contribution, total value and gain.
    """
    total_value = params.initial_investment
    cumulative_contribution = params.initial_investment

    if params.periods <= 0:
        return SimulationResult(
            total_contribution=params.initial_investment,
            final_value=params.initial_investment,
            trajectory=(),
        )

    trajectory: list[YearlyResult] = []
    for period in range(1, params.periods + 1):
        period_contribution = params.periodic_contribution * CONTRIBUTIONS_PER_PERIOD
        cumulative_contribution += period_contribution
        total_value = (total_value + period_contribution) * (1 + params.annual_rate)

        trajectory.append(
            YearlyResult(
                period=period,
                cumulative_contribution=cumulative_contribution,
                total_value=total_value,
                gain=total_value - cumulative_contribution,
            )
        )

    return SimulationResult(
        total_contribution=(
            params.initial_investment
            + params.periodic_contribution * CONTRIBUTIONS_PER_PERIOD * params.periods
        ),
        final_value=total_value,
        trajectory=tuple(trajectory),
    )


__all__ = ["CONTRIBUTIONS_PER_PERIOD", "project"]

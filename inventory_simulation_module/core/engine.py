import logging
from typing import Tuple

from .params import SimulationParameters
from .random_source import RandomSource
from .state import InventoryState, PeriodResult

logger = logging.getLogger(__name__)


def _round_clamp(value: float) -> int:
    # Round to nearest, then floor at zero: a negative draw means "none", not an error.
    return max(0, int(round(value)))


def step_detailed(state: InventoryState, params: SimulationParameters, rng: RandomSource, period: int = 0) -> PeriodResult:
    """
    Simulates one period and mutates state in place.

    Args:
        state (InventoryState): Current warehouse state, updated in place.
        params (SimulationParameters): Scenario parameters.
        rng (RandomSource): Source of the three draws made this period.
        period (int): Index of the period inside its cycle, used for the trace only.

    Returns:
        PeriodResult: Full trace of the period.
    """
    # 1. Market price
    state.price = rng.sample_normal(params.mean_price, params.sigma_price)

    # 2. Demand
    state.sales_demand = _round_clamp(rng.sample_normal(params.mean_sales, params.sigma_sales))

    # 3. Production
    noise = rng.sample_uniform(-params.factor, params.factor)
    state.production = _round_clamp(params.power + noise)

    storage_start = state.storage

    # 4. Capacity admission
    rejection_cost = 0.0
    if state.storage + state.production <= params.max_storage:
        admitted = state.production
        rejected = 0
        state.storage += admitted
    else:
        admitted = params.max_storage - state.storage
        rejected = state.production - admitted
        state.storage = params.max_storage
        # Product that never reaches the warehouse is lost for good.
        rejection_cost = rejected * params.shortage_cost_per_unit

    # 5. Fulfill demand
    fulfilled = min(state.storage, state.sales_demand)
    revenue = fulfilled * state.price
    state.storage -= fulfilled

    # 6. Imbalance accounting, on storage left after sales
    delta = state.storage - state.sales_demand
    if delta > 0:
        imbalance_cost = delta * params.storage_cost_per_unit  # Holding
    elif delta < 0:
        imbalance_cost = abs(delta) * state.price  # Missed sale
    else:
        imbalance_cost = 0.0

    result = PeriodResult(
        period=period,
        price=state.price,
        demand=state.sales_demand,
        production=state.production,
        admitted=admitted,
        rejected=rejected,
        storage_start=storage_start,
        fulfilled=fulfilled,
        storage_end=state.storage,
        delta=delta,
        revenue=revenue,
        rejection_cost=rejection_cost,
        imbalance_cost=imbalance_cost,
        loss=rejection_cost + imbalance_cost,
    )
    logger.debug(
        "period=%d storage=%d->%d production=%d rejected=%d price=%.2f demand=%d delta=%d loss=%.2f",
        period, storage_start, state.storage, state.production, rejected, state.price,
        state.sales_demand, delta, result.loss,
    )
    return result


def step(state: InventoryState, params: SimulationParameters, rng: RandomSource) -> Tuple[int, float, float]:
    result = step_detailed(state, params, rng)
    return result.delta, result.revenue, result.loss

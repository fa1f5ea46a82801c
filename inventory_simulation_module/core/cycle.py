import logging
from typing import Optional

from .engine import step_detailed
from .params import SimulationParameters
from .random_source import RandomSource
from .state import CycleOutput, InventoryState

logger = logging.getLogger(__name__)


def run_cycle(params: SimulationParameters, rng: RandomSource, state: Optional[InventoryState] = None) -> CycleOutput:
    """
    Runs one independent cycle of params.period_len periods.

    The state is reset to params.start_storage first, and whatever it holds
    at the end is discarded by the caller: cycles never continue each other.
    """
    if state is None:
        state = InventoryState()
    state.reset(params.start_storage)

    out = CycleOutput()
    for period in range(params.period_len):
        out.record(step_detailed(state, params, rng, period=period))

    out.compute_mean()
    logger.debug(
        "cycle done: revenue=%.2f loss=%.2f mean=%.3f final_storage=%d",
        out.revenue, out.general_loss, out.mean, state.storage,
    )
    return out

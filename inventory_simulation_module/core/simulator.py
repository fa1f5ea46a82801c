import logging
import math
import numbers
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import pandas as pd
from tqdm import tqdm

from .cycle import run_cycle
from .exceptions import ComputationDegenerate, InvalidParameter
from .params import SimulationParameters
from .random_source import NumpyRandomSource, RandomSource

logger = logging.getLogger(__name__)


@dataclass
class CycleRecord:
    cycle_index: int
    revenue: float
    general_loss: float
    profit: float
    mean: float
    deltas: List[int] = field(default_factory=list)


@dataclass
class RunSummary:
    n_cycles: int = 0
    total_revenue: float = 0.0
    total_loss: float = 0.0
    total_mean: float = 0.0
    super_mean_revenue: float = 0.0
    super_mean_loss: float = 0.0
    super_mean_delta: float = 0.0
    super_mean_profit: float = 0.0

    def add(self, record: CycleRecord):
        self.n_cycles += 1
        self.total_revenue += record.revenue
        self.total_loss += record.general_loss
        self.total_mean += record.mean

    def finalize(self) -> 'RunSummary':
        if self.n_cycles == 0:
            raise ComputationDegenerate("cannot compute super-means over zero cycles")
        self.super_mean_revenue = self.total_revenue / self.n_cycles
        self.super_mean_loss = self.total_loss / self.n_cycles
        self.super_mean_delta = self.total_mean / self.n_cycles
        self.super_mean_profit = self.super_mean_revenue - self.super_mean_loss
        return self


@dataclass
class RunResult:
    records: List[CycleRecord]
    summary: RunSummary

    def to_frame(self) -> pd.DataFrame:
        columns = ['cycle_index', 'revenue', 'general_loss', 'profit', 'mean']
        return pd.DataFrame([{c: getattr(r, c) for c in columns} for r in self.records], columns=columns)


class Simulator:
    """
    Drives repeated independent cycles and aggregates them into a RunSummary.

    With a NumpyRandomSource every cycle draws from its own spawned stream, so
    a given seed yields the same records whether cycles run sequentially or
    on several workers. Any other source is consumed as one shared stream.
    """
    def __init__(self, params: SimulationParameters, rng: Optional[RandomSource] = None, seed=None):
        self.params = params
        self.rng = rng if rng is not None else NumpyRandomSource(seed)

    def _simulate(self, index: int, rng: RandomSource) -> CycleRecord:
        out = run_cycle(self.params, rng)
        return CycleRecord(
            cycle_index=index,
            revenue=out.revenue,
            general_loss=out.general_loss,
            profit=out.revenue - out.general_loss,
            mean=out.mean,
            deltas=list(out.deltas),
        )

    def run(self, n_cycles: int, progress: bool = False, workers: int = 1,
            on_record: Optional[Callable[[CycleRecord], None]] = None) -> RunResult:
        """
        Args:
            n_cycles (int): Number of independent cycles, must be > 0.
            progress (bool): Show a progress bar over cycles.
            workers (int): Cycles simulated concurrently.
            on_record (callable, optional): Called with each CycleRecord, in cycle order.

        Returns:
            RunResult: Per-cycle records ordered by cycle index and the finalized summary.
        """
        if (isinstance(n_cycles, bool) or not isinstance(n_cycles, numbers.Real)
                or not math.isfinite(n_cycles) or int(n_cycles) != n_cycles or n_cycles <= 0):
            raise InvalidParameter(f"n_cycles must be a positive integer, got {n_cycles!r}", field='n_cycles')
        n_cycles = int(n_cycles)
        if workers < 1:
            raise InvalidParameter(f"workers must be >= 1, got {workers}", field='workers')

        if isinstance(self.rng, NumpyRandomSource):
            streams = self.rng.spawn(n_cycles)
        elif workers > 1:
            raise InvalidParameter("parallel runs need a NumpyRandomSource to spawn per-cycle streams", field='workers')
        else:
            streams = [self.rng] * n_cycles

        logger.info("Running %d cycles of %d periods (workers=%d)", n_cycles, self.params.period_len, workers)

        if workers == 1:
            indices = tqdm(range(n_cycles), desc="Cycles", disable=not progress, leave=False)
            records = [self._simulate(i, streams[i]) for i in indices]
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                # map() yields in submission order, so records stay in cycle order.
                results = pool.map(lambda i: self._simulate(i, streams[i]), range(n_cycles))
                records = list(tqdm(results, total=n_cycles, desc="Cycles", disable=not progress, leave=False))

        summary = RunSummary()
        for record in records:
            summary.add(record)
            if on_record is not None:
                on_record(record)
        summary.finalize()

        logger.info(
            "Run finished: super-mean revenue=%.2f loss=%.2f delta=%.3f",
            summary.super_mean_revenue, summary.super_mean_loss, summary.super_mean_delta,
        )
        return RunResult(records=records, summary=summary)


def run(params: SimulationParameters, n_cycles: int, rng: Optional[RandomSource] = None, seed=None, **kwargs) -> RunResult:
    return Simulator(params, rng=rng, seed=seed).run(n_cycles, **kwargs)

from dataclasses import dataclass, field
from typing import List

from .exceptions import ComputationDegenerate


@dataclass
class InventoryState:
    storage: int = 0
    production: int = 0
    price: float = 0.0
    sales_demand: int = 0

    def reset(self, start_storage: int):
        """Restores the start-of-cycle state; calling it twice changes nothing."""
        self.storage = start_storage
        self.production = 0
        self.price = 0.0
        self.sales_demand = 0


@dataclass
class PeriodResult:
    period: int
    price: float
    demand: int
    production: int
    admitted: int
    rejected: int
    storage_start: int
    fulfilled: int
    storage_end: int
    delta: int
    revenue: float
    rejection_cost: float
    imbalance_cost: float
    loss: float


@dataclass
class CycleOutput:
    revenue: float = 0.0
    general_loss: float = 0.0
    deltas: List[int] = field(default_factory=list)  # <0 shortage, >0 unsold surplus
    mean: float = 0.0
    periods: List[PeriodResult] = field(default_factory=list)

    def record(self, result: PeriodResult):
        self.revenue += result.revenue
        self.general_loss += result.loss
        self.deltas.append(result.delta)
        self.periods.append(result)

    def compute_mean(self) -> float:
        if not self.deltas:
            raise ComputationDegenerate("cannot average deltas of a cycle with no periods")
        self.mean = sum(self.deltas) / len(self.deltas)
        return self.mean

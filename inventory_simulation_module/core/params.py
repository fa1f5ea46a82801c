import math
import numbers
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, Mapping, Optional

from .exceptions import InvalidParameter


@dataclass(frozen=True)
class SimulationParameters:
    """
    Immutable description of one simulated scenario.

    Every unit cost and distribution parameter lives here, so one value fully
    determines a run and independent cycles can share it read-only.
    """
    start_storage: int
    max_storage: int
    period_len: int
    power: float
    factor: float
    mean_sales: float
    sigma_sales: float
    mean_price: float
    sigma_price: float
    storage_cost_per_unit: float
    shortage_cost_per_unit: float

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidParameter(f"{f.name} must be a number, got {value!r}", field=f.name)
            if not math.isfinite(value):
                raise InvalidParameter(f"{f.name} must be finite, got {value!r}", field=f.name)

        for name in ('start_storage', 'max_storage', 'period_len'):
            value = getattr(self, name)
            if int(value) != value:
                raise InvalidParameter(f"{name} must be an integer, got {value!r}", field=name)
            # Keep storage arithmetic in ints even when a config supplies 10.0.
            object.__setattr__(self, name, int(value))

        if self.max_storage < 0:
            raise InvalidParameter(f"max_storage must be >= 0, got {self.max_storage}", field='max_storage')
        if self.start_storage < 0:
            raise InvalidParameter(f"start_storage must be >= 0, got {self.start_storage}", field='start_storage')
        if self.start_storage > self.max_storage:
            raise InvalidParameter(
                f"start_storage ({self.start_storage}) exceeds max_storage ({self.max_storage})",
                field='start_storage',
            )
        if self.period_len <= 0:
            raise InvalidParameter(f"period_len must be > 0, got {self.period_len}", field='period_len')

        # Production noise must never be able to flip the sign of the mean output.
        if self.factor <= 0 or self.factor >= self.power:
            raise InvalidParameter(
                f"factor must satisfy 0 < factor < power, got factor={self.factor}, power={self.power}",
                field='factor',
            )

        for name in ('sigma_sales', 'sigma_price'):
            if getattr(self, name) <= 0:
                raise InvalidParameter(f"{name} must be > 0, got {getattr(self, name)}", field=name)

        for name in ('storage_cost_per_unit', 'shortage_cost_per_unit'):
            if getattr(self, name) < 0:
                raise InvalidParameter(f"{name} must be >= 0, got {getattr(self, name)}", field=name)

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SimulationParameters':
        known = set(cls.field_names())
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidParameter(f"Unknown parameter(s): {', '.join(unknown)}", field=unknown[0])
        missing = [name for name in cls.field_names() if name not in data]
        if missing:
            raise InvalidParameter(f"Missing parameter(s): {', '.join(missing)}", field=missing[0])
        return cls(**{name: data[name] for name in cls.field_names()})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ParameterResult:
    ok: bool
    params: Optional[SimulationParameters] = None
    error: Optional[InvalidParameter] = None


def build_parameters(**values) -> ParameterResult:
    """
    Validates a set of parameter values without raising.

    Returns:
        ParameterResult: ok=True with the parameters, or ok=False with the
        InvalidParameter that construction raised.
    """
    try:
        params = SimulationParameters.from_dict(values)
    except InvalidParameter as exc:
        return ParameterResult(ok=False, error=exc)
    return ParameterResult(ok=True, params=params)

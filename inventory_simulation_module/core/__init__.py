from .exceptions import SimulationError, InvalidParameter, ComputationDegenerate, RandomSourceExhausted
from .params import SimulationParameters, ParameterResult, build_parameters
from .random_source import RandomSource, NumpyRandomSource, ScriptedRandomSource
from .state import InventoryState, CycleOutput, PeriodResult
from .engine import step, step_detailed
from .cycle import run_cycle
from .simulator import CycleRecord, RunSummary, RunResult, Simulator, run

__all__ = [
    'SimulationError',
    'InvalidParameter',
    'ComputationDegenerate',
    'RandomSourceExhausted',
    'SimulationParameters',
    'ParameterResult',
    'build_parameters',
    'RandomSource',
    'NumpyRandomSource',
    'ScriptedRandomSource',
    'InventoryState',
    'CycleOutput',
    'PeriodResult',
    'step',
    'step_detailed',
    'run_cycle',
    'CycleRecord',
    'RunSummary',
    'RunResult',
    'Simulator',
    'run',
]

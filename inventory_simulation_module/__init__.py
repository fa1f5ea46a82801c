from .core import (
    SimulationError,
    InvalidParameter,
    ComputationDegenerate,
    SimulationParameters,
    build_parameters,
    NumpyRandomSource,
    ScriptedRandomSource,
    Simulator,
    run,
    run_cycle,
    step,
)
from .configs import default_parameters, load_parameters

__all__ = [
    'SimulationError',
    'InvalidParameter',
    'ComputationDegenerate',
    'SimulationParameters',
    'build_parameters',
    'NumpyRandomSource',
    'ScriptedRandomSource',
    'Simulator',
    'run',
    'run_cycle',
    'step',
    'default_parameters',
    'load_parameters',
]

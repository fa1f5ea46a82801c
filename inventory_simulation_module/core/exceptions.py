from typing import Optional


class SimulationError(Exception):
    """Base class for every error raised by the simulator."""


class InvalidParameter(SimulationError, ValueError):
    """
    Fatal configuration error. Raised before any cycle is simulated.

    Args:
        message (str): Human readable description.
        field (str, optional): Name of the offending parameter, if there is one.
    """
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ComputationDegenerate(SimulationError, ArithmeticError):
    """A statistic was requested over zero observations."""


class RandomSourceExhausted(SimulationError, IndexError):
    """A scripted random source has no values left."""

"""Exception types raised by atseptools"""

__all__ = ['AtsepToolsError', 'ConvergenceError', 'InvalidInput', 'OutOfRange']

from typing import Optional


class AtsepToolsError(Exception):
    """Base class for all atseptools errors"""


class ConvergenceError(AtsepToolsError, ArithmeticError):
    """
    An iterative formula exhausted its iteration budget without converging.

    Args:
        message:
            Human-readable description of the failure

        operation:
            The geodesic problem being solved, either 'inverse' or 'direct'

        iterations:
            The number of iterations performed before giving up
    """

    def __init__(self, message: str, operation: str, iterations: int):
        super().__init__(message)
        self.operation = operation
        self.iterations = iterations


class InvalidInput(AtsepToolsError, ValueError):
    """A numeric argument was non-finite or outside its domain"""


class OutOfRange(AtsepToolsError, ValueError):
    """A pressure value fell outside the physically plausible sea level range"""

    def __init__(self, message: str, pressure_hpa: Optional[float] = None):
        super().__init__(message)
        self.pressure_hpa = pressure_hpa

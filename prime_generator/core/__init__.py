"""Core modül - temel sınıflar"""

from .enums import WorkerMode, SearchPhase, DeliveryOrder, ProcessMetric
from .exceptions import (
    PrimeGeneratorError,
    InvalidInputError,
    RandomnessUnavailableError,
    WorkerError
)
from .validation import require_positive_int

__all__ = [
    'WorkerMode',
    'SearchPhase',
    'DeliveryOrder',
    'ProcessMetric',
    'PrimeGeneratorError',
    'InvalidInputError',
    'RandomnessUnavailableError',
    'WorkerError',
    'require_positive_int',
]

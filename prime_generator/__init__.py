"""Prime Generator - Paralel Miller-Rabin asal sayı üretici"""

from .search.coordinator import SearchCoordinator, ResultSink
from .search.record import PrimeRecord
from .config import SearchConfig
from .candidate.generator import CandidateGenerator
from .primality.tester import PrimalityTester, is_probably_prime
from .entropy.provider import RandomnessProvider, SystemRandomnessProvider
from .status import ComponentStatus
from .core.enums import WorkerMode, SearchPhase, DeliveryOrder
from .core.exceptions import (
    PrimeGeneratorError,
    InvalidInputError,
    RandomnessUnavailableError,
    WorkerError
)

__version__ = "1.0.0"
__all__ = [
    'SearchCoordinator',
    'ResultSink',
    'PrimeRecord',
    'SearchConfig',
    'CandidateGenerator',
    'PrimalityTester',
    'is_probably_prime',
    'RandomnessProvider',
    'SystemRandomnessProvider',
    'ComponentStatus',
    'WorkerMode',
    'SearchPhase',
    'DeliveryOrder',
    'PrimeGeneratorError',
    'InvalidInputError',
    'RandomnessUnavailableError',
    'WorkerError',
]

"""Arama modülü - coordinator, kayıtlar ve worker döngüsü"""

from .record import PrimeRecord
from .counter import SharedCounter
from .loop import SearchJob, SearchCounters, run_search_loop
from .coordinator import SearchCoordinator, ResultSink

__all__ = [
    'PrimeRecord',
    'SharedCounter',
    'SearchJob',
    'SearchCounters',
    'run_search_loop',
    'SearchCoordinator',
    'ResultSink',
]

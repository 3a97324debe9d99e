"""
Arama Döngüsü

Her worker'ın (process veya thread) çalıştırdığı döngü:
aday üret -> test et -> asalsa index al -> count'u aşmıyorsa gönder.

Sonuçlar output queue'ya dict olarak gönderilir (multiprocessing için):
    {"status": "SUCCESS", "worker_id": ..., "record": {"index": ..., "value": ...}}
    {"status": "FAILED", "worker_id": ..., "error": ..., "code": ..., "error_type": ...}
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..candidate.generator import CandidateGenerator
from ..primality.tester import PrimalityTester
from ..entropy.provider import RandomnessProvider
from .counter import SharedCounter
from .record import PrimeRecord

# tested sayacı her aday için değil, bu kadar adayda bir güncellenir
TESTED_FLUSH_INTERVAL = 64


@dataclass(frozen=True)
class SearchJob:
    """Tek bir find_primes çağrısının parametreleri"""
    byte_length: int
    count: int
    witnesses: int


@dataclass
class SearchCounters:
    """
    Bir aramanın paylaşılan durumu

    - found: Bulunan asal sayısı, index buradan atanır
    - tested: Test edilen aday sayısı (status için)
    - overshoot: count aşıldığı için atılan asal sayısı (status için)
    """
    found: SharedCounter
    tested: SharedCounter
    overshoot: SharedCounter

    @classmethod
    def create(cls) -> "SearchCounters":
        return cls(found=SharedCounter(), tested=SharedCounter(), overshoot=SharedCounter())


def success_message(worker_id: str, record: PrimeRecord) -> Dict[str, Any]:
    return {
        "status": "SUCCESS",
        "worker_id": worker_id,
        "record": record.to_dict(),
    }


def failure_message(worker_id: str, error: Exception) -> Dict[str, Any]:
    return {
        "status": "FAILED",
        "worker_id": worker_id,
        "error": getattr(error, "message", str(error)),
        "code": getattr(error, "code", None),
        "error_type": type(error).__name__,
    }


def run_search_loop(
    job: SearchJob,
    worker_id: str,
    provider: RandomnessProvider,
    counters: SearchCounters,
    stop_event: Any,
    output_queue: Any,
    heartbeat: Optional[Callable[[], None]] = None
):
    """
    Worker döngüsü - stop_event set edilene kadar aday dener

    stop_event her turda kontrol edilir; çalışan test yarıda kesilmez.
    count'u aşan index'ler sessizce atılır. Hata durumunda failed mesajı
    gönderilir ve stop_event set edilir, böylece diğer worker'lar da durur.
    """
    generator = CandidateGenerator(provider)
    tester = PrimalityTester(provider, job.witnesses)
    tested = 0

    try:
        while not stop_event.is_set():
            candidate = generator.generate(job.byte_length)
            tested += 1
            if tested >= TESTED_FLUSH_INTERVAL:
                counters.tested.increment(tested)
                tested = 0
                if heartbeat is not None:
                    heartbeat()

            if not tester.is_probably_prime(candidate):
                continue

            index = counters.found.increment()
            if index > job.count:
                counters.overshoot.increment()
                continue

            output_queue.put(success_message(worker_id, PrimeRecord(index, candidate)))
            if index == job.count:
                stop_event.set()

    except Exception as e:
        # PrimeGeneratorError dışındakiler coordinator'da WorkerError olur
        output_queue.put(failure_message(worker_id, e))
        stop_event.set()
    finally:
        if tested:
            counters.tested.increment(tested)

"""
Process Pool Modülü

Bu modül, arama worker process'lerini yönetir. Her worker aynı
paylaşılan sayaçları, stop event'ini ve output queue'yu kullanır.

Kullanım:
    pool = ProcessPool(job, provider, counters, worker_count=8)
    pool.start()
    message = pool.get_message(timeout=0.1)
    pool.shutdown()
"""

import logging
import multiprocessing
import queue
import time
from typing import Any, Dict, List, Optional

from ..entropy.provider import RandomnessProvider
from ..search.loop import SearchJob, SearchCounters
from ..status import ComponentStatus
from .process import WorkerProcess


class ProcessPool:
    """
    Process Pool - Worker process yönetimi

    CPU-bound arama için her çekirdeğe bir process başlatır.

    Özellikler:
    - Ortak stop event: count'a ulaşan worker herkesi durdurur
    - Drain: Kapanırken queue boşaltılır ki process'ler takılmasın
    - Status takibi: Worker başına canlılık, CPU ve bellek
    """

    def __init__(
        self,
        job: SearchJob,
        provider: RandomnessProvider,
        counters: SearchCounters,
        worker_count: int
    ):
        self._job = job
        self._provider = provider
        self._counters = counters
        self._worker_count = worker_count

        self._stop_event = multiprocessing.Event()
        self._output_queue = multiprocessing.Queue()
        self._workers: List[WorkerProcess] = []
        self._started = False
        self._closed = False
        self._logger = logging.getLogger("worker_pool")

    @property
    def stop_event(self) -> Any:
        return self._stop_event

    def start(self) -> bool:
        """Pool'u başlat"""
        if self._started:
            return True

        for i in range(self._worker_count):
            worker = WorkerProcess(
                worker_id=f"cpu-{i}",
                job=self._job,
                provider=self._provider,
                counters=self._counters,
                stop_event=self._stop_event,
                output_queue=self._output_queue
            )
            worker.start()
            self._workers.append(worker)

        self._started = True
        self._logger.debug(f"{self._worker_count} worker process başlatıldı")
        return True

    def get_message(self, timeout: float) -> Optional[Dict[str, Any]]:
        """Output queue'dan bir mesaj al, yoksa None"""
        if self._closed:
            return None
        try:
            return self._output_queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def is_alive(self) -> bool:
        return any(w.is_alive() for w in self._workers)

    def stop(self):
        """Yeni aday üretimini durdur (cooperative)"""
        self._stop_event.set()

    def shutdown(self, timeout: float = 5.0) -> int:
        """
        Pool'u kapat

        Stop event set edilir, worker'ların eldeki testi bitirmesi beklenir.
        Bekleme sırasında queue boşaltılır. Süre dolarsa kalan process'ler
        terminate edilir.

        Returns:
            int: Kapanış sırasında atılan mesaj sayısı
        """
        self.stop()
        dropped = 0
        deadline = time.time() + timeout

        while self.is_alive() and time.time() < deadline:
            dropped += self._drain()
            for worker in self._workers:
                worker.join(timeout=0.05)
        dropped += self._drain()

        for worker in self._workers:
            if worker.is_alive():
                self._logger.warning(f"Worker {worker.worker_id} zamanında kapanmadı, sonlandırılıyor")
                worker.terminate()

        self._output_queue.close()
        self._closed = True
        self._started = False
        return dropped

    def _drain(self) -> int:
        dropped = 0
        while True:
            try:
                self._output_queue.get_nowait()
            except queue.Empty:
                return dropped
            dropped += 1

    def get_status(self) -> ComponentStatus:
        """Pool durumu"""
        workers = {w.worker_id: w.get_metrics() for w in self._workers}
        alive = sum(1 for m in workers.values() if m["alive"])

        metrics = {
            "worker_mode": "process",
            "total_workers": len(self._workers),
            "alive_workers": alive,
            "workers": workers,
        }

        health = "healthy" if self._started else "unhealthy"

        return ComponentStatus(
            name="process_pool",
            health=health,
            metrics=metrics
        )

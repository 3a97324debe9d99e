"""
Thread Pool Modülü

Aramayı tek process içinde thread'lerle çalıştırır. GIL nedeniyle
gerçek paralellik sağlamaz; test ve gömülü kullanım içindir.
ProcessPool ile aynı arayüzü sunar.

Kullanım:
    pool = ThreadPool(job, provider, counters, worker_count=2)
    pool.start()
    message = pool.get_message(timeout=0.1)
    pool.shutdown()
"""

import logging
import threading
from queue import Queue, Empty
from threading import Event
from typing import Any, Dict, List, Optional

from ..entropy.provider import RandomnessProvider
from ..search.loop import SearchJob, SearchCounters, run_search_loop
from ..status import ComponentStatus


class ThreadPool:
    """
    Thread Pool - Thread yönetimi

    Her thread run_search_loop çalıştırır ve sonucu queue'ya gönderir.
    Thread'ler zorla durdurulamaz; shutdown sadece stop event ile çalışır.
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

        self._stop_event = Event()
        self._output_queue: Queue = Queue()
        self._threads: List[threading.Thread] = []
        self._started = False
        self._logger = logging.getLogger("worker_pool")

    @property
    def stop_event(self) -> Any:
        return self._stop_event

    def start(self) -> bool:
        """Thread pool'u başlat"""
        if self._started:
            return True

        for i in range(self._worker_count):
            worker_id = f"thread-{i}"
            thread = threading.Thread(
                target=run_search_loop,
                args=(
                    self._job,
                    worker_id,
                    self._provider,
                    self._counters,
                    self._stop_event,
                    self._output_queue
                ),
                name=f"prime-{worker_id}",
                daemon=True
            )
            thread.start()
            self._threads.append(thread)

        self._started = True
        self._logger.debug(f"{self._worker_count} worker thread başlatıldı")
        return True

    def get_message(self, timeout: float) -> Optional[Dict[str, Any]]:
        """Output queue'dan bir mesaj al, yoksa None"""
        try:
            return self._output_queue.get(timeout=timeout)
        except Empty:
            return None

    def is_alive(self) -> bool:
        return any(t.is_alive() for t in self._threads)

    def stop(self):
        """Yeni aday üretimini durdur (cooperative)"""
        self._stop_event.set()

    def shutdown(self, timeout: float = 5.0) -> int:
        """
        Thread pool'u kapat

        Returns:
            int: Kapanış sırasında atılan mesaj sayısı
        """
        self.stop()
        for thread in self._threads:
            thread.join(timeout=timeout)
            if thread.is_alive():
                self._logger.warning(f"{thread.name} zamanında kapanmadı")

        dropped = 0
        while True:
            try:
                self._output_queue.get_nowait()
            except Empty:
                break
            dropped += 1

        self._started = False
        return dropped

    def get_status(self) -> ComponentStatus:
        """Pool durumu"""
        workers = {t.name: {"alive": t.is_alive()} for t in self._threads}
        alive = sum(1 for m in workers.values() if m["alive"])

        metrics = {
            "worker_mode": "thread",
            "total_workers": len(self._threads),
            "alive_workers": alive,
            "workers": workers,
        }

        health = "healthy" if self._started else "unhealthy"

        return ComponentStatus(
            name="thread_pool",
            health=health,
            metrics=metrics
        )

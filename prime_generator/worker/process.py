"""Worker Process - tek bir arama process'i"""

import multiprocessing
import os
import signal
import time
from typing import Any, Dict, Optional

import psutil

from ..core.enums import ProcessMetric
from ..entropy.provider import RandomnessProvider
from ..search.loop import SearchJob, SearchCounters, run_search_loop

METRICS_INTERVAL = 1.0


class WorkerProcess:
    """
    Worker Process - basitleştirilmiş

    Kendi process'i içinde run_search_loop çalıştırır.
    CPU ve bellek kullanımını paylaşılan bir diziye yazar.
    """

    def __init__(
        self,
        worker_id: str,
        job: SearchJob,
        provider: RandomnessProvider,
        counters: SearchCounters,
        stop_event: Any,
        output_queue: Any
    ):
        self._worker_id = worker_id
        self._job = job
        self._provider = provider
        self._counters = counters
        self._stop_event = stop_event
        self._output_queue = output_queue
        self._process: Optional[multiprocessing.Process] = None

        self.process_metrics = multiprocessing.Array('d', len(ProcessMetric), lock=False)

    @property
    def worker_id(self) -> str:
        return self._worker_id

    def start(self):
        """Process'i başlat"""
        process = multiprocessing.Process(
            target=self._run_process,
            args=(
                self._worker_id,
                self._job,
                self._provider,
                self._counters,
                self._stop_event,
                self._output_queue,
                self.process_metrics
            ),
            name=f"prime-{self._worker_id}",
            daemon=True
        )
        process.start()
        self._process = process

    def is_alive(self) -> bool:
        return self._process is not None and self._process.is_alive()

    def join(self, timeout: Optional[float] = None):
        if self._process:
            self._process.join(timeout=timeout)

    def terminate(self):
        """Hala çalışıyorsa terminate, sonra kill"""
        if not self.is_alive():
            return
        self._process.terminate()
        self._process.join(timeout=2.0)
        if self._process.is_alive():
            self._process.kill()
            self._process.join(timeout=1.0)

    def get_metrics(self) -> Dict[str, Any]:
        return {
            "alive": self.is_alive(),
            "exitcode": self._process.exitcode if self._process else None,
            "cpu_percent": self.process_metrics[ProcessMetric.CPU],
            "memory_mb": round(self.process_metrics[ProcessMetric.MEM], 2),
        }

    @staticmethod
    def _run_process(worker_id, job, provider, counters, stop_event, output_queue, process_metrics):
        """Process içinde çalışan fonksiyon"""

        # Ctrl+C ana process'te yakalanır, kapanmayı o yönetir
        signal.signal(signal.SIGINT, signal.SIG_IGN)

        proc = psutil.Process(os.getpid())
        proc.cpu_percent(None)
        last_metrics_update = [0.0]

        def heartbeat():
            now = time.time()
            if now - last_metrics_update[0] < METRICS_INTERVAL:
                return
            process_metrics[ProcessMetric.CPU] = proc.cpu_percent(None)
            process_metrics[ProcessMetric.MEM] = proc.memory_info().rss / (1024 * 1024)
            last_metrics_update[0] = now

        run_search_loop(
            job,
            worker_id,
            provider,
            counters,
            stop_event,
            output_queue,
            heartbeat=heartbeat
        )

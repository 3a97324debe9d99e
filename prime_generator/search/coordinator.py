"""
Search Coordinator

Bu modül, asal arama sisteminin merkezi kontrol noktasıdır.
Worker pool'u başlatır, bulunan asalları toplar, index sırasına
koyar ve sink'e iletir; count'a ulaşılınca aramayı durdurur.

Kullanım:
    coordinator = SearchCoordinator(config)
    records = coordinator.find_primes(byte_length=64, count=3, sink=print)

    # veya akış olarak
    for record in coordinator.iter_primes(byte_length=64, count=3):
        ...
"""

import logging
import time
from contextlib import closing
from threading import Lock
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..core.validation import require_positive_int
from ..config import SearchConfig
from ..core.enums import WorkerMode, SearchPhase, DeliveryOrder
from ..core.exceptions import (
    PrimeGeneratorError,
    InvalidInputError,
    RandomnessUnavailableError,
    WorkerError
)
from ..entropy.provider import RandomnessProvider, SystemRandomnessProvider
from ..status import ComponentStatus
from ..worker.pool import ProcessPool
from ..worker.thread import ThreadPool
from .loop import SearchJob, SearchCounters
from .record import PrimeRecord

ResultSink = Callable[[PrimeRecord], Any]

# Worker'dan gelen error_type -> caller'a yükseltilecek exception
_WORKER_ERRORS = {
    "InvalidInputError": InvalidInputError,
    "RandomnessUnavailableError": RandomnessUnavailableError,
}


class SearchCoordinator:
    """
    Search Coordinator - Aramanın merkezi kontrol noktası

    Bu sınıf, paralel asal aramasını yönetir:
    - Girdi doğrulama ve rastgelelik kaynağı kontrolü (arama başlamadan)
    - Worker pool yönetimi (process veya thread)
    - Index sıralama: Sink kayıtları 1..count sırasıyla alır (DeliveryOrder.INDEX)
    - Cooperative durdurma: count'a ulaşılınca stop event set edilir

    Durum makinesi:
        IDLE -> RUNNING -> DRAINING -> DONE

    Aynı anda tek bir arama çalışabilir.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        provider: Optional[RandomnessProvider] = None
    ):
        """
        Coordinator'ı oluşturur

        Args:
            config: Arama yapılandırması (opsiyonel, varsayılan kullanılır)
            provider: Rastgelelik kaynağı (opsiyonel, os.urandom kullanılır)
        """
        self._config = config or SearchConfig()

        # Logger: Sistem mesajları için
        logging.basicConfig(level=getattr(logging, self._config.log_level))
        self._logger = logging.getLogger("search_coordinator")

        self._provider = provider or SystemRandomnessProvider()

        self._lock = Lock()  # Durum alanları için
        self._phase = SearchPhase.IDLE
        self._pool = None
        self._job: Optional[SearchJob] = None
        self._counters: Optional[SearchCounters] = None
        self._delivered = 0
        self._last_error: Optional[str] = None

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def phase(self) -> SearchPhase:
        with self._lock:
            return self._phase

    def find_primes(
        self,
        byte_length: int,
        count: int,
        sink: Optional[ResultSink] = None
    ) -> List[PrimeRecord]:
        """
        count adet olası asal bulur

        Her kayıt teslim edildiği anda sink'e verilir, ayrıca liste olarak
        döndürülür.

        Args:
            byte_length: Aday başına byte sayısı
            count: Bulunacak asal sayısı
            sink: Her PrimeRecord için çağrılacak fonksiyon (opsiyonel)

        Returns:
            List[PrimeRecord]: Teslim sırasındaki kayıtlar

        Raises:
            InvalidInputError: byte_length veya count geçersizse
            RandomnessUnavailableError: Rastgelelik kaynağı yoksa
            WorkerError: Worker'lar sonuç vermeden sonlanırsa
        """
        records = []
        with closing(self.iter_primes(byte_length, count)) as stream:
            for record in stream:
                if sink is not None:
                    sink(record)
                records.append(record)
        return records

    def iter_primes(self, byte_length: int, count: int) -> Iterator[PrimeRecord]:
        """
        find_primes'ın akış versiyonu

        Doğrulama ve rastgelelik kontrolü hemen yapılır; arama ilk
        next() çağrısında başlar. Iterator erken kapatılırsa pool da kapanır.
        """
        require_positive_int(byte_length, "byte_length", "INP001")
        require_positive_int(count, "count", "INP002")

        # Kaynak yoksa hiç sonuç üretmeden hata ver
        self._provider.probe()

        job = SearchJob(byte_length=byte_length, count=count, witnesses=self._config.witnesses)
        return self._run(job)

    def shutdown(self):
        """
        Çalışan aramayı durdurur ve pool'u kapatır

        Yarıda bırakılmış bir iterator'dan sonra coordinator tekrar
        kullanılabilir hale gelir. Durdurulan iterator devam ettirilirse
        SRC002 fırlatır.
        """
        with self._lock:
            pool = self._pool
        if pool is not None and self._finish(pool):
            self._logger.info("Arama shutdown ile durduruldu")

    def _run(self, job: SearchJob) -> Iterator[PrimeRecord]:
        """Pool'u başlatır, mesajları toplar, sonunda pool'u kapatır"""
        with self._lock:
            if self._phase in (SearchPhase.RUNNING, SearchPhase.DRAINING):
                raise PrimeGeneratorError("Arama zaten çalışıyor", code="SRC001")
            counters = SearchCounters.create()
            pool = self._create_pool(job, counters)
            self._job = job
            self._counters = counters
            self._pool = pool
            self._delivered = 0
            self._last_error = None
            self._phase = SearchPhase.RUNNING

        started_at = time.time()
        delivered = 0
        self._logger.debug(f"Faz: {SearchPhase.RUNNING.value}")
        self._logger.info(
            f"Arama başladı: byte_length={job.byte_length}, count={job.count}, "
            f"workers={self._config.worker_count} ({self._config.worker_mode.value})"
        )

        try:
            pool.start()
            for record in self._collect(pool, job):
                delivered += 1
                yield record
        except PrimeGeneratorError as e:
            with self._lock:
                if self._pool is pool:
                    self._last_error = str(e)
            self._logger.error(f"Arama hatası: {e}")
            raise
        finally:
            self._finish(pool)
            self._logger.info(
                f"Arama bitti: {delivered}/{job.count} teslim, "
                f"{counters.tested.value} aday test edildi, "
                f"{counters.overshoot.value} fazla asal atıldı, "
                f"süre={time.time() - started_at:.2f}s"
            )

    def _finish(self, pool: Any) -> bool:
        """
        Aramayı DRAINING -> DONE ile kapatır

        Hem iterator'ın finally bloğu hem shutdown() çağırır; pool'u yalnızca
        ilk çağrı kapatır. Yeni bir arama başlamışsa eski pool'a dokunulmaz.

        Returns:
            bool: Kapatma bu çağrıda yapıldıysa True
        """
        with self._lock:
            if self._pool is not pool or self._phase != SearchPhase.RUNNING:
                return False
            self._phase = SearchPhase.DRAINING
        self._logger.debug(f"Faz: {SearchPhase.DRAINING.value}")

        dropped = pool.shutdown(timeout=self._config.shutdown_timeout)
        self._set_phase(SearchPhase.DONE)
        if dropped:
            self._logger.debug(f"Kapanışta {dropped} mesaj atıldı")
        return True

    def _ensure_active(self, pool: Any, delivered: int, job: SearchJob):
        """shutdown() ile kapatılmış aramanın devam etmesini engeller"""
        with self._lock:
            active = self._pool is pool and self._phase == SearchPhase.RUNNING
        if not active:
            raise PrimeGeneratorError(
                f"Arama durduruldu ({delivered}/{job.count} teslim edildi)",
                code="SRC002"
            )

    def _collect(self, pool: Any, job: SearchJob) -> Iterator[PrimeRecord]:
        """
        Tek tüketici döngüsü

        INDEX modunda sıra dışı gelen kayıtlar bekletilir ve
        next_index gelene kadar sink'e verilmez.
        """
        ordered = self._config.delivery_order == DeliveryOrder.INDEX
        pending: Dict[int, PrimeRecord] = {}
        next_index = 1
        delivered = 0

        while delivered < job.count:
            self._ensure_active(pool, delivered, job)
            message = pool.get_message(timeout=self._config.result_poll_timeout)

            if message is None:
                if pool.is_alive():
                    continue
                # Son mesajlar process kapanırken gelmiş olabilir
                message = pool.get_message(timeout=self._config.result_poll_timeout)
                if message is None:
                    raise WorkerError(
                        f"Tüm worker'lar {job.count} sonuç vermeden sonlandı "
                        f"({delivered} teslim edildi)",
                        code="WRK001"
                    )

            if message.get("status") != "SUCCESS":
                raise self._error_from_message(message)

            record = PrimeRecord.from_dict(message["record"])
            self._logger.debug(f"#{record.index} bulundu ({message.get('worker_id')})")

            if ordered:
                pending[record.index] = record
                ready = []
                while next_index in pending:
                    ready.append(pending.pop(next_index))
                    next_index += 1
            else:
                ready = [record]

            for item in ready:
                self._ensure_active(pool, delivered, job)
                delivered += 1
                self._mark_delivered(pool, delivered)
                yield item

    def _mark_delivered(self, pool: Any, delivered: int):
        """Status için teslim sayısını yalnızca aktif aramada güncelle"""
        with self._lock:
            if self._pool is pool:
                self._delivered = delivered

    def _create_pool(self, job: SearchJob, counters: SearchCounters) -> Any:
        if self._config.worker_mode == WorkerMode.THREAD:
            pool_cls = ThreadPool
        else:
            pool_cls = ProcessPool
        return pool_cls(
            job=job,
            provider=self._provider,
            counters=counters,
            worker_count=self._config.worker_count
        )

    @staticmethod
    def _error_from_message(message: Dict[str, Any]) -> PrimeGeneratorError:
        """Worker'ın failed mesajını caller tarafındaki exception'a çevir"""
        error = message.get("error", "bilinmeyen hata")
        worker_id = message.get("worker_id")
        error_cls = _WORKER_ERRORS.get(message.get("error_type"))
        if error_cls is not None:
            return error_cls(error, code=message.get("code"))
        return WorkerError(
            f"Worker {worker_id} hata verdi: {message.get('error_type')}: {error}",
            code="WRK002",
            worker_id=worker_id
        )

    def _set_phase(self, phase: SearchPhase):
        with self._lock:
            self._phase = phase
        self._logger.debug(f"Faz: {phase.value}")

    def get_status(self) -> ComponentStatus:
        """Coordinator durumu"""
        with self._lock:
            job = self._job
            counters = self._counters
            pool = self._pool
            metrics = {
                "phase": self._phase.value,
                "delivered": self._delivered,
                "last_error": self._last_error,
                "worker_mode": self._config.worker_mode.value,
                "worker_count": self._config.worker_count,
                "delivery_order": self._config.delivery_order.value,
            }

        if job is not None:
            metrics["byte_length"] = job.byte_length
            metrics["count"] = job.count
        if counters is not None:
            metrics["found"] = counters.found.value
            metrics["tested"] = counters.tested.value
            metrics["overshoot"] = counters.overshoot.value
        if pool is not None:
            metrics["pool"] = pool.get_status().to_dict()

        health = "unhealthy" if metrics["last_error"] else "healthy"

        return ComponentStatus(
            name="search_coordinator",
            health=health,
            metrics=metrics
        )

    # Context manager
    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False

"""
Arama Yapılandırması

Bu modül, SearchCoordinator'ın tüm yapılandırma ayarlarını içerir.
Tek bir config sınıfı ile tüm ayarlar yönetilir.

Kullanım:
    config = SearchConfig(
        worker_count=4,
        worker_mode=WorkerMode.PROCESS,
        witnesses=20
    )
    coordinator = SearchCoordinator(config)
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import psutil

from ..core.enums import WorkerMode, DeliveryOrder

DEFAULT_WITNESSES = 10


def available_cpu_count() -> int:
    """
    Bu process'in kullanabileceği çekirdek sayısı

    cpu_affinity destekleniyorsa (Linux, Windows) affinity maskesini sayar,
    yoksa mantıksal çekirdek sayısına düşer.
    """
    try:
        return max(1, len(psutil.Process().cpu_affinity()))
    except (AttributeError, NotImplementedError, psutil.Error):
        return psutil.cpu_count(logical=True) or 1


@dataclass
class SearchConfig:
    """
    Arama yapılandırması - Tüm ayarlar burada

    Bu sınıf, aramanın tüm yapılandırma ayarlarını içerir:
    - Worker ayarları: Worker sayısı ve tipi (process/thread)
    - Test ayarları: Miller-Rabin witness sayısı
    - Teslim ayarları: Sonuçların sink'e hangi sırayla verileceği
    - Genel ayarlar: Log level, timeout değerleri

    Varsayılan değerler makul seçilmiştir, çoğu durumda değiştirmeye gerek yoktur.
    """
    # Worker ayarları
    worker_count: Optional[int] = None  # None = otomatik (kullanılabilir çekirdek sayısı)
    worker_mode: Union[WorkerMode, str] = WorkerMode.PROCESS

    # Miller-Rabin ayarları
    witnesses: int = DEFAULT_WITNESSES

    # Teslim ayarları
    delivery_order: Union[DeliveryOrder, str] = DeliveryOrder.INDEX

    # Genel ayarlar
    log_level: str = "INFO"
    result_poll_timeout: float = 0.1
    shutdown_timeout: float = 5.0

    def __post_init__(self):
        """Değerleri doğrula ve otomatik ayarla"""
        # Worker count otomatik hesaplama
        if self.worker_count is None:
            self.worker_count = available_cpu_count()

        # JSON'dan gelen string değerleri enum'a çevir
        if isinstance(self.worker_mode, str):
            self.worker_mode = WorkerMode(self.worker_mode.lower())
        if isinstance(self.delivery_order, str):
            self.delivery_order = DeliveryOrder(self.delivery_order.lower())

        # Validasyon
        if not isinstance(self.worker_count, int) or self.worker_count < 1:
            raise ValueError("worker_count en az 1 olmalı")
        if not isinstance(self.witnesses, int) or self.witnesses < 1:
            raise ValueError("witnesses en az 1 olmalı")
        if self.result_poll_timeout <= 0:
            raise ValueError("result_poll_timeout pozitif olmalı")
        if self.shutdown_timeout <= 0:
            raise ValueError("shutdown_timeout pozitif olmalı")

        # Log level kontrolü
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"Geçersiz log_level: {self.log_level}")

        self.log_level = self.log_level.upper()

    def to_dict(self) -> Dict[str, Any]:
        """Dict'e dönüştür (gösterim ve JSON için)"""
        return {
            "worker_count": self.worker_count,
            "worker_mode": self.worker_mode.value,
            "witnesses": self.witnesses,
            "delivery_order": self.delivery_order.value,
            "log_level": self.log_level,
            "result_poll_timeout": self.result_poll_timeout,
            "shutdown_timeout": self.shutdown_timeout,
        }

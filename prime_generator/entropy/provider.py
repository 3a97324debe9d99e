"""
Rastgelelik Sağlayıcı Modülü

Bu modül, aday sayılar ve Miller-Rabin witness'ları için güvenli
rastgele byte üreten sağlayıcıyı içerir. Process başına bir kez oluşturulur
ve CandidateGenerator ile PrimalityTester'a enjekte edilir.

Kullanım:
    provider = SystemRandomnessProvider()
    provider.probe()
    data = provider.read(64)
"""

import os
from threading import Lock
from typing import Any, Dict

from ..core.exceptions import RandomnessUnavailableError
from ..status import ComponentStatus


class RandomnessProvider:
    """
    Rastgelelik sağlayıcı arayüzü

    Alt sınıflar read() metodunu uygular. read() aynı anda birden fazla
    thread'den çağrılabilir olmalıdır.
    """

    def read(self, length: int) -> bytes:
        raise NotImplementedError

    def probe(self):
        """
        Kaynağın kullanılabilir olduğunu doğrular

        Arama başlamadan önce çağrılır, böylece kaynak yoksa
        hiç sonuç üretilmeden hata verilir.

        Raises:
            RandomnessUnavailableError: Kaynak okunamıyorsa
        """
        data = self.read(1)
        if len(data) != 1:
            raise RandomnessUnavailableError(
                "Rastgelelik kaynağı eksik byte döndürdü", code="RND002"
            )


class SystemRandomnessProvider(RandomnessProvider):
    """
    İşletim sistemi CSPRNG'si (os.urandom)

    os.urandom reentrant'tır; lock sadece sayaçları korur,
    byte okuma sırasında tutulmaz.

    Özellikler:
    - Thread-safe: Eşzamanlı read() çağrıları güvenli
    - Pickle edilebilir: Worker process'lere argüman olarak geçirilir
    - Status takibi: Toplam okuma ve byte sayısı
    """

    def __init__(self):
        self._total_reads = 0
        self._total_bytes = 0
        self._lock = Lock()

    def read(self, length: int) -> bytes:
        """
        length kadar güvenli rastgele byte döndürür

        Raises:
            RandomnessUnavailableError: İşletim sistemi kaynağı sağlayamazsa
        """
        try:
            data = os.urandom(length)
        except (NotImplementedError, OSError) as e:
            raise RandomnessUnavailableError(
                f"Güvenli rastgelelik kaynağı okunamadı: {e}", code="RND001"
            ) from e

        with self._lock:
            self._total_reads += 1
            self._total_bytes += length
        return data

    def get_status(self) -> ComponentStatus:
        """Component durumu"""
        with self._lock:
            metrics = {
                "total_reads": self._total_reads,
                "total_bytes": self._total_bytes,
            }

        return ComponentStatus(
            name="randomness_provider",
            health="healthy",
            metrics=metrics
        )

    def __getstate__(self) -> Dict[str, Any]:
        """Pickle için state - lock'u hariç tut"""
        return {
            '_total_reads': self._total_reads,
            '_total_bytes': self._total_bytes,
        }

    def __setstate__(self, state: Dict[str, Any]):
        """Pickle'dan restore et"""
        self._total_reads = state['_total_reads']
        self._total_bytes = state['_total_bytes']
        self._lock = Lock()  # Yeni lock oluştur

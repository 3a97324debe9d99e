"""
Core Enums Modülü

Bu modül, sistemde kullanılan enum'ları içerir:
- WorkerMode: Worker tipi (PROCESS veya THREAD)
- SearchPhase: Arama durumu (IDLE, RUNNING, DRAINING, DONE)
- DeliveryOrder: Sonuçların sink'e teslim sırası
"""

from enum import Enum, IntEnum


class WorkerMode(Enum):
    """
    Worker Tipi

    Aramanın hangi paralellik modeliyle çalışacağını belirtir.

    - PROCESS: Her çekirdek için ayrı process (gerçek CPU paralelliği)
    - THREAD: Tek process içinde thread'ler (test ve gömülü kullanım için)
    """
    PROCESS = "process"  # Çok çekirdekli arama
    THREAD = "thread"    # GIL altında, deterministik test için


class SearchPhase(Enum):
    """
    Arama Durumu

    Bir find_primes çağrısının yaşam döngüsü.

    - IDLE: Henüz başlamadı
    - RUNNING: found < count, worker'lar aday üretiyor
    - DRAINING: count'a ulaşıldı, yeni iş yok, eldeki testler bitiyor
    - DONE: Tüm worker'lar döndü
    """
    IDLE = "idle"
    RUNNING = "running"
    DRAINING = "draining"
    DONE = "done"


class DeliveryOrder(Enum):
    """
    Teslim Sırası

    - INDEX: Sink kayıtları 1, 2, 3... sırasıyla alır (sıralayıcı tüketici)
    - DISCOVERY: Kayıtlar geldiği anda teslim edilir, index sadece metadata
    """
    INDEX = "index"
    DISCOVERY = "discovery"


class ProcessMetric(IntEnum):
    CPU = 0
    MEM = 1

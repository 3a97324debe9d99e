"""
Exception Hiyerarşisi

Bu modül, sistemde kullanılan özel exception'ları içerir.
Tüm exception'lar PrimeGeneratorError'dan türer.

Hiyerarşi:
    PrimeGeneratorError (base)
    ├── InvalidInputError (geçersiz byte_length / count / witness)
    ├── RandomnessUnavailableError (güvenli rastgelelik kaynağı yok)
    └── WorkerError (worker process veya thread hataları)
"""

from typing import Optional


class PrimeGeneratorError(Exception):
    """
    Prime Generator Hataları - Base exception

    Tüm sistem hataları bu sınıftan türer.
    Hata mesajı ve kod içerir.
    """
    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code  # Hata kodu (örn: "INP001")

    def __str__(self):
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class InvalidInputError(PrimeGeneratorError):
    """
    Geçersiz Girdi Hataları

    byte_length, count veya witness sayısı geçersizse fırlatılır.
    Çağıranın sorumluluğudur; arama hiç başlamaz.
    """
    def __init__(self, message: str, code: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message, code)
        self.field = field  # Hangi parametre hatalı


class RandomnessUnavailableError(PrimeGeneratorError):
    """
    Rastgelelik Hataları

    Güvenli rastgelelik kaynağı başlatılamıyor veya okunamıyorsa fırlatılır.
    Ölümcül hatadır, tekrar denenmez.
    """
    pass


class WorkerError(PrimeGeneratorError):
    """
    Worker Hataları

    Worker process veya thread beklenmedik şekilde sonlandığında fırlatılır.
    Worker ID bilgisi içerir.
    """
    def __init__(self, message: str, code: Optional[str] = None, worker_id: Optional[str] = None):
        super().__init__(message, code)
        self.worker_id = worker_id

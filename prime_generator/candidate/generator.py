"""
Aday Sayı Üretici

Güvenli rastgelelik kaynağından sabit uzunlukta byte çekip
işaretsiz bir tam sayıya dönüştürür.

Kullanım:
    generator = CandidateGenerator(provider)
    candidate = generator.generate(64)  # 512 bit'e kadar
"""

from typing import Optional

from ..core.validation import require_positive_int
from ..entropy.provider import RandomnessProvider, SystemRandomnessProvider


class CandidateGenerator:
    """
    Candidate Generator - aday üretimi

    Filtre yok: sıfır ve çift değerler dahil her byte dizisi geçerli bir
    adaydır, bileşik olanları PrimalityTester eler. Byte'lar big-endian
    işaretsiz okunur, sonuç her zaman [0, 2^(8*byte_length)) aralığındadır.
    """

    def __init__(self, provider: Optional[RandomnessProvider] = None):
        self._provider = provider or SystemRandomnessProvider()

    @property
    def provider(self) -> RandomnessProvider:
        return self._provider

    def generate(self, byte_length: int) -> int:
        """
        byte_length uzunluğunda rastgele aday üretir

        Args:
            byte_length: Çekilecek byte sayısı (en az 1)

        Returns:
            int: 0 <= aday < 2^(8*byte_length)

        Raises:
            InvalidInputError: byte_length geçersizse
            RandomnessUnavailableError: Kaynak okunamazsa
        """
        require_positive_int(byte_length, "byte_length", "INP001")
        data = self._provider.read(byte_length)
        return int.from_bytes(data, "big")

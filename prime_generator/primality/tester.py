"""
Miller-Rabin Asallık Testi

Bu modül, aday sayıların olası asal olup olmadığını Miller-Rabin
testi ile kontrol eder. Witness'lar aday üretimiyle aynı güvenli
kaynaktan çekilir.

Kullanım:
    tester = PrimalityTester(provider, witnesses=10)
    tester.is_probably_prime(561)   # False (Carmichael sayısı)
    tester.is_probably_prime(97)    # True
"""

from typing import Optional, Tuple

from ..config import DEFAULT_WITNESSES
from ..core.exceptions import InvalidInputError
from ..entropy.provider import RandomnessProvider, SystemRandomnessProvider


def decompose(value: int) -> Tuple[int, int]:
    """value - 1 = d * 2^s, d tek; (d, s) döndürür"""
    d = value - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return d, s


class PrimalityTester:
    """
    Primality Tester - Miller-Rabin

    Yanlış pozitif olasılığı rastgele witness'lar için en fazla
    4^(-witnesses). Sonuç bir asallık sertifikası değildir.

    Özellikler:
    - Küçük değer koruması: value < 5 için witness aralığı [2, value-2) boş
    - Reddetmeli örnekleme: witness'lar value'nun bit uzunluğuna maskelenir,
      kabul olasılığı sabit bir alt sınırın üstünde (büyük value için 1/2'ye
      yaklaşır, value=5 için 1/8)
    - Hesaplama tam sayı aritmetiği ile yapılır, taşma yok
    """

    def __init__(
        self,
        provider: Optional[RandomnessProvider] = None,
        witnesses: int = DEFAULT_WITNESSES
    ):
        self._provider = provider or SystemRandomnessProvider()
        self._witnesses = self._normalize_witnesses(witnesses)

    @property
    def witnesses(self) -> int:
        return self._witnesses

    @staticmethod
    def _normalize_witnesses(witnesses) -> int:
        if isinstance(witnesses, bool) or not isinstance(witnesses, int):
            raise InvalidInputError(
                f"witnesses tam sayı olmalı, gelen: {witnesses!r}",
                code="INP003",
                field="witnesses"
            )
        if witnesses <= 0:
            return DEFAULT_WITNESSES
        return witnesses

    def is_probably_prime(self, value: int, witnesses: Optional[int] = None) -> bool:
        """
        value olası asal mı?

        Args:
            value: Test edilecek tam sayı
            witnesses: Tur sayısı (None = tester varsayılanı, <= 0 ise 10)

        Returns:
            bool: Tüm turlar geçildiyse True

        Raises:
            InvalidInputError: value veya witnesses int değilse
            RandomnessUnavailableError: Witness için kaynak okunamazsa
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(
                f"value tam sayı olmalı, gelen: {value!r}", code="INP004", field="value"
            )
        rounds = self._witnesses if witnesses is None else self._normalize_witnesses(witnesses)

        if value <= 1:
            return False
        if value < 5:
            return value in (2, 3)
        if value % 2 == 0:
            return False

        d, s = decompose(value)

        for _ in range(rounds):
            a = self._sample_witness(value)
            x = pow(a, d, value)
            if x == 1 or x == value - 1:
                continue

            for _ in range(s - 1):
                x = pow(x, 2, value)
                if x == 1:
                    return False
                if x == value - 1:
                    break

            if x != value - 1:
                return False

        return True

    def _sample_witness(self, value: int) -> int:
        """[2, value - 2) aralığından düzgün dağılımlı witness"""
        bits = value.bit_length()
        length = (bits + 7) // 8
        mask = (1 << bits) - 1
        while True:
            a = int.from_bytes(self._provider.read(length), "big") & mask
            if 2 <= a < value - 2:
                return a


def is_probably_prime(
    value: int,
    witnesses: int = DEFAULT_WITNESSES,
    provider: Optional[RandomnessProvider] = None
) -> bool:
    """Tek seferlik kullanım için kısayol"""
    return PrimalityTester(provider, witnesses).is_probably_prime(value)

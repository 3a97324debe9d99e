"""
PrimeRecord Sınıfı

Bulunan her olası asal için bir kayıt: keşif sırasına göre verilen
index ve değerin kendisi. Kayıtlar değiştirilmez, sink'e iletildikten
sonra tutulmaz.

Kullanım:
    record = PrimeRecord(index=1, value=4294967291)
    queue.put(record.to_dict())
    record = PrimeRecord.from_dict(item)
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class PrimeRecord:
    """
    Keşif kaydı

    - index: 1'den başlayan, boşluksuz ve tekrarsız keşif sırası
    - value: Miller-Rabin testini geçmiş aday
    """
    index: int
    value: int

    @property
    def bit_length(self) -> int:
        return self.value.bit_length()

    @property
    def byte_length(self) -> int:
        """value'yu tutmak için gereken minimum byte sayısı"""
        return (self.value.bit_length() + 7) // 8

    def to_dict(self) -> Dict[str, Any]:
        """Dict'e dönüştür (queue için)"""
        return {
            "index": self.index,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrimeRecord":
        """Dict'ten oluştur"""
        return cls(index=int(data["index"]), value=int(data["value"]))

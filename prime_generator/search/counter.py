"""
Paylaşılan Sayaç

Tüm worker'ların (process veya thread) ortak kullandığı atomik sayaç.
multiprocessing.Value üzerine kurulu olduğu için hem process'ler arasında
hem de aynı process'in thread'leri arasında güvenlidir.

Kullanım:
    found = SharedCounter()
    index = found.increment()  # Artır ve yeni değeri al
"""

import multiprocessing


class SharedCounter:
    """
    Atomik sayaç

    increment() artırma ve okuma işlemini tek lock altında yapar,
    böylece dönen değer her çağıran için benzersizdir.
    """

    def __init__(self, initial: int = 0):
        self._value = multiprocessing.Value('q', initial)

    def increment(self, amount: int = 1) -> int:
        """Artır ve artırılmış değeri döndür"""
        with self._value.get_lock():
            self._value.value += amount
            return self._value.value

    @property
    def value(self) -> int:
        with self._value.get_lock():
            return self._value.value

"""
Girdi Doğrulama

Arama başlamadan önce çağıranın verdiği değerleri kontrol eder.
Hatalı girdi InvalidInputError ile, hangi parametre olduğu belirtilerek
bildirilir.
"""

from .exceptions import InvalidInputError


def require_positive_int(value, field: str, code: str) -> int:
    """bool olmayan ve 1'den küçük olmayan int bekler"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(
            f"{field} tam sayı olmalı, gelen: {value!r}", code=code, field=field
        )
    if value < 1:
        raise InvalidInputError(
            f"{field} en az 1 olmalı, gelen: {value}", code=code, field=field
        )
    return value

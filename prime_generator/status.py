"""Basit status takibi"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ComponentStatus:
    """
    Component durumu - basit

    Her component'in get_status() metodu bu sınıfı döndürür.
    """
    name: str
    health: str  # "healthy" veya "unhealthy"
    metrics: Dict[str, Any]

    @property
    def is_healthy(self) -> bool:
        return self.health == "healthy"

    def to_dict(self) -> Dict[str, Any]:
        """Dict'e dönüştür"""
        return {
            "name": self.name,
            "health": self.health,
            "metrics": self.metrics,
        }

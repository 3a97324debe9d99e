"""Güvenli rastgelelik kaynakları"""

from .provider import RandomnessProvider, SystemRandomnessProvider

__all__ = [
    'RandomnessProvider',
    'SystemRandomnessProvider',
]

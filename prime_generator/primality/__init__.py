from .tester import PrimalityTester, is_probably_prime, decompose

__all__ = ['PrimalityTester', 'is_probably_prime', 'decompose']

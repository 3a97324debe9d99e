from .generator import CandidateGenerator

__all__ = ['CandidateGenerator']

"""
Aday Üretici ve Rastgelelik Sağlayıcı Testleri
"""

import os
import pickle

import pytest

from prime_generator import (
    CandidateGenerator,
    RandomnessProvider,
    SystemRandomnessProvider,
    InvalidInputError,
    RandomnessUnavailableError
)


class FixedProvider(RandomnessProvider):
    """Hep aynı byte desenini döndüren sağlayıcı"""

    def __init__(self, pattern: bytes):
        self._pattern = pattern

    def read(self, length):
        return (self._pattern * length)[:length]


class ShortProvider(RandomnessProvider):
    """İstenenden az byte döndürür"""

    def read(self, length):
        return b""


class TestCandidateGenerator:
    """CandidateGenerator testleri"""

    @pytest.mark.parametrize("byte_length", [1, 4, 8, 64, 128])
    def test_candidate_in_range(self, byte_length):
        """Aday her zaman [0, 2^(8*byte_length)) aralığında"""
        generator = CandidateGenerator()

        for _ in range(100):
            candidate = generator.generate(byte_length)
            assert 0 <= candidate < 2 ** (8 * byte_length)

    def test_top_bit_set_is_not_negative(self):
        """En üst bit set olsa da değer pozitif kalır"""
        generator = CandidateGenerator(FixedProvider(b"\xff"))

        assert generator.generate(4) == 2 ** 32 - 1

    def test_big_endian(self):
        generator = CandidateGenerator(FixedProvider(b"\x80\x00\x00\x01"))

        assert generator.generate(4) == 2 ** 31 + 1

    def test_zero_and_even_candidates_allowed(self):
        """Filtre yok: sıfır ve çift değerler de aday olabilir"""
        assert CandidateGenerator(FixedProvider(b"\x00")).generate(8) == 0
        assert CandidateGenerator(FixedProvider(b"\x02")).generate(1) == 2

    @pytest.mark.parametrize("byte_length", [0, -1, "4", 4.0, None, True])
    def test_invalid_byte_length(self, byte_length):
        generator = CandidateGenerator()

        with pytest.raises(InvalidInputError) as exc_info:
            generator.generate(byte_length)
        assert exc_info.value.code == "INP001"

    def test_default_provider(self):
        assert isinstance(CandidateGenerator().provider, SystemRandomnessProvider)


class TestSystemRandomnessProvider:
    """SystemRandomnessProvider testleri"""

    def test_read_length(self):
        provider = SystemRandomnessProvider()

        assert len(provider.read(32)) == 32

    def test_status_counts_reads(self):
        provider = SystemRandomnessProvider()
        provider.read(8)
        provider.read(16)

        metrics = provider.get_status().metrics

        assert metrics["total_reads"] == 2
        assert metrics["total_bytes"] == 24

    def test_probe(self):
        SystemRandomnessProvider().probe()

    def test_probe_short_read(self):
        with pytest.raises(RandomnessUnavailableError):
            ShortProvider().probe()

    def test_os_failure_is_wrapped(self, monkeypatch):
        """os.urandom hatası RandomnessUnavailableError olur"""
        def broken(length):
            raise NotImplementedError("kaynak yok")

        monkeypatch.setattr(os, "urandom", broken)
        provider = SystemRandomnessProvider()

        with pytest.raises(RandomnessUnavailableError) as exc_info:
            provider.read(4)
        assert exc_info.value.code == "RND001"

    def test_pickle(self):
        """Worker process'lere geçirilebilmeli"""
        provider = SystemRandomnessProvider()
        provider.read(4)

        restored = pickle.loads(pickle.dumps(provider))

        assert restored.get_status().metrics["total_bytes"] == 4
        assert len(restored.read(4)) == 4

"""
Komut Satırı Testleri
"""

import io
import json

import pytest

from prime_generator import PrimeRecord, PrimalityTester
from prime_generator.main import main, format_elapsed, check_bits, load_config_from_file, ConsoleSink
from prime_generator.core.enums import WorkerMode


class TestArguments:
    """Argüman doğrulama"""

    def test_help(self, capsys):
        assert main(["help"]) == 1
        out = capsys.readouterr().out
        assert "Usage:" in out
        assert "multiple of 8" in out

    @pytest.mark.parametrize("bits", ["33", "24", "0", "-32"])
    def test_invalid_bits(self, capsys, bits):
        assert main([bits]) == 1
        assert "is not divisible by 8 or at least 32" in capsys.readouterr().out

    def test_bits_not_a_number(self, capsys):
        assert main(["abc"]) == 1
        assert "'abc' is not a number" in capsys.readouterr().out

    def test_count_less_than_one(self, capsys):
        assert main(["32", "0"]) == 1
        assert "0 is less than 1" in capsys.readouterr().out

    def test_count_not_a_number(self, capsys):
        assert main(["32", "x"]) == 1
        assert "'x' is not a number" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [[], ["32", "2", "3"], ["--threads"]])
    def test_incorrect_amount_of_arguments(self, capsys, argv):
        assert main(argv) == 1
        out = capsys.readouterr().out
        assert out.startswith("Usage:")
        assert "Error: Incorrect amount of arguments" in out

    def test_invalid_worker_count(self, capsys):
        assert main(["32", "--threads", "--workers", "0"]) == 1

    @pytest.mark.parametrize("bits,expected", [(32, True), (40, True), (1024, True), (31, False), (16, False)])
    def test_check_bits(self, bits, expected):
        assert check_bits(bits) is expected


class TestRun:
    """Uçtan uca çalıştırma (thread modu)"""

    def test_generate_two_primes(self, capsys):
        assert main(["32", "2", "--threads", "--workers", "2"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "BitLength: 32 bits"
        assert lines[1].startswith("1: ")
        assert lines[2] == ""
        assert lines[3].startswith("2: ")
        assert lines[4].startswith("Time to Generate: ")

        tester = PrimalityTester()
        for line in (lines[1], lines[3]):
            value = int(line.split(": ")[1])
            assert 0 <= value < 2 ** 32
            assert tester.is_probably_prime(value)

    def test_config_file(self, tmp_path, capsys):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"worker_count": 1, "worker_mode": "thread", "witnesses": 5}))

        assert main(["40", "--config", str(config_path)]) == 0
        assert "1: " in capsys.readouterr().out


class TestHelpers:
    """Yardımcı fonksiyonlar"""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00:00.00"),
        (0.5, "00:00:00.500"),
        (3723.5, "01:02:03.500"),
    ])
    def test_format_elapsed(self, seconds, expected):
        assert format_elapsed(seconds) == expected

    def test_console_sink(self):
        stream = io.StringIO()
        sink = ConsoleSink(stream)

        sink(PrimeRecord(1, 97))
        sink(PrimeRecord(2, 89))

        assert stream.getvalue() == "1: 97\n\n2: 89\n"

    def test_load_config(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"worker_mode": "thread", "delivery_order": "discovery"}))

        config = load_config_from_file(str(config_path))

        assert config.worker_mode == WorkerMode.THREAD
        assert config.log_level == "WARNING"

    def test_load_config_missing(self, tmp_path):
        assert load_config_from_file(str(tmp_path / "yok.json")) is None

    def test_load_config_invalid(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"worker_count": 0}))

        assert load_config_from_file(str(config_path)) is None

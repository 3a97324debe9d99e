#!/usr/bin/env python3
"""
Prime Generator - Ana Giriş Noktası

Kullanım:
    python -m prime_generator.main <bits> [count]
    python -m prime_generator.main 1024 5 --workers 4
    python -m prime_generator.main 256 --config config.json
"""

import argparse
import json
import sys
import time
from typing import List, Optional

from .config import SearchConfig
from .core.enums import WorkerMode, DeliveryOrder
from .core.exceptions import PrimeGeneratorError
from .search.coordinator import SearchCoordinator
from .search.record import PrimeRecord

USAGE = "Usage: python -m prime_generator.main <bits> <count=1>"
HELP_TEXT = (
    USAGE +
    "\n- bits - the number of bits of the prime number, this must be a"
    "\n  multiple of 8, and at least 32 bits."
    "\n- count - the number of prime numbers to generate, defaults to 1"
)

MIN_BITS = 32


class ConsoleSink:
    """
    Kayıtları stdout'a yazar

    İlk kayıttan sonraki her kayıt bir boş satırla ayrılır.
    """

    def __init__(self, stream=None):
        self._stream = stream or sys.stdout
        self._written = 0

    def __call__(self, record: PrimeRecord):
        if self._written:
            self._stream.write("\n")
        self._stream.write(f"{record.index}: {record.value}\n")
        self._stream.flush()
        self._written += 1


def format_elapsed(seconds: float) -> str:
    """Süreyi HH:MM:SS.ms biçiminde döndür"""
    total_ms = int(seconds * 1000)
    hours, rest = divmod(total_ms, 3600 * 1000)
    minutes, rest = divmod(rest, 60 * 1000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{millis:02d}"


def parse_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def check_bits(bits: int) -> bool:
    """bits 8'in katı ve en az 32 olmalı"""
    return bits % 8 == 0 and bits >= MIN_BITS


def load_config_from_file(config_path: str) -> Optional[SearchConfig]:
    """JSON dosyasından config yükle"""
    try:
        with open(config_path, 'r') as f:
            data = json.load(f)

        return SearchConfig(
            worker_count=data.get("worker_count", None),
            worker_mode=data.get("worker_mode", "process"),
            witnesses=data.get("witnesses", 10),
            delivery_order=data.get("delivery_order", "index"),
            log_level=data.get("log_level", "WARNING"),
            result_poll_timeout=data.get("result_poll_timeout", 0.1),
            shutdown_timeout=data.get("shutdown_timeout", 5.0)
        )

    except (OSError, ValueError, TypeError, AttributeError) as e:
        print(f"Config yükleme hatası: {e}", file=sys.stderr)
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prime-generator",
        description="Paralel Miller-Rabin ile büyük olası asal sayılar üretir",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Örnekler:
  # 32 bit tek asal
  python -m prime_generator.main 32

  # 1024 bit 5 asal, 4 process ile
  python -m prime_generator.main 1024 5 --workers 4

  # Config dosyası ile
  python -m prime_generator.main 512 --config config.json
        """
    )

    parser.add_argument('bits', nargs='?', help='Asal sayının bit uzunluğu (8\'in katı, en az 32) veya "help"')
    parser.add_argument('count', nargs='?', help='Üretilecek asal sayısı (varsayılan: 1)')
    parser.add_argument('extra', nargs='*', metavar='...', help='Fazla argüman kabul edilmez (hata verir)')

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Config dosyası yolu (JSON)'
    )

    parser.add_argument(
        '--workers', '-w',
        type=int,
        help='Worker sayısı (varsayılan: kullanılabilir çekirdek sayısı)'
    )

    parser.add_argument(
        '--threads',
        action='store_true',
        help='Process yerine thread kullan'
    )

    parser.add_argument(
        '--witnesses',
        type=int,
        help='Miller-Rabin tur sayısı (varsayılan: 10)'
    )

    parser.add_argument(
        '--discovery-order',
        action='store_true',
        help='Kayıtları index sırasını beklemeden bulundukları anda yaz'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Log seviyesi (varsayılan: WARNING)'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Ana fonksiyon"""
    args = build_parser().parse_args(argv)

    if args.bits is None or args.extra:
        print(f"{USAGE}\n Error: Incorrect amount of arguments")
        return 1

    if args.bits == "help" and args.count is None:
        print(HELP_TEXT)
        return 1

    count = 1
    if args.count is not None:
        count = parse_int(args.count)
        if count is None:
            print(f"{USAGE}\n Error: '{args.count}' is not a number")
            return 1
        if count < 1:
            print(f"{USAGE}\n Error: {count} is less than 1")
            return 1

    bits = parse_int(args.bits)
    if bits is None:
        print(f"{USAGE}\n Error: '{args.bits}' is not a number")
        return 1
    if not check_bits(bits):
        print(f"Error: {bits} is not divisible by 8 or at least {MIN_BITS}")
        return 1

    # Config yükle
    if args.config:
        config = load_config_from_file(args.config)
        if not config:
            return 1
    else:
        config = SearchConfig(log_level="WARNING")

    # Komut satırı argümanları ile config'i güncelle
    try:
        if args.workers is not None:
            config.worker_count = args.workers
        if args.threads:
            config.worker_mode = WorkerMode.THREAD
        if args.witnesses is not None:
            config.witnesses = args.witnesses
        if args.discovery_order:
            config.delivery_order = DeliveryOrder.DISCOVERY
        if args.log_level:
            config.log_level = args.log_level
        config.__post_init__()
    except ValueError as e:
        print(f"{USAGE}\n Error: {e}")
        return 1

    coordinator = SearchCoordinator(config)

    print(f"BitLength: {bits} bits")
    started = time.perf_counter()
    try:
        coordinator.find_primes(bits // 8, count, sink=ConsoleSink())
    except PrimeGeneratorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nİptal edildi", file=sys.stderr)
        return 130
    elapsed = time.perf_counter() - started

    print(f"Time to Generate: {format_elapsed(elapsed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())


import sys
import time
from pathlib import Path

# Proje root'unu path'e ekle
sys.path.insert(0, str(Path(__file__).parent.parent))

from prime_generator import SearchCoordinator, SearchConfig, WorkerMode
from prime_generator.config import available_cpu_count


def measure(worker_count: int, byte_length: int, count: int) -> float:
    config = SearchConfig(
        worker_count=worker_count,
        worker_mode=WorkerMode.PROCESS,
        log_level="WARNING"
    )
    coordinator = SearchCoordinator(config)

    started = time.perf_counter()
    coordinator.find_primes(byte_length, count)
    elapsed = time.perf_counter() - started

    tested = coordinator.get_status().metrics["tested"]
    print(f"   Workers: {worker_count:2d} | Süre: {elapsed:7.2f}s | "
          f"Aday: {tested:7d} | Aday/s: {tested / elapsed:9.0f}")
    return elapsed


def run_scaling_test(bits: int = 1024, count: int = 8):
    print(f"🚀 Worker Ölçekleme Testi Başlıyor ({bits} bit, {count} asal)...")

    max_workers = available_cpu_count()
    worker_counts = sorted({1, 2, max(1, max_workers // 2), max_workers})

    results = {}
    for worker_count in worker_counts:
        results[worker_count] = measure(worker_count, bits // 8, count)

    baseline = results[worker_counts[0]]
    print("\n📈 Hızlanma:")
    for worker_count, elapsed in results.items():
        print(f"   {worker_count:2d} worker: {baseline / elapsed:.2f}x")


if __name__ == "__main__":
    run_scaling_test()

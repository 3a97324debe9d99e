#!/usr/bin/env python3
"""
Basit Kullanım Örneği - Prime Generator

Bu örnek, Prime Generator'ın temel kullanımını gösterir:
- Coordinator oluşturma
- Sink ile asal arama
- Durum bilgisini okuma
"""

import sys
import multiprocessing
from pathlib import Path

# Multiprocessing için gerekli
if __name__ == '__main__':
    multiprocessing.set_start_method('spawn', force=True)

# Proje root'unu path'e ekle
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from prime_generator import SearchCoordinator, SearchConfig, PrimeRecord, PrimeGeneratorError


def print_record(record: PrimeRecord):
    print(f"   #{record.index} ({record.bit_length} bit): {record.value}")


def main():
    """Basit kullanım örneği"""
    print("=" * 60)
    print("BASİT KULLANIM ÖRNEĞİ")
    print("=" * 60)

    # 1. Config oluştur (varsayılan ayarlar)
    config = SearchConfig(log_level="WARNING")
    print(f"\n📊 Config:")
    print(f"   Workers: {config.worker_count} ({config.worker_mode.value})")
    print(f"   Witnesses: {config.witnesses}")

    # 2. Coordinator oluştur
    coordinator = SearchCoordinator(config)

    try:
        # 3. 512 bit 3 asal bul
        print("\n🔎 512 bit 3 asal aranıyor...")
        coordinator.find_primes(byte_length=64, count=3, sink=print_record)

        # 4. Durum
        metrics = coordinator.get_status().metrics
        print(f"\n✅ Bitti: {metrics['tested']} aday test edildi, "
              f"{metrics['overshoot']} fazla asal atıldı")

    except PrimeGeneratorError as e:
        print(f"\n❌ Hata: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Synthetic customer data.

``seed_pelanggan`` fills an empty customer table with random names and
addresses built from the lists below.  Every part of every record is
drawn independently, so duplicates are possible.
"""

import logging
import random
import sqlite3
from typing import Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

NAMA_DEPAN = [
    "Ahmad", "Budi", "Citra", "Dewi", "Eko", "Fitri", "Gunawan", "Hana", "Irfan", "Joko",
    "Kartika", "Lukman", "Maya", "Nadia", "Omar", "Putri", "Qori", "Rahmat", "Siti", "Taufik",
    "Umi", "Vina", "Wahyu", "Xena", "Yusuf", "Zahra", "Andika", "Bella", "Chandra", "Diana",
]
NAMA_BELAKANG = [
    "Pratama", "Wijaya", "Santoso", "Kusuma", "Hidayat", "Rahman", "Saputra", "Putra", "Lestari",
    "Wati", "Permana", "Sutanto", "Hartono", "Susanto", "Nugroho", "Setiawan", "Kurniawan",
    "Utama", "Maulana", "Hakim",
]
KOTA = [
    "Jakarta", "Surabaya", "Bandung", "Medan", "Semarang", "Makassar", "Palembang", "Tangerang",
    "Depok", "Bekasi", "Malang", "Yogyakarta", "Solo", "Denpasar", "Bogor",
]
JALAN = [
    "Jl. Merdeka", "Jl. Sudirman", "Jl. Gatot Subroto", "Jl. Ahmad Yani", "Jl. Diponegoro",
    "Jl. Pahlawan", "Jl. Kartini", "Jl. Veteran", "Jl. Asia Afrika", "Jl. Imam Bonjol",
]

MAX_HOUSE_NUMBER = 200


def random_pelanggan(rng: random.Random) -> Tuple[str, str]:
    """Return one random ``(nama, alamat)`` pair."""
    nama = f"{rng.choice(NAMA_DEPAN)} {rng.choice(NAMA_BELAKANG)}"
    alamat = f"{rng.choice(JALAN)} No. {rng.randint(1, MAX_HOUSE_NUMBER)}, {rng.choice(KOTA)}"
    return nama, alamat


def _generate(count: int, rng: random.Random) -> Iterator[Tuple[str, str]]:
    for _ in range(count):
        yield random_pelanggan(rng)


def seed_pelanggan(
    conn: sqlite3.Connection, count: int = 1000, rng: Optional[random.Random] = None
) -> int:
    """Insert ``count`` random customers in a single transaction.

    Returns the number of inserted rows.
    """
    rng = rng or random.Random()
    logger.info("Generating %d dummy data...", count)
    with conn:
        conn.executemany(
            "INSERT INTO pelanggan (nama, alamat) VALUES (?, ?)",
            _generate(count, rng),
        )
    logger.info("%d dummy data created!", count)
    return count

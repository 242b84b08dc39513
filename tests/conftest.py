"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from dpr_api.data.data_store import DataStore
from dpr_api.models import AnggotaDPR

# Member 2 carries anggota=1, which collides with member 1's primary key.
MEMBERS = [
    dict(id=1, anggota=101, nama="Ahmad Sahroni", fraksi="Fraksi Partai NasDem", partai="NasDem",
         dapil="DKI Jakarta III", ttl="Jakarta, 8 Agustus 1977", agama="Islam", kota_lahir="Jakarta",
         usia=47, pendidikan_terakhir="S2", is_kader="1", is_dewan="1"),
    dict(id=2, anggota=1, nama="Hj. Siti Nurbaya", fraksi="Fraksi Partai Golkar", partai="Golkar",
         dapil="Jawa Barat V", ttl="Bandung, 1 Mei 1966", agama="Islam", kota_lahir="Bandung",
         usia=58, pendidikan_terakhir="S3", is_kader="0", is_dewan="1"),
    dict(id=3, anggota=103, nama="Budi Santoso", fraksi="Fraksi PDI Perjuangan", partai="PDI-P",
         dapil="Jawa Tengah IV", ttl="Surakarta, 2 Juni 1995", agama="Kristen", kota_lahir="Surakarta",
         usia=29, pendidikan_terakhir="S1", is_kader="1", is_dewan="0"),
    dict(id=4, anggota=104, nama="Dewi Lestari", fraksi="Fraksi PDI Perjuangan", partai="PDI-P",
         dapil="Bali", ttl="Denpasar, 3 Maret 1989", agama="Hindu", kota_lahir="Denpasar",
         usia=35, pendidikan_terakhir="S2", is_kader="0", is_dewan="0"),
    dict(id=5, anggota=105, nama="Muhammad Rizal", fraksi="Fraksi Partai Golkar", partai="Golkar",
         dapil="Sulawesi Selatan I", ttl="Makassar, 4 April 1959", agama="Islam", kota_lahir="Makassar",
         usia=65, pendidikan_terakhir="S1", is_kader="1", is_dewan="0"),
    dict(id=6, anggota=106, nama="Yohanes Kurniawan", fraksi="Fraksi Partai Demokrat", partai="Demokrat",
         dapil="Nusa Tenggara Timur II", ttl=None, agama=None, kota_lahir="Kupang",
         usia=None, pendidikan_terakhir="", is_kader="0", is_dewan="0"),
]


def seed(data_store, members):
    with data_store.session_scope() as session:
        session.add_all([AnggotaDPR(**member) for member in members])
        session.commit()


@pytest.fixture
def empty_store(tmp_path):
    """DataStore backed by a fresh SQLite file with the schema but no rows."""
    data_store = DataStore(db_url=f"sqlite:///{tmp_path / 'dpr_test.db'}")
    try:
        yield data_store
    finally:
        data_store.close()


@pytest.fixture
def store(empty_store):
    """DataStore seeded with MEMBERS."""
    seed(empty_store, MEMBERS)
    return empty_store


@pytest.fixture
def client(store):
    """
    TestClient wired to the seeded store.

    The client is not used as a context manager, so the application lifespan
    (which would open the configured database) does not run.
    """
    from dpr_api.api.app import app
    from dpr_api.api.dependencies import get_data_store, get_optional_data_store

    app.dependency_overrides[get_data_store] = lambda: store
    app.dependency_overrides[get_optional_data_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

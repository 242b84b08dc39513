"""
Member record model: one row per DPR member in the ``anggota_dpr`` table.
"""

from sqlalchemy import Column, Index, Integer, Text

from .base import BaseModel


class AnggotaDPR(BaseModel):
    """
    A legislative member record plus its derived attributes.

    Rows are written by an external ingestion job; the API only reads them.
    ``is_kader`` and ``is_dewan`` are stored as the strings '1'/'0'.
    """
    __tablename__ = "anggota_dpr"

    id = Column(Integer, primary_key=True, autoincrement=True)
    anggota = Column(Integer, unique=True)
    link_foto = Column(Text)
    link_profil = Column(Text)
    nama = Column(Text, nullable=False)
    fraksi = Column(Text)
    dapil = Column(Text)
    akd_clean = Column(Text)
    ttl = Column(Text)
    agama = Column(Text)
    pendidikan = Column(Text)
    pekerjaan = Column(Text)
    organisasi = Column(Text)
    kota_lahir = Column(Text)
    usia = Column(Integer)
    pendidikan_terakhir = Column(Text)
    is_kader = Column(Text, default="0", server_default="0")
    is_dewan = Column(Text, default="0", server_default="0")
    usia_kategori = Column(Text)
    rank_partai = Column(Integer)
    partai = Column(Text)
    pendidikan_clean = Column(Text)
    organisasi_clean = Column(Text)

    __table_args__ = (
        Index("idx_nama", "nama"),
        Index("idx_fraksi", "fraksi"),
        Index("idx_partai", "partai"),
        Index("idx_dapil", "dapil"),
        Index("idx_pendidikan_terakhir", "pendidikan_terakhir"),
        Index("idx_agama", "agama"),
        Index("idx_usia", "usia"),
        # Covers the OR-combined free-text search columns
        Index("idx_composite_search", "nama", "fraksi", "partai", "dapil"),
    )

    def __repr__(self) -> str:
        return f"<AnggotaDPR id={self.id} nama={self.nama!r}>"


# Columns exposed by the sort allow-list, keyed by their wire name
SORTABLE_COLUMNS = {
    "nama": AnggotaDPR.nama,
    "fraksi": AnggotaDPR.fraksi,
    "partai": AnggotaDPR.partai,
    "usia": AnggotaDPR.usia,
    "created_at": AnggotaDPR.created_at,
}

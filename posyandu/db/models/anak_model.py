import enum

from sqlalchemy import Column, Date, DateTime, Enum, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from posyandu.db.base import Base


class JenisKelamin(str, enum.Enum):
    L = "L"
    P = "P"


class Anak(Base):
    __tablename__ = "anak"

    id = Column(Integer, primary_key=True, index=True)
    id_ibu = Column(Integer, ForeignKey("ibu.id", ondelete="RESTRICT"), nullable=False)
    nama_anak = Column(String(100), nullable=False)
    nik_anak = Column(String(16), unique=True, nullable=True)
    tanggal_lahir = Column(Date, nullable=False)
    jenis_kelamin = Column(
        Enum(JenisKelamin, name="jeniskelamin", create_type=True),
        nullable=False,
    )
    anak_ke = Column(Integer, nullable=True)
    berat_lahir_kg = Column(Float, nullable=True)
    tinggi_lahir_cm = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    ibu = relationship("Ibu", back_populates="anak")
    perkembangan = relationship("Perkembangan", back_populates="anak")
    riwayat_imunisasi = relationship("RiwayatImunisasi", back_populates="anak")

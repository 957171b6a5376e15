from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from posyandu.db.base import Base


class MasterImunisasi(Base):
    __tablename__ = "master_imunisasi"
    __table_args__ = (
        CheckConstraint("usia_ideal_bulan >= 0", name="master_imunisasi_usia_ideal_bulan_check"),
    )

    id = Column(Integer, primary_key=True, index=True)
    nama_imunisasi = Column(String(100), unique=True, nullable=False)
    usia_ideal_bulan = Column(Integer, nullable=False, default=0)
    deskripsi = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    riwayat = relationship("RiwayatImunisasi", back_populates="master_imunisasi")


class RiwayatImunisasi(Base):
    __tablename__ = "riwayat_imunisasi"

    id = Column(Integer, primary_key=True, index=True)
    id_anak = Column(Integer, ForeignKey("anak.id", ondelete="RESTRICT"), nullable=False)
    id_master_imunisasi = Column(
        Integer, ForeignKey("master_imunisasi.id", ondelete="RESTRICT"), nullable=False
    )
    tanggal_imunisasi = Column(Date, nullable=False)
    catatan = Column(Text, nullable=True)
    id_kader_pencatat = Column(Integer, ForeignKey("kader.id", ondelete="RESTRICT"), nullable=False)
    id_kader_updater = Column(Integer, ForeignKey("kader.id", ondelete="RESTRICT"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    anak = relationship("Anak", back_populates="riwayat_imunisasi")
    master_imunisasi = relationship("MasterImunisasi", back_populates="riwayat")
    kader_pencatat = relationship("Kader", foreign_keys=[id_kader_pencatat])
    kader_updater = relationship("Kader", foreign_keys=[id_kader_updater])

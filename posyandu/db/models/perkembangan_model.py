from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from posyandu.db.base import Base


class Perkembangan(Base):
    __tablename__ = "perkembangan"

    id = Column(Integer, primary_key=True, index=True)
    id_anak = Column(Integer, ForeignKey("anak.id", ondelete="RESTRICT"), nullable=False)
    tanggal_pemeriksaan = Column(Date, nullable=False)
    bb_kg = Column(Float, nullable=True, doc="Berat badan (kg)")
    tb_cm = Column(Float, nullable=True, doc="Tinggi badan (cm)")
    lk_cm = Column(Float, nullable=True, doc="Lingkar kepala (cm)")
    ll_cm = Column(Float, nullable=True, doc="Lingkar lengan atas (cm)")
    status_gizi = Column(String(50), nullable=True)
    saran = Column(Text, nullable=True)
    id_kader_pencatat = Column(Integer, ForeignKey("kader.id", ondelete="RESTRICT"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    anak = relationship("Anak", back_populates="perkembangan")
    kader_pencatat = relationship("Kader")

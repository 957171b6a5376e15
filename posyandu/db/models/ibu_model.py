from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from posyandu.db.base import Base


class Ibu(Base):
    __tablename__ = "ibu"

    id = Column(Integer, primary_key=True, index=True)
    nama_lengkap = Column(String(100), nullable=False)
    nik = Column(String(16), unique=True, nullable=False)
    no_telepon = Column(String(20), nullable=True)
    alamat = Column(Text, nullable=True)
    id_kader_pendaftar = Column(Integer, ForeignKey("kader.id", ondelete="RESTRICT"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    kader_pendaftar = relationship("Kader", back_populates="ibu_terdaftar")
    anak = relationship("Anak", back_populates="ibu")

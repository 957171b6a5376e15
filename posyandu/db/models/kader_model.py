from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from posyandu.db.base import Base


class Kader(Base):
    __tablename__ = "kader"

    id = Column(Integer, primary_key=True, index=True)
    nama_lengkap = Column(String(100), nullable=False)
    nik = Column(String(16), unique=True, nullable=True)
    no_telepon = Column(String(20), nullable=True)
    username = Column(String(50), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    ibu_terdaftar = relationship("Ibu", back_populates="kader_pendaftar")

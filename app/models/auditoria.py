from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.core.database import Base


# Registro de cambios. No tiene llaves foráneas y nadie lo llena automáticamente.
class ChangeLog(Base):
    __tablename__ = "ChangeLog"

    id = Column(Integer, primary_key=True, index=True)
    table_name = Column(String(100))
    id_table = Column(Integer)
    old_values = Column(Text)
    new_values = Column(Text)
    action = Column(String(20), nullable=False)     # Ej: INSERT, UPDATE, DELETE
    user_name = Column(String(50))
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

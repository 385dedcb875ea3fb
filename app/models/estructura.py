from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.mixins import AuditoriaMixin, TimestampMixin


# Jerarquía organizacional: Regional -> Centro -> Sede

class Regional(Base, AuditoriaMixin):
    __tablename__ = "Regional"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    code_regional = Column(String(50))
    description = Column(String(255))
    address = Column(String(150))

    centers = relationship("Center", back_populates="regional")


class Center(Base, AuditoriaMixin):
    __tablename__ = "Center"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    code_center = Column(String(50))
    address = Column(String(150))
    regional_id = Column(Integer, ForeignKey("Regional.id"), nullable=False)

    regional = relationship("Regional", back_populates="centers")
    sedes = relationship("Sede", back_populates="center")


class Sede(Base, AuditoriaMixin):
    __tablename__ = "Sede"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    code_sede = Column(String(50))
    address = Column(String(150))
    phone_sede = Column(String(20))
    email_contact = Column(String(100))
    center_id = Column(Integer, ForeignKey("Center.id"), nullable=False)

    center = relationship("Center", back_populates="sedes")
    user_sedes = relationship("UserSede", back_populates="sede")


# Pivote User <-> Sede
class UserSede(Base, TimestampMixin):
    __tablename__ = "UserSede"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("User.id"), nullable=False)
    sede_id = Column(Integer, ForeignKey("Sede.id"), nullable=False)
    status_procedure = Column(String(50))

    user = relationship("app.models.seguridad.User", back_populates="user_sedes")
    sede = relationship("Sede", back_populates="user_sedes")

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.mixins import AuditoriaMixin, TimestampMixin


# --- 1. PERSONA (datos personales) ---
class Person(Base, AuditoriaMixin):
    __tablename__ = "Person"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    first_name = Column(String(50))
    second_name = Column(String(50))
    first_last_name = Column(String(50))
    second_last_name = Column(String(50))
    phone_number = Column(String(20))
    email = Column(String(100))
    type_identification = Column(String(20))
    number_identification = Column(Integer)
    signing = Column(Boolean, default=False, nullable=False)

    # Una persona tiene como máximo una cuenta de usuario
    user = relationship("User", back_populates="person", uselist=False)


# --- 2. USUARIO (credenciales) ---
class User(Base, AuditoriaMixin):
    __tablename__ = "User"

    id = Column(Integer, primary_key=True, index=True)
    person_id = Column(Integer, ForeignKey("Person.id"), unique=True, nullable=False)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password = Column(String(200), nullable=False)  # Hash, nunca texto plano

    person = relationship("Person", back_populates="user")
    aprendiz = relationship("app.models.formacion.Aprendiz", back_populates="user", uselist=False)
    instructor = relationship("app.models.formacion.Instructor", back_populates="user", uselist=False)
    user_roles = relationship("UserRol", back_populates="user")
    user_sedes = relationship("app.models.estructura.UserSede", back_populates="user")


# --- 3. ROL ---
class Rol(Base, AuditoriaMixin):
    __tablename__ = "Rol"

    id = Column(Integer, primary_key=True, index=True)
    type_rol = Column(String(50), nullable=False)
    description = Column(String(255))

    user_roles = relationship("UserRol", back_populates="rol")
    rol_forms = relationship("RolForm", back_populates="rol")


# Pivote User <-> Rol
class UserRol(Base, TimestampMixin):
    __tablename__ = "UserRol"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("User.id"), nullable=False)
    rol_id = Column(Integer, ForeignKey("Rol.id"), nullable=False)

    user = relationship("User", back_populates="user_roles")
    rol = relationship("Rol", back_populates="user_roles")


# --- 4. FORMULARIO ---
class Form(Base, AuditoriaMixin):
    __tablename__ = "Form"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(255))
    question = Column(Text)
    type_question = Column(String(50))
    answer = Column(Text)

    rol_forms = relationship("RolForm", back_populates="form")
    form_modules = relationship("FormModule", back_populates="form")


# Pivote Rol <-> Form, con el permiso otorgado
class RolForm(Base, TimestampMixin):
    __tablename__ = "RolForm"

    id = Column(Integer, primary_key=True, index=True)
    rol_id = Column(Integer, ForeignKey("Rol.id"), nullable=False)
    form_id = Column(Integer, ForeignKey("Form.id"), nullable=False)
    permission = Column(String(20))  # Create, Read, Update, Delete

    rol = relationship("Rol", back_populates="rol_forms")
    form = relationship("Form", back_populates="rol_forms")


# --- 5. MÓDULO ---
class Module(Base, AuditoriaMixin):
    __tablename__ = "Module"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(50))
    name = Column(String(100), nullable=False)
    description = Column(String(255))

    form_modules = relationship("FormModule", back_populates="module")


# Pivote Form <-> Module
class FormModule(Base, TimestampMixin):
    __tablename__ = "FormModule"

    id = Column(Integer, primary_key=True, index=True)
    form_id = Column(Integer, ForeignKey("Form.id"), nullable=False)
    module_id = Column(Integer, ForeignKey("Module.id"), nullable=False)
    status_procedure = Column(String(50), nullable=False)

    form = relationship("Form", back_populates="form_modules")
    module = relationship("Module", back_populates="form_modules")

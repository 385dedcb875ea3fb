from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.mixins import AuditoriaMixin, TimestampMixin


# --- 1. PERFILES (1:1 con User) ---
class Aprendiz(Base, AuditoriaMixin):
    __tablename__ = "Aprendiz"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("User.id"), unique=True, nullable=False)
    previous_program = Column(String(100))

    user = relationship("app.models.seguridad.User", back_populates="aprendiz")
    aprendiz_programs = relationship("AprendizProgram", back_populates="aprendiz")
    procesos = relationship("AprendizProcessInstructor", back_populates="aprendiz")


class Instructor(Base, AuditoriaMixin):
    __tablename__ = "Instructor"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("User.id"), unique=True, nullable=False)

    user = relationship("app.models.seguridad.User", back_populates="instructor")
    instructor_programs = relationship("InstructorProgram", back_populates="instructor")
    procesos = relationship("AprendizProcessInstructor", back_populates="instructor")


# --- 2. PROGRAMAS DE FORMACIÓN ---
class Program(Base, AuditoriaMixin):
    __tablename__ = "Program"

    id = Column(Integer, primary_key=True, index=True)
    code_program = Column(Numeric(18, 2, asdecimal=False))
    name = Column(String(100), nullable=False)
    type_program = Column(String(50))
    description = Column(String(255))

    aprendiz_programs = relationship("AprendizProgram", back_populates="program")
    instructor_programs = relationship("InstructorProgram", back_populates="program")


class AprendizProgram(Base, TimestampMixin):
    __tablename__ = "AprendizProgram"

    id = Column(Integer, primary_key=True, index=True)
    aprendiz_id = Column(Integer, ForeignKey("Aprendiz.id"), nullable=False)
    program_id = Column(Integer, ForeignKey("Program.id"), nullable=False)

    aprendiz = relationship("Aprendiz", back_populates="aprendiz_programs")
    program = relationship("Program", back_populates="aprendiz_programs")


class InstructorProgram(Base, TimestampMixin):
    __tablename__ = "InstructorProgram"

    id = Column(Integer, primary_key=True, index=True)
    instructor_id = Column(Integer, ForeignKey("Instructor.id"), nullable=False)
    program_id = Column(Integer, ForeignKey("Program.id"), nullable=False)

    instructor = relationship("Instructor", back_populates="instructor_programs")
    program = relationship("Program", back_populates="instructor_programs")


# --- 3. CATÁLOGOS DEL PROCESO DE FORMACIÓN ---
class Process(Base, AuditoriaMixin):
    __tablename__ = "Process"

    id = Column(Integer, primary_key=True, index=True)
    type_process = Column(String(50), nullable=False)
    start_aprendiz = Column(String(50))
    observation = Column(Text)

    casos = relationship("AprendizProcessInstructor", back_populates="process")


class TypeModality(Base, AuditoriaMixin):
    __tablename__ = "TypeModality"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(255))

    casos = relationship("AprendizProcessInstructor", back_populates="type_modality")


class RegisterySofia(Base, AuditoriaMixin):
    __tablename__ = "RegisterySofia"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(255))
    document = Column(String(255))

    casos = relationship("AprendizProcessInstructor", back_populates="registery_sofia")


class Concept(Base, AuditoriaMixin):
    __tablename__ = "Concept"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    observation = Column(Text)

    casos = relationship("AprendizProcessInstructor", back_populates="concept")


class Boss(Base, TimestampMixin):
    __tablename__ = "Boss"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email_boss = Column(String(100))
    phone_number_boss = Column(String(20))

    enterprises = relationship("Enterprise", back_populates="boss")


class Enterprise(Base, AuditoriaMixin):
    __tablename__ = "Enterprise"

    id = Column(Integer, primary_key=True, index=True)
    name_enterprise = Column(String(150), nullable=False)
    nit_enterprise = Column(String(30))
    observation = Column(Text)
    locate = Column(String(150))
    phone_enterprise = Column(String(20))
    email_enterprise = Column(String(100))
    boss_id = Column(Integer, ForeignKey("Boss.id"), nullable=True)

    boss = relationship("Boss", back_populates="enterprises")
    casos = relationship("AprendizProcessInstructor", back_populates="enterprise")


class State(Base, AuditoriaMixin):
    __tablename__ = "State"

    id = Column(Integer, primary_key=True, index=True)
    type_state = Column(String(50), nullable=False)
    description = Column(String(255))

    casos = relationship("AprendizProcessInstructor", back_populates="state")


class Verification(Base, AuditoriaMixin):
    __tablename__ = "Verification"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    observation = Column(Text)

    casos = relationship("AprendizProcessInstructor", back_populates="verification")


# --- 4. CASO DE FORMACIÓN (aprendiz + instructor + clasificación) ---
class AprendizProcessInstructor(Base, TimestampMixin):
    __tablename__ = "AprendizProcessInstructor"

    id = Column(Integer, primary_key=True, index=True)
    aprendiz_id = Column(Integer, ForeignKey("Aprendiz.id"), nullable=False)
    instructor_id = Column(Integer, ForeignKey("Instructor.id"), nullable=False)
    process_id = Column(Integer, ForeignKey("Process.id"), nullable=True)
    type_modality_id = Column(Integer, ForeignKey("TypeModality.id"), nullable=True)
    registery_sofia_id = Column(Integer, ForeignKey("RegisterySofia.id"), nullable=True)
    concept_id = Column(Integer, ForeignKey("Concept.id"), nullable=True)
    enterprise_id = Column(Integer, ForeignKey("Enterprise.id"), nullable=True)
    state_id = Column(Integer, ForeignKey("State.id"), nullable=True)
    verification_id = Column(Integer, ForeignKey("Verification.id"), nullable=True)

    aprendiz = relationship("Aprendiz", back_populates="procesos")
    instructor = relationship("Instructor", back_populates="procesos")
    process = relationship("Process", back_populates="casos")
    type_modality = relationship("TypeModality", back_populates="casos")
    registery_sofia = relationship("RegisterySofia", back_populates="casos")
    concept = relationship("Concept", back_populates="casos")
    enterprise = relationship("Enterprise", back_populates="casos")
    state = relationship("State", back_populates="casos")
    verification = relationship("Verification", back_populates="casos")

from typing import Optional

from app.schemas.common import EntidadDTO


# --- PERFILES ---
class AprendizDto(EntidadDTO):
    user_id: int = 0
    previous_program: Optional[str] = None
    active: bool = True


class InstructorDto(EntidadDTO):
    user_id: int = 0
    active: bool = True


# --- PROGRAMAS ---
class ProgramDto(EntidadDTO):
    code_program: Optional[float] = None
    name: Optional[str] = None
    type_program: Optional[str] = None
    description: Optional[str] = None
    active: bool = True


class AprendizProgramDto(EntidadDTO):
    aprendiz_id: int = 0
    program_id: int = 0


class InstructorProgramDto(EntidadDTO):
    instructor_id: int = 0
    program_id: int = 0


# --- CATÁLOGOS ---
class ProcessDto(EntidadDTO):
    type_process: Optional[str] = None
    start_aprendiz: Optional[str] = None
    observation: Optional[str] = None
    active: bool = True


class TypeModalityDto(EntidadDTO):
    name: Optional[str] = None
    description: Optional[str] = None
    active: bool = True


class RegisterySofiaDto(EntidadDTO):
    name: Optional[str] = None
    description: Optional[str] = None
    document: Optional[str] = None
    active: bool = True


class ConceptDto(EntidadDTO):
    name: Optional[str] = None
    observation: Optional[str] = None
    active: bool = True


class BossDto(EntidadDTO):
    name: Optional[str] = None
    email_boss: Optional[str] = None
    phone_number_boss: Optional[str] = None


class EnterpriseDto(EntidadDTO):
    name_enterprise: Optional[str] = None
    nit_enterprise: Optional[str] = None
    observation: Optional[str] = None
    locate: Optional[str] = None
    phone_enterprise: Optional[str] = None
    email_enterprise: Optional[str] = None
    boss_id: Optional[int] = None
    active: bool = True


class StateDto(EntidadDTO):
    type_state: Optional[str] = None
    description: Optional[str] = None
    active: bool = True


class VerificationDto(EntidadDTO):
    name: Optional[str] = None
    observation: Optional[str] = None
    active: bool = True


# --- CASO DE FORMACIÓN ---
class AprendizProcessInstructorDto(EntidadDTO):
    aprendiz_id: int = 0
    instructor_id: int = 0
    process_id: Optional[int] = None
    type_modality_id: Optional[int] = None
    registery_sofia_id: Optional[int] = None
    concept_id: Optional[int] = None
    enterprise_id: Optional[int] = None
    state_id: Optional[int] = None
    verification_id: Optional[int] = None

from enum import Enum
from typing import Optional

from pydantic import ConfigDict, EmailStr, Field

from app.schemas.common import EntidadDTO


# --- PERSONA ---
class PersonDto(EntidadDTO):
    name: Optional[str] = None
    first_name: Optional[str] = None
    second_name: Optional[str] = None
    first_last_name: Optional[str] = None
    second_last_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    type_identification: Optional[str] = None
    number_identification: Optional[int] = None
    signing: bool = False
    active: bool = True


# --- USUARIO ---
class UserDto(EntidadDTO):
    person_id: int = 0
    username: Optional[str] = None
    email: Optional[EmailStr] = None
    # Solo entrada: se guarda como hash y nunca se devuelve
    password: Optional[str] = Field(default=None, exclude=True)
    active: bool = True


# --- ROLES ---
class RolDto(EntidadDTO):
    type_rol: Optional[str] = None
    description: Optional[str] = None
    active: bool = True


class UserRolDto(EntidadDTO):
    user_id: int = 0
    rol_id: int = 0


# --- FORMULARIOS Y MÓDULOS ---
class FormDto(EntidadDTO):
    name: Optional[str] = None
    description: Optional[str] = None
    question: Optional[str] = None
    type_question: Optional[str] = None
    answer: Optional[str] = None
    active: bool = True


class Permiso(str, Enum):
    CREATE = "Create"
    READ = "Read"
    UPDATE = "Update"
    DELETE = "Delete"


class RolFormDto(EntidadDTO):
    rol_id: int = 0
    form_id: int = 0
    permission: Optional[Permiso] = None

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class ModuleDto(EntidadDTO):
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    active: bool = True


class FormModuleDto(EntidadDTO):
    form_id: int = 0
    module_id: int = 0
    status_procedure: Optional[str] = None

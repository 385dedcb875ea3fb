from typing import Optional

from app.schemas.common import EntidadDTO


class RegionalDto(EntidadDTO):
    name: Optional[str] = None
    code_regional: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    active: bool = True


class CenterDto(EntidadDTO):
    name: Optional[str] = None
    code_center: Optional[str] = None
    address: Optional[str] = None
    regional_id: int = 0
    active: bool = True


class SedeDto(EntidadDTO):
    name: Optional[str] = None
    code_sede: Optional[str] = None
    address: Optional[str] = None
    phone_sede: Optional[str] = None
    email_contact: Optional[str] = None
    center_id: int = 0
    active: bool = True


class UserSedeDto(EntidadDTO):
    user_id: int = 0
    sede_id: int = 0
    status_procedure: Optional[str] = None

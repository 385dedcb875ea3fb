"""
Registro de entidades.

Cada entidad del modelo se declara una sola vez con su modelo ORM, su DTO,
sus reglas de validación y las operaciones que expone. El servicio genérico,
los routers CRUD y los reportes de administración se construyen a partir de
este registro.
"""
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Dict, FrozenSet, Optional, Sequence, Type

from sqlalchemy import inspect

from app.core.security import get_password_hash
from app.models import auditoria, estructura, formacion, seguridad
from app.schemas import auditoria as auditoria_schemas
from app.schemas import estructura as estructura_schemas
from app.schemas import formacion as formacion_schemas
from app.schemas import seguridad as seguridad_schemas
from app.schemas.common import EntidadDTO, esquema_parcial
from app.services.validators import Rule, optional_id, positive_id, required_text

ALL_OPERATIONS = frozenset(
    {"get_all", "get_by_id", "create", "update", "update_partial", "soft_delete", "delete"}
)
READ_CREATE = frozenset({"get_all", "get_by_id", "create"})

# Columnas que asigna el servidor; nunca se copian desde un DTO
SERVER_FIELDS = ("id", "created_at", "updated_at", "deleted_at")

# Columnas que no salen de la API (ni en respuestas ni en exportaciones)
WRITE_ONLY_FIELDS = ("password",)


@dataclass
class EntityConfig:
    name: str                       # Nombre público: /api/{name} y mensajes de error
    label: str                      # Sustantivo en minúscula para los mensajes
    feminine: bool
    model: Type[Any]
    schema: Type[EntidadDTO]
    rules: Sequence[Rule] = ()
    operations: FrozenSet[str] = ALL_OPERATIONS
    before_write: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None

    # --- Textos ---

    @property
    def of_label(self) -> str:
        return f"de la {self.label}" if self.feminine else f"del {self.label}"

    @property
    def the_label(self) -> str:
        return f"La {self.label}" if self.feminine else f"El {self.label}"

    def participle(self, stem: str) -> str:
        """participle("actualizad") -> "actualizada" / "actualizado"."""
        return stem + ("a" if self.feminine else "o")

    # --- Estructura ---

    @cached_property
    def columns(self) -> FrozenSet[str]:
        return frozenset(c.key for c in inspect(self.model).column_attrs)

    @cached_property
    def fields(self) -> tuple:
        """Campos del DTO que se copian a la entidad."""
        return tuple(
            f for f in self.schema.model_fields
            if f in self.columns and f not in SERVER_FIELDS
        )

    @cached_property
    def partial_schema(self) -> Type[Any]:
        return esquema_parcial(self.schema)

    @property
    def supports_soft_delete(self) -> bool:
        return "active" in self.columns and "soft_delete" in self.operations

    @property
    def exported_columns(self) -> list:
        return [
            c.key for c in inspect(self.model).column_attrs
            if c.key not in WRITE_ONLY_FIELDS
        ]

    # --- Mapeo DTO <-> entidad ---

    def values(self, dto: EntidadDTO, with_id: bool = True) -> Dict[str, Any]:
        values = {field: getattr(dto, field) for field in self.fields}
        if with_id and dto.id:
            values["id"] = dto.id
        return values

    def to_entity(self, dto: EntidadDTO):
        return self.model(**self.values(dto))

    def to_dto(self, entity) -> EntidadDTO:
        return self.schema.model_validate(entity)


def _hash_password(values: Dict[str, Any]) -> Dict[str, Any]:
    if values.get("password"):
        values["password"] = get_password_hash(values["password"])
    else:
        values.pop("password", None)
    return values


ENTITIES = [
    # --- Seguridad ---
    EntityConfig(
        "Person", "persona", True, seguridad.Person, seguridad_schemas.PersonDto,
        rules=[required_text("name", "El nombre de la persona es obligatorio")],
    ),
    EntityConfig(
        "User", "usuario", False, seguridad.User, seguridad_schemas.UserDto,
        rules=[
            required_text("username", "El nombre de usuario es obligatorio"),
            required_text("email", "El email del usuario es obligatorio"),
            required_text("password", "La contraseña del usuario es obligatoria"),
            positive_id("person_id", "El person_id del usuario es obligatorio y debe ser mayor que cero"),
        ],
        before_write=_hash_password,
    ),
    EntityConfig(
        "Rol", "rol", False, seguridad.Rol, seguridad_schemas.RolDto,
        rules=[required_text("type_rol", "El type_rol del rol es obligatorio")],
    ),
    EntityConfig(
        "UserRol", "asignación de rol", True, seguridad.UserRol, seguridad_schemas.UserRolDto,
        rules=[
            positive_id("user_id", "El user_id es obligatorio y debe ser mayor que cero"),
            positive_id("rol_id", "El rol_id es obligatorio y debe ser mayor que cero"),
        ],
    ),
    EntityConfig(
        "Form", "formulario", False, seguridad.Form, seguridad_schemas.FormDto,
        rules=[required_text("name", "El nombre del formulario es obligatorio")],
    ),
    EntityConfig(
        "RolForm", "relación rol-formulario", True, seguridad.RolForm, seguridad_schemas.RolFormDto,
        rules=[
            positive_id("rol_id", "El ID del rol debe ser mayor que cero"),
            positive_id("form_id", "El ID del formulario debe ser mayor que cero"),
        ],
    ),
    EntityConfig(
        "Module", "módulo", False, seguridad.Module, seguridad_schemas.ModuleDto,
        rules=[required_text("name", "El nombre del módulo es obligatorio")],
    ),
    EntityConfig(
        "FormModule", "relación formulario-módulo", True, seguridad.FormModule,
        seguridad_schemas.FormModuleDto,
        rules=[
            required_text("status_procedure", "El status_procedure es obligatorio"),
            positive_id("form_id", "El ID del formulario debe ser mayor que cero"),
            positive_id("module_id", "El ID del módulo debe ser mayor que cero"),
        ],
    ),
    # --- Estructura organizacional ---
    EntityConfig(
        "Regional", "regional", True, estructura.Regional, estructura_schemas.RegionalDto,
        rules=[required_text("name", "El nombre de la regional es obligatorio")],
    ),
    EntityConfig(
        "Center", "centro", False, estructura.Center, estructura_schemas.CenterDto,
        rules=[
            required_text("name", "El nombre del centro es obligatorio"),
            positive_id("regional_id", "El regional_id del centro debe ser mayor que cero"),
        ],
    ),
    EntityConfig(
        "Sede", "sede", True, estructura.Sede, estructura_schemas.SedeDto,
        rules=[
            required_text("name", "El nombre de la sede es obligatorio"),
            positive_id("center_id", "El center_id de la sede debe ser mayor que cero"),
        ],
    ),
    EntityConfig(
        "UserSede", "sede de usuario", True, estructura.UserSede, estructura_schemas.UserSedeDto,
        rules=[
            positive_id("user_id", "El user_id de la sede de usuario es obligatorio y debe ser mayor a cero"),
            positive_id("sede_id", "El sede_id de la sede de usuario es obligatorio y debe ser mayor a cero"),
        ],
    ),
    # --- Formación ---
    EntityConfig(
        "Aprendiz", "aprendiz", False, formacion.Aprendiz, formacion_schemas.AprendizDto,
        rules=[positive_id("user_id", "El user_id del aprendiz debe ser mayor que cero")],
    ),
    EntityConfig(
        "Instructor", "instructor", False, formacion.Instructor, formacion_schemas.InstructorDto,
        rules=[positive_id("user_id", "El user_id del instructor debe ser mayor que cero")],
    ),
    EntityConfig(
        "Program", "programa", False, formacion.Program, formacion_schemas.ProgramDto,
        rules=[required_text("name", "El nombre del programa es obligatorio")],
    ),
    EntityConfig(
        "AprendizProgram", "programa del aprendiz", False, formacion.AprendizProgram,
        formacion_schemas.AprendizProgramDto,
        rules=[
            positive_id("aprendiz_id", "El aprendiz_id es obligatorio y debe ser mayor que cero"),
            positive_id("program_id", "El program_id es obligatorio y debe ser mayor que cero"),
        ],
    ),
    EntityConfig(
        "InstructorProgram", "programa del instructor", False, formacion.InstructorProgram,
        formacion_schemas.InstructorProgramDto,
        rules=[
            positive_id("instructor_id", "El instructor_id es obligatorio y debe ser mayor que cero"),
            positive_id("program_id", "El program_id es obligatorio y debe ser mayor que cero"),
        ],
    ),
    EntityConfig(
        "Process", "proceso", False, formacion.Process, formacion_schemas.ProcessDto,
        rules=[required_text("type_process", "El tipo de proceso es obligatorio")],
    ),
    EntityConfig(
        "TypeModality", "modalidad", True, formacion.TypeModality, formacion_schemas.TypeModalityDto,
        rules=[required_text("name", "El nombre de la modalidad es obligatorio")],
    ),
    EntityConfig(
        "RegisterySofia", "registro de Sofia", False, formacion.RegisterySofia,
        formacion_schemas.RegisterySofiaDto,
        rules=[required_text("name", "El nombre del registro de Sofia es obligatorio")],
    ),
    EntityConfig(
        "Concept", "concepto", False, formacion.Concept, formacion_schemas.ConceptDto,
        rules=[required_text("name", "El nombre del concepto es obligatorio")],
    ),
    EntityConfig(
        "Boss", "jefe", False, formacion.Boss, formacion_schemas.BossDto,
        rules=[required_text("name", "El nombre del jefe es obligatorio")],
    ),
    EntityConfig(
        "Enterprise", "empresa", True, formacion.Enterprise, formacion_schemas.EnterpriseDto,
        rules=[
            required_text("name_enterprise", "El nombre de la empresa es obligatorio"),
            optional_id("boss_id", "El boss_id de la empresa debe ser mayor que cero"),
        ],
    ),
    EntityConfig(
        "State", "estado", False, formacion.State, formacion_schemas.StateDto,
        rules=[required_text("type_state", "El tipo de estado es obligatorio")],
    ),
    EntityConfig(
        "Verification", "verificación", True, formacion.Verification,
        formacion_schemas.VerificationDto,
        rules=[required_text("name", "El nombre de la verificación es obligatorio")],
    ),
    EntityConfig(
        "AprendizProcessInstructor", "proceso de instructor de aprendiz", False,
        formacion.AprendizProcessInstructor, formacion_schemas.AprendizProcessInstructorDto,
        rules=[
            positive_id("aprendiz_id", "El aprendiz_id del proceso es obligatorio"),
            positive_id("instructor_id", "El instructor_id del proceso es obligatorio"),
            optional_id("process_id", "El process_id debe ser mayor que cero"),
            optional_id("type_modality_id", "El type_modality_id debe ser mayor que cero"),
            optional_id("registery_sofia_id", "El registery_sofia_id debe ser mayor que cero"),
            optional_id("concept_id", "El concept_id debe ser mayor que cero"),
            optional_id("enterprise_id", "El enterprise_id debe ser mayor que cero"),
            optional_id("state_id", "El state_id debe ser mayor que cero"),
            optional_id("verification_id", "El verification_id debe ser mayor que cero"),
        ],
    ),
    # --- Auditoría (solo lectura y alta) ---
    EntityConfig(
        "ChangeLog", "registro de cambio", False, auditoria.ChangeLog,
        auditoria_schemas.ChangeLogDto,
        rules=[required_text("action", "La acción del registro de cambio es obligatoria")],
        operations=READ_CREATE,
    ),
]

REGISTRY: Dict[str, EntityConfig] = {entity.name: entity for entity in ENTITIES}


def get_entity(name: str) -> Optional[EntityConfig]:
    return REGISTRY.get(name)

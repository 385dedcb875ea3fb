from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import (
    EntityNotFoundException,
    ExternalServiceException,
    ValidationException,
)
from app.core.security import verify_password
from app.models.seguridad import Rol, User
from app.repositories.base import Repository
from app.schemas.estructura import CenterDto
from app.schemas.formacion import BossDto, ConceptDto
from app.schemas.seguridad import PersonDto, RolDto, UserDto
from app.services.entity_service import EntityService
from app.services.registry import REGISTRY


def servicio(db, nombre):
    entidad = REGISTRY[nombre]
    return EntityService(entidad, Repository(db, entidad.model))


@pytest.fixture
def roles(db):
    return servicio(db, "Rol")


@pytest.mark.parametrize("entity_id", [0, -1])
def test_get_by_id_invalido_no_consulta_la_base(entity_id):
    sesion = MagicMock()
    service = EntityService(REGISTRY["Rol"], Repository(sesion, Rol))
    with pytest.raises(ValidationException) as exc:
        service.get_by_id(entity_id)
    assert "ID" in exc.value.message
    sesion.get.assert_not_called()


def test_get_by_id_inexistente(roles):
    with pytest.raises(EntityNotFoundException) as exc:
        roles.get_by_id(999999)
    assert exc.value.status_code == 404


def test_create_y_get(roles):
    creado = roles.create(RolDto(type_rol="Admin", description="x"))
    assert creado.id > 0
    assert roles.get_by_id(creado.id).model_dump() == creado.model_dump()


def test_create_ignora_id_del_cliente(roles):
    creado = roles.create(RolDto(id=50, type_rol="Admin"))
    assert creado.id == 1


def test_create_nulo(roles):
    with pytest.raises(ValidationException):
        roles.create(None)


def test_create_con_campo_obligatorio_vacio_no_escribe(roles, db):
    with pytest.raises(ValidationException) as exc:
        roles.create(RolDto(type_rol="   "))
    assert exc.value.field == "type_rol"
    assert db.query(Rol).count() == 0


def test_update(roles):
    creado = roles.create(RolDto(type_rol="Admin", description="x"))
    assert roles.update(RolDto(id=creado.id, type_rol="Coordinador", description="y"))
    assert roles.get_by_id(creado.id).type_rol == "Coordinador"


def test_update_inexistente(roles):
    with pytest.raises(EntityNotFoundException):
        roles.update(RolDto(id=321, type_rol="X"))


def test_update_sin_id(roles):
    with pytest.raises(ValidationException):
        roles.update(RolDto(type_rol="X"))


def test_update_partial_aplica_solo_lo_enviado(db):
    conceptos = servicio(db, "Concept")
    creado = conceptos.create(ConceptDto(name="Aprobado", observation="ok"))
    patch = REGISTRY["Concept"].partial_schema(active=False)

    assert conceptos.update_partial(creado.id, patch)
    actual = conceptos.get_by_id(creado.id)
    assert actual.active is False
    assert actual.name == "Aprobado"
    assert actual.observation == "ok"


def test_update_partial_null_explicito_se_ignora(db):
    conceptos = servicio(db, "Concept")
    creado = conceptos.create(ConceptDto(name="Aprobado", observation="ok"))
    patch = REGISTRY["Concept"].partial_schema(observation=None, name="Pendiente")

    conceptos.update_partial(creado.id, patch)
    actual = conceptos.get_by_id(creado.id)
    assert actual.name == "Pendiente"
    assert actual.observation == "ok"


def test_update_partial_valida_campos_presentes(roles):
    creado = roles.create(RolDto(type_rol="Admin"))
    with pytest.raises(ValidationException):
        roles.update_partial(creado.id, REGISTRY["Rol"].partial_schema(type_rol=""))


def test_update_partial_inexistente(roles):
    with pytest.raises(EntityNotFoundException):
        roles.update_partial(77, REGISTRY["Rol"].partial_schema(description="x"))


def test_soft_delete_dos_veces(roles, db):
    creado = roles.create(RolDto(type_rol="Admin"))
    assert roles.soft_delete(creado.id)
    assert roles.soft_delete(creado.id)

    fila = db.get(Rol, creado.id)
    assert fila.active is False
    assert fila.deleted_at is not None
    # Sigue apareciendo en el listado
    assert [r.id for r in roles.get_all()] == [creado.id]


def test_soft_delete_inexistente(roles):
    with pytest.raises(EntityNotFoundException):
        roles.soft_delete(404)


def test_delete(roles):
    creado = roles.create(RolDto(type_rol="Admin"))
    assert roles.delete(creado.id)
    with pytest.raises(EntityNotFoundException):
        roles.delete(creado.id)


def test_error_de_base_se_envuelve(db):
    centros = servicio(db, "Center")
    with pytest.raises(ExternalServiceException) as exc:
        centros.create(CenterDto(name="Centro", regional_id=999))
    assert isinstance(exc.value.__cause__, IntegrityError)
    assert exc.value.status_code == 500


def test_create_usuario_guarda_hash(db):
    persona = servicio(db, "Person").create(PersonDto(name="Luis"))
    usuarios = servicio(db, "User")
    creado = usuarios.create(
        UserDto(person_id=persona.id, username="luis", email="luis@sena.edu.co", password="Clave123")
    )
    assert "password" not in creado.model_dump()

    fila = db.get(User, creado.id)
    assert fila.password != "Clave123"
    assert verify_password("Clave123", fila.password)


def test_update_partial_usuario_rehashea_password(db):
    persona = servicio(db, "Person").create(PersonDto(name="Luis"))
    usuarios = servicio(db, "User")
    creado = usuarios.create(
        UserDto(person_id=persona.id, username="luis", email="luis@sena.edu.co", password="Clave123")
    )
    usuarios.update_partial(creado.id, REGISTRY["User"].partial_schema(password="Nueva456"))
    assert verify_password("Nueva456", db.get(User, creado.id).password)


def test_get_by_id_fuera_de_rango_no_consulta_la_base():
    sesion = MagicMock()
    service = EntityService(REGISTRY["Rol"], Repository(sesion, Rol))
    with pytest.raises(EntityNotFoundException):
        service.get_by_id(99999999999999999999)
    sesion.get.assert_not_called()


def test_soft_delete_en_entidad_sin_active(db):
    jefes = servicio(db, "Boss")
    jefe = jefes.create(BossDto(name="Carlos"))
    with pytest.raises(ValidationException) as exc:
        jefes.soft_delete(jefe.id)
    assert "eliminación lógica" in exc.value.message
    assert jefes.get_by_id(jefe.id).name == "Carlos"

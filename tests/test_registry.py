from enum import Enum
from typing import get_args

import pytest
from pydantic import EmailStr

from app.core.security import verify_password
from app.models import formacion, seguridad
from app.schemas.formacion import EnterpriseDto
from app.schemas.seguridad import RolDto, RolFormDto, UserDto
from app.services.registry import ENTITIES, REGISTRY, get_entity


def test_registro_tiene_nombres_unicos():
    assert len(REGISTRY) == len(ENTITIES)
    assert get_entity("Rol").model is seguridad.Rol
    assert get_entity("NoExiste") is None


def test_campos_excluyen_columnas_del_servidor():
    campos = REGISTRY["ChangeLog"].fields
    assert "created_at" not in campos
    assert "id" not in campos
    assert "action" in campos


def test_soft_delete_solo_con_columna_active():
    assert REGISTRY["Rol"].supports_soft_delete
    assert REGISTRY["Sede"].supports_soft_delete
    assert not REGISTRY["UserRol"].supports_soft_delete
    assert not REGISTRY["Boss"].supports_soft_delete
    assert not REGISTRY["ChangeLog"].supports_soft_delete


def test_textos_segun_genero():
    assert REGISTRY["Rol"].of_label == "del rol"
    assert REGISTRY["Sede"].of_label == "de la sede"
    assert REGISTRY["Sede"].the_label == "La sede"
    assert REGISTRY["Rol"].participle("actualizad") == "actualizado"


def test_ida_y_vuelta_rol():
    entidad = REGISTRY["Rol"]
    dto = RolDto(id=5, type_rol="Admin", description="x", active=False)
    fila = entidad.to_entity(dto)
    assert isinstance(fila, seguridad.Rol)
    assert entidad.to_dto(fila).model_dump() == dto.model_dump()


def valor_de_ejemplo(campo):
    """Un valor válido y distinto del default para el tipo del campo."""
    tipo = next((t for t in get_args(campo.annotation) if t is not type(None)), campo.annotation)
    if tipo is bool:
        return False
    if tipo is int:
        return 7
    if tipo is float:
        return 12.5
    if tipo is EmailStr:
        return "prueba@sena.edu.co"
    if isinstance(tipo, type) and issubclass(tipo, Enum):
        return list(tipo)[0].value
    return "texto de prueba"


@pytest.mark.parametrize("entidad", ENTITIES, ids=lambda e: e.name)
def test_ida_y_vuelta_todas_las_entidades(entidad):
    campos = entidad.schema.model_fields
    assert set(entidad.fields) == set(campos) - {"id", "created_at"}
    dto = entidad.schema(id=9, **{f: valor_de_ejemplo(campos[f]) for f in entidad.fields})

    fila = entidad.to_entity(dto)
    assert isinstance(fila, entidad.model)
    assert fila.id == 9
    assert entidad.to_dto(fila).model_dump() == dto.model_dump()


def test_ida_y_vuelta_con_llave_opcional_nula():
    entidad = REGISTRY["Enterprise"]
    dto = EnterpriseDto(id=3, name_enterprise="Acme", nit_enterprise="900123", boss_id=None)
    fila = entidad.to_entity(dto)
    assert isinstance(fila, formacion.Enterprise)
    assert fila.boss_id is None
    assert entidad.to_dto(fila).model_dump() == dto.model_dump()


def test_permiso_se_guarda_como_texto():
    fila = REGISTRY["RolForm"].to_entity(RolFormDto(id=1, rol_id=1, form_id=2, permission="Read"))
    assert fila.permission == "Read"


def test_id_cero_no_se_asigna():
    valores = REGISTRY["Rol"].values(RolDto(type_rol="Admin"))
    assert "id" not in valores


def test_hook_de_usuario_hashea_password():
    entidad = REGISTRY["User"]
    valores = entidad.values(UserDto(person_id=1, username="u", email="u@x.co", password="clave"))
    valores = entidad.before_write(valores)
    assert valores["password"] != "clave"
    assert verify_password("clave", valores["password"])


def test_hook_de_usuario_descarta_password_vacio():
    valores = REGISTRY["User"].before_write({"username": "u", "password": None})
    assert "password" not in valores


def test_columnas_exportadas_sin_password():
    columnas = REGISTRY["User"].exported_columns
    assert "password" not in columnas
    assert "username" in columnas

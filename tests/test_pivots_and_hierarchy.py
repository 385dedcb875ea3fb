import pytest


@pytest.fixture
def sede(crear):
    regional = crear("Regional", {"name": "Antioquia", "code_regional": "05"})
    centro = crear("Center", {"name": "Centro de Servicios", "regional_id": regional["id"]})
    return crear("Sede", {"name": "Sede Norte", "center_id": centro["id"]})


def test_jerarquia_completa(client, sede):
    assert sede["center_id"] > 0
    centro = client.get(f"/api/Center/{sede['center_id']}").json()
    assert client.get(f"/api/Regional/{centro['regional_id']}").status_code == 200


def test_centro_sin_regional(client):
    response = client.post("/api/Center", json={"name": "Huérfano"})
    assert response.status_code == 400
    assert "regional_id" in response.json()["message"]


def test_centro_con_regional_inexistente(client):
    response = client.post("/api/Center", json={"name": "Huérfano", "regional_id": 999})
    assert response.status_code == 500


def test_borrar_regional_con_centros(client, sede):
    centro = client.get(f"/api/Center/{sede['center_id']}").json()
    response = client.delete(f"/api/Regional/{centro['regional_id']}")
    assert response.status_code == 500
    assert client.get(f"/api/Regional/{centro['regional_id']}").status_code == 200


def test_user_sede(client, crear, usuario, sede):
    pivote = crear("UserSede", {"user_id": usuario["id"], "sede_id": sede["id"], "status_procedure": "Activo"})
    assert pivote["user_id"] == usuario["id"]

    response = client.post("/api/UserSede", json={"user_id": usuario["id"], "sede_id": 0})
    assert response.status_code == 400
    assert "sede_id" in response.json()["message"]


def test_user_rol_sin_soft_delete(client, crear, usuario):
    rol = crear("Rol", {"type_rol": "Aprendiz"})
    pivote = crear("UserRol", {"user_id": usuario["id"], "rol_id": rol["id"]})

    assert client.delete(f"/api/UserRol/soft/{pivote['id']}").status_code in (404, 405)
    assert client.delete(f"/api/UserRol/{pivote['id']}").status_code == 200


def test_rol_form_permiso(client, crear):
    rol = crear("Rol", {"type_rol": "Admin"})
    form = crear("Form", {"name": "Inscripción"})
    pivote = crear("RolForm", {"rol_id": rol["id"], "form_id": form["id"], "permission": "Update"})
    assert pivote["permission"] == "Update"

    response = client.post("/api/RolForm", json={"rol_id": rol["id"], "form_id": form["id"], "permission": "Borrar"})
    assert response.status_code == 400


def test_form_module_exige_estado(client, crear):
    form = crear("Form", {"name": "Inscripción"})
    module = crear("Module", {"name": "Etapa productiva"})
    response = client.post("/api/FormModule", json={"form_id": form["id"], "module_id": module["id"]})
    assert response.status_code == 400


def test_caso_de_formacion(client, crear, usuario):
    aprendiz = crear("Aprendiz", {"user_id": usuario["id"], "previous_program": "ADSI"})
    instructor = crear("Instructor", {"user_id": usuario["id"]})
    estado = crear("State", {"type_state": "En curso"})

    caso = crear("AprendizProcessInstructor", {
        "aprendiz_id": aprendiz["id"],
        "instructor_id": instructor["id"],
        "state_id": estado["id"],
    })
    assert caso["state_id"] == estado["id"]
    assert caso["process_id"] is None

    response = client.post("/api/AprendizProcessInstructor", json={
        "aprendiz_id": aprendiz["id"], "instructor_id": instructor["id"], "concept_id": 0,
    })
    assert response.status_code == 400


def test_empresa_con_jefe_opcional(client, crear):
    sin_jefe = crear("Enterprise", {"name_enterprise": "Acme"})
    assert sin_jefe["boss_id"] is None

    jefe = crear("Boss", {"name": "Carlos", "email_boss": "c@acme.co"})
    con_jefe = crear("Enterprise", {"name_enterprise": "Acme 2", "boss_id": jefe["id"]})
    assert con_jefe["boss_id"] == jefe["id"]

    # Boss no tiene columna active
    assert client.delete(f"/api/Boss/soft/{jefe['id']}").status_code in (404, 405)


def test_change_log_solo_lectura_y_alta(client, crear):
    log = crear("ChangeLog", {"table_name": "Rol", "id_table": 1, "action": "INSERT", "user_name": "admin"})
    assert log["created_at"] is not None
    assert client.get(f"/api/ChangeLog/{log['id']}").status_code == 200

    assert client.put(f"/api/ChangeLog/{log['id']}", json={"id": log["id"], "action": "UPDATE"}).status_code == 405
    assert client.delete(f"/api/ChangeLog/{log['id']}").status_code == 405
    assert client.post("/api/ChangeLog", json={"table_name": "Rol"}).status_code == 400

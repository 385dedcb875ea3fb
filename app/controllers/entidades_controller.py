"""
Routers CRUD de las entidades registradas.

`crear_router` arma un APIRouter bajo /api/{Entidad} con las rutas de las
operaciones habilitadas para esa entidad. Los errores de negocio llegan como
AppException y los traduce el handler global de app/main.py.
"""
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from app.core import database
from app.core.exceptions import ValidationException
from app.repositories.base import Repository
from app.schemas.common import MensajeResponse
from app.services.entity_service import EntityService
from app.services.registry import ENTITIES, EntityConfig


def crear_router(entidad: EntityConfig) -> APIRouter:
    router = APIRouter(prefix=f"/api/{entidad.name}", tags=[entidad.name])
    esquema = entidad.schema
    parcial = entidad.partial_schema
    ops = entidad.operations

    def get_service(db: Session = Depends(database.get_db)) -> EntityService:
        return EntityService(entidad, Repository(db, entidad.model))

    if "get_all" in ops:
        @router.get("", response_model=List[esquema])
        def listar(service: EntityService = Depends(get_service)):
            return service.get_all()

    if "get_by_id" in ops:
        @router.get("/{entity_id}", response_model=esquema, name=f"{entidad.name}_por_id")
        def obtener(entity_id: int, service: EntityService = Depends(get_service)):
            return service.get_by_id(entity_id)

    if "create" in ops:
        @router.post("", response_model=esquema, status_code=status.HTTP_201_CREATED)
        def crear(
            dto: esquema,
            request: Request,
            response: Response,
            service: EntityService = Depends(get_service),
        ):
            creado = service.create(dto)
            # Location apunta al GET por id del registro nuevo
            response.headers["Location"] = str(
                request.url_for(f"{entidad.name}_por_id", entity_id=creado.id)
            )
            return creado

    if "update" in ops:
        @router.put("/{entity_id}", response_model=MensajeResponse)
        def actualizar(entity_id: int, dto: esquema, service: EntityService = Depends(get_service)):
            if dto.id != entity_id:
                raise ValidationException("id", "El ID de la ruta no coincide con el ID del cuerpo")
            service.update(dto)
            return {"message": f"{entidad.the_label} fue {entidad.participle('actualizad')} exitosamente."}

    if "update_partial" in ops:
        @router.patch("/{entity_id}", response_model=MensajeResponse)
        def actualizar_parcial(entity_id: int, patch: parcial, service: EntityService = Depends(get_service)):
            service.update_partial(entity_id, patch)
            return {"message": f"{entidad.the_label} fue {entidad.participle('actualizad')} parcialmente."}

    if entidad.supports_soft_delete:
        @router.delete("/soft/{entity_id}", response_model=MensajeResponse)
        def eliminar_logico(entity_id: int, service: EntityService = Depends(get_service)):
            service.soft_delete(entity_id)
            return {"message": f"{entidad.the_label} fue {entidad.participle('desactivad')} correctamente."}

    if "delete" in ops:
        @router.delete("/{entity_id}", response_model=MensajeResponse)
        def eliminar(entity_id: int, service: EntityService = Depends(get_service)):
            service.delete(entity_id)
            return {"message": f"{entidad.the_label} fue {entidad.participle('eliminad')} correctamente."}

    return router


routers = [crear_router(entidad) for entidad in ENTITIES]

"""
Lógica de negocio genérica.

`EntityService` valida la entrada, traduce DTO <-> entidad y delega la
persistencia al `Repository`. Las reglas propias de cada entidad viven en su
`EntityConfig` (app/services/registry.py).

Errores:
- ValidationException y EntityNotFoundException se propagan tal cual.
- Cualquier otra excepción se registra y se envuelve en
  ExternalServiceException conservando la causa original.
"""
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from app.core.exceptions import (
    AppException,
    EntityNotFoundException,
    ExternalServiceException,
    ValidationException,
)
from app.repositories.base import Repository
from app.schemas.common import EntidadDTO
from app.services.registry import EntityConfig

logger = logging.getLogger(__name__)

# Mayor valor de una columna Integer (INT de SQL Server); ningún id lo supera
MAX_ID = 2_147_483_647


class EntityService:
    def __init__(self, entity: EntityConfig, repository: Repository):
        self.entity = entity
        self.repository = repository

    @contextmanager
    def _store_errors(self, action: str):
        try:
            yield
        except AppException:
            raise
        except Exception as e:
            logger.error(
                f"Error al {action} {self.entity.of_label}: {e}", exc_info=True
            )
            raise ExternalServiceException(
                "Base de datos", f"Error al {action} {self.entity.of_label}"
            ) from e

    # --- Validaciones ---

    def _validate_id(self, entity_id: int) -> None:
        if entity_id is None or entity_id <= 0:
            logger.warning(f"Se intentó operar {self.entity.of_label} con ID inválido: {entity_id}")
            raise ValidationException(
                "id", f"El ID {self.entity.of_label} debe ser mayor que cero"
            )
        if entity_id > MAX_ID:
            raise self._not_found(entity_id)

    def _validate(self, values: Dict[str, Any], partial: bool = False) -> None:
        try:
            for rule in self.entity.rules:
                rule(values, partial)
        except ValidationException as e:
            logger.warning(f"{self.entity.name} inválido: {e.message}")
            raise

    def _prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        if self.entity.before_write is not None:
            values = self.entity.before_write(values)
        return values

    def _not_found(self, entity_id: int) -> EntityNotFoundException:
        logger.info(f"No se encontró {self.entity.name} con ID {entity_id}")
        return EntityNotFoundException(self.entity.name, entity_id)

    # --- Consultas ---

    def get_all(self) -> List[EntidadDTO]:
        with self._store_errors("obtener los registros"):
            return [self.entity.to_dto(row) for row in self.repository.get_all()]

    def get_by_id(self, entity_id: int) -> EntidadDTO:
        self._validate_id(entity_id)
        with self._store_errors(f"obtener el registro {entity_id}"):
            row = self.repository.get_by_id(entity_id)
            if row is None:
                raise self._not_found(entity_id)
            return self.entity.to_dto(row)

    # --- Escritura ---

    def create(self, dto: Optional[EntidadDTO]) -> EntidadDTO:
        if dto is None:
            raise ValidationException(
                f"El objeto {self.entity.of_label} no puede ser nulo"
            )
        values = self.entity.values(dto, with_id=False)
        self._validate(values)

        with self._store_errors("crear el registro"):
            row = self.entity.model(**self._prepare(values))
            created = self.repository.create(row)
            return self.entity.to_dto(created)

    def update(self, dto: Optional[EntidadDTO]) -> bool:
        if dto is None:
            raise ValidationException(
                f"El objeto {self.entity.of_label} no puede ser nulo"
            )
        self._validate_id(dto.id)
        values = self.entity.values(dto)
        self._validate(values)

        with self._store_errors(f"actualizar el registro {dto.id}"):
            row = self.entity.model(**self._prepare(values))
            if not self.repository.update(row):
                raise self._not_found(dto.id)
            return True

    def update_partial(self, entity_id: int, patch: BaseModel) -> bool:
        """
        Aplica solo los campos presentes en el body. Un null explícito se
        trata como ausente; `false` y `0` sí se aplican.
        """
        self._validate_id(entity_id)
        values = {
            field: getattr(patch, field)
            for field in patch.model_fields_set
            if field in self.entity.fields and getattr(patch, field) is not None
        }
        self._validate(values, partial=True)

        with self._store_errors(f"actualizar parcialmente el registro {entity_id}"):
            row = self.repository.get_by_id(entity_id)
            if row is None:
                raise self._not_found(entity_id)

            for field, value in self._prepare(values).items():
                setattr(row, field, value)
            self.repository.update(row)
            return True

    def soft_delete(self, entity_id: int) -> bool:
        if "active" not in self.entity.columns:
            logger.warning(f"Se intentó eliminar lógicamente {self.entity.name}, que no tiene columna active")
            raise ValidationException(
                f"{self.entity.the_label} no admite eliminación lógica"
            )
        self._validate_id(entity_id)
        with self._store_errors(f"eliminar lógicamente el registro {entity_id}"):
            row = self.repository.get_by_id(entity_id)
            if row is None:
                raise self._not_found(entity_id)

            row.active = False
            row.deleted_at = datetime.now(timezone.utc)
            self.repository.update(row)
            return True

    def delete(self, entity_id: int) -> bool:
        self._validate_id(entity_id)
        with self._store_errors(f"eliminar el registro {entity_id}"):
            if not self.repository.delete(entity_id):
                raise self._not_found(entity_id)
            return True

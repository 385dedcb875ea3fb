"""
Repository pattern para operaciones de base de datos.

Un único `Repository` genérico sirve a todas las entidades del modelo:
se instancia con la sesión de la petición y la clase del modelo.

POLÍTICA DE ERRORES:
--------------------
- "No encontrado" nunca es una excepción: `get_by_id` devuelve None y
  `update`/`delete` devuelven False.
- Cualquier error del motor (SQLAlchemyError) hace rollback, se registra y
  se vuelve a lanzar, en TODAS las operaciones.

Cada método de escritura hace commit inmediatamente.
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, inspect, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """Acceso a datos de una tabla"""

    def __init__(self, db_session: Session, model: Type[ModelT]):
        self.db = db_session
        self.model = model
        self._columns = {c.key for c in inspect(model).column_attrs}

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def get_all(self) -> List[ModelT]:
        """Todas las filas ordenadas por id, sin filtros."""
        return list(self.db.scalars(select(self.model).order_by(self.model.id)))

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        try:
            return self.db.get(self.model, entity_id)
        except SQLAlchemyError as e:
            logger.error(
                f"Error al obtener {self.table_name} con ID {entity_id}: {e}",
                exc_info=True,
            )
            raise

    def create(self, entity: ModelT) -> ModelT:
        """
        Inserta la entidad y la devuelve con el id generado.

        Raises:
            SQLAlchemyError: si el motor rechaza el insert (p. ej. llave foránea)
        """
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)

            logger.info(
                f"{self.table_name} creado",
                extra={"table": self.table_name, "id": entity.id},
            )
            return entity
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error al crear {self.table_name}: {e}", exc_info=True)
            raise

    def update(self, entity: ModelT) -> bool:
        """
        Persiste los cambios de una entidad.

        Si la entidad ya pertenece a la sesión solo se hace commit. Si es un
        objeto nuevo (armado desde un DTO) se copian sus columnas asignadas
        sobre la fila con el mismo id.

        Returns:
            False si no existe una fila con ese id, True en otro caso
        """
        state = inspect(entity)
        try:
            if state.persistent:
                current = entity
            else:
                current = self.db.get(self.model, entity.id)
                if current is None:
                    return False
                for key, value in self._assigned_values(state.dict).items():
                    setattr(current, key, value)

            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Error al actualizar {self.table_name} con ID {entity.id}: {e}",
                exc_info=True,
            )
            raise

    def delete(self, entity_id: int) -> bool:
        """Eliminación física. False si la fila no existe."""
        try:
            entity = self.db.get(self.model, entity_id)
            if entity is None:
                return False

            self.db.delete(entity)
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Error al eliminar {self.table_name} con ID {entity_id}: {e}",
                exc_info=True,
            )
            raise

    # --- Consultas para reportes ---

    def count(self, only_active: bool = False) -> int:
        stmt = select(func.count(self.model.id))
        if only_active:
            stmt = stmt.where(self.model.active == true())
        return self.db.scalar(stmt)

    def get_page(self, offset: int, limit: int) -> List[ModelT]:
        stmt = select(self.model).order_by(self.model.id).offset(offset).limit(limit)
        return list(self.db.scalars(stmt))

    def _assigned_values(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in values.items() if k in self._columns and k != "id"}

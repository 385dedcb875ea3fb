"""
Excepciones de la capa de negocio.

Cada excepción conoce el código HTTP con el que se expone, así los
controladores solo traducen a una respuesta `{"message": ...}`.
"""
from typing import Any, Dict, Optional

from fastapi import status


class AppException(Exception):
    """Excepción base de la aplicación"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "APP_ERROR"

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class ValidationException(AppException):
    """
    Datos de entrada inválidos.

    Acepta `ValidationException(mensaje)` o `ValidationException(campo, mensaje)`.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"

    def __init__(self, field_or_message: str, message: Optional[str] = None):
        if message is None:
            field, message = None, field_or_message
        else:
            field = field_or_message
        super().__init__(message, extra={"field": field} if field else None)
        self.field = field


class EntityNotFoundException(AppException):
    """Registro no encontrado"""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            f"No se encontró {entity_name} con ID {entity_id}",
            extra={"entity": entity_name, "id": entity_id},
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class UnknownEntityException(AppException):
    """Nombre de entidad que no está registrada"""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "UNKNOWN_ENTITY"

    def __init__(self, entity_name: str):
        super().__init__(
            f"La entidad {entity_name} no existe", extra={"entity": entity_name}
        )
        self.entity_name = entity_name


class ExternalServiceException(AppException):
    """Falla de un servicio externo (base de datos)"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "EXTERNAL_SERVICE_ERROR"

    def __init__(self, service: str, message: str):
        super().__init__(message, extra={"service": service})
        self.service = service

"""
Reglas de validación reutilizables.

Cada regla recibe el diccionario de valores del DTO y un indicador `partial`.
En una actualización parcial la regla solo se evalúa si el campo viene en el
body; en las demás operaciones siempre se evalúa.
"""
from typing import Any, Callable, Dict

from app.core.exceptions import ValidationException

Rule = Callable[[Dict[str, Any], bool], None]


def required_text(field: str, message: str) -> Rule:
    """El campo no puede ser nulo, vacío ni solo espacios."""

    def validate(values: Dict[str, Any], partial: bool = False) -> None:
        if partial and field not in values:
            return
        value = values.get(field)
        if value is None or not str(value).strip():
            raise ValidationException(field, message)

    return validate


def positive_id(field: str, message: str) -> Rule:
    """Llave foránea obligatoria: entero mayor que cero."""

    def validate(values: Dict[str, Any], partial: bool = False) -> None:
        if partial and field not in values:
            return
        value = values.get(field)
        if value is None or value <= 0:
            raise ValidationException(field, message)

    return validate


def optional_id(field: str, message: str) -> Rule:
    """Llave foránea opcional: si viene, debe ser mayor que cero."""

    def validate(values: Dict[str, Any], partial: bool = False) -> None:
        value = values.get(field)
        if value is not None and value <= 0:
            raise ValidationException(field, message)

    return validate

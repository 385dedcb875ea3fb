from typing import Optional, Type

from pydantic import BaseModel, ConfigDict, create_model


class EntidadDTO(BaseModel):
    """Base de todos los DTO. `id` lo asigna el servidor al crear."""

    id: int = 0

    model_config = ConfigDict(from_attributes=True)


class MensajeResponse(BaseModel):
    message: str


def esquema_parcial(esquema: Type[BaseModel]) -> Type[BaseModel]:
    """
    Construye el DTO de actualización parcial: mismos campos, todos opcionales
    y sin `id`. Solo los campos enviados en el body llegan a `model_fields_set`.
    """
    campos = {
        nombre: (Optional[campo.annotation], None)
        for nombre, campo in esquema.model_fields.items()
        if nombre != "id"
    }
    return create_model(
        f"{esquema.__name__}Parcial",
        __config__=ConfigDict(use_enum_values=True),
        **campos,
    )

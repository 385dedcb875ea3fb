from datetime import datetime
from typing import Optional

from app.schemas.common import EntidadDTO


class ChangeLogDto(EntidadDTO):
    table_name: Optional[str] = None
    id_table: Optional[int] = None
    old_values: Optional[str] = None
    new_values: Optional[str] = None
    action: Optional[str] = None
    user_name: Optional[str] = None
    created_at: Optional[datetime] = None  # Lo asigna el servidor

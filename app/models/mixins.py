from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime


def _utc_now():
    return datetime.now(timezone.utc)


# Estas clases NO son tablas, son plantillas que otros modelos usarán
class TimestampMixin:
    created_at = Column(DateTime, default=_utc_now, nullable=False)
    updated_at = Column(DateTime, default=_utc_now, onupdate=_utc_now, nullable=False)
    deleted_at = Column(DateTime, nullable=True)


class AuditoriaMixin(TimestampMixin):
    # `active` habilita la eliminación lógica
    active = Column(Boolean, default=True, nullable=False)

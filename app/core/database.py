from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core import config


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite no valida llaves foráneas si no se le pide en cada conexión
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def configure_engine(engine):
    """Ajustes por dialecto que deben aplicarse a cualquier engine de la app."""
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_engine(url: str = config.DATABASE_URL, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return configure_engine(create_engine(url, echo=config.SQL_ECHO, **kwargs))


engine = build_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(bind=None):
    """Crea las tablas que aún no existan."""
    # Importamos los modelos para que queden registrados en Base.metadata
    from app.models import auditoria, estructura, formacion, seguridad  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

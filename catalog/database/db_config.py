"""
Módulo de configuración de la base de datos
"""
import logging
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.settings import Settings
from catalog.database.db_base import Base
from catalog.database import models  # noqa: F401 registra las tablas en Base.metadata

logger = logging.getLogger("DatabaseSettings")

def build_engine(database_url: str, echo: bool = False, connect_args: dict | None = None) -> Engine:
    """
    Crea el engine de SQLAlchemy. Las bases SQLite en memoria comparten una
    única conexión para que todas las sesiones vean los mismos datos.

    Args:
        database_url (str): URL de conexión.
        echo (bool): Si se registran las sentencias SQL.
        connect_args (dict | None): Argumentos extra para el driver.

    Returns:
        Engine: Engine configurado.
    """
    connect_args = dict(connect_args or {})
    options = {}
    if database_url.startswith("sqlite"):
        connect_args.setdefault("check_same_thread", False)
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            options["poolclass"] = StaticPool

    logger.info("Creando engine...")
    return create_engine(database_url, echo=echo, connect_args=connect_args, **options)

def engine_from_settings(settings: Settings) -> Engine:
    return build_engine(
        settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        connect_args=settings.DATABASE_CONNECT_ARGS
    )

def build_session_factory(engine: Engine) -> sessionmaker:
    logger.info("Generando SessionLocal...")
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

def init_db(engine: Engine) -> None:
    """
    Crea las tablas que falten.

    Args:
        engine (Engine): Engine de la base de datos.

    Returns:
        None
    """
    Base.metadata.create_all(bind=engine)
    logger.info(f"Base de datos inicializada en: {engine.url.render_as_string(hide_password=True)}")

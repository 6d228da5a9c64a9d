"""
Módulo seed para volcar los fixtures JSON (albums, photos, users) en el
backend SQL o en MongoDB. La aplicación nunca crea registros: se cargan aquí.
"""
import sys
import logging
from typing import Any, Dict, List

from sqlalchemy import Engine
from sqlalchemy.orm import Session

from catalog.enums import StorageBackend
from catalog.errors import CatalogError, ConfigurationError
from catalog.schemas import Album, Photo, User
from catalog.settings import CatalogLogger, Settings, load_settings
from catalog.persistence.json_store import JsonCatalogStore
from catalog.persistence.mongo_store import MongoCatalogStore
from catalog.database.db_config import build_session_factory, engine_from_settings, init_db
from catalog.database.models import AlbumDatabaseModel, PhotoDatabaseModel, UsersDatabaseModel

logger = logging.getLogger("Seed")

Fixtures = Dict[str, List[Any]]

def read_fixtures(settings: Settings) -> Fixtures:
    """
    Lee y valida los tres archivos JSON configurados en DATA_PATH.

    Returns:
        Fixtures: Diccionario con las claves "albums", "photos" y "users".
    """
    source = JsonCatalogStore(settings.albums_file, settings.photos_file, settings.users_file)
    return {
        "albums": source.list_albums(),
        "photos": source.list_photos(),
        "users": source.list_users(),
    }

def load_into_sql(engine: Engine, albums: List[Album], photos: List[Photo], users: List[User]) -> int:
    """
    Crea las tablas y añade los registros en una única transacción.

    Los IDs de álbum o de propietario que no existen se descartan: las claves
    foráneas no permiten referencias colgantes.

    Returns:
        int: Número de fotos insertadas.
    """
    init_db(engine)
    SessionLocal = build_session_factory(engine)

    db: Session = SessionLocal()
    try:
        user_rows = {
            user.id: UsersDatabaseModel(id=user.id, username=user.username, password=user.password)
            for user in users
        }
        album_rows = {
            album.id: AlbumDatabaseModel(id=album.id, name=album.name, description=album.description)
            for album in albums
        }

        photo_rows = []
        for photo in photos:
            missing = [album_id for album_id in photo.albums if album_id not in album_rows]
            if missing:
                logger.warning(f"Foto {photo.id}: se descartan los álbumes inexistentes {missing}")

            owner_id = photo.owner if photo.owner in user_rows else None
            if photo.owner is not None and owner_id is None:
                logger.warning(f"Foto {photo.id}: el propietario {photo.owner} no existe")

            photo_rows.append(PhotoDatabaseModel(
                id=photo.id,
                filename=photo.filename,
                title=photo.title,
                description=photo.description,
                date=photo.date,
                resolution=photo.resolution,
                tags=list(photo.tags),
                owner_id=owner_id,
                albums=[album_rows[album_id] for album_id in dict.fromkeys(photo.albums) if album_id in album_rows]
            ))

        db.add_all([*user_rows.values(), *album_rows.values(), *photo_rows])
        db.commit()
        logger.info(f"Cargados {len(users)} usuarios, {len(albums)} álbumes y {len(photo_rows)} fotos en SQL")
        return len(photo_rows)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def load_into_mongo(db: Any, albums: List[Album], photos: List[Photo], users: List[User]) -> int:
    """
    Reemplaza el contenido de las colecciones y crea índices únicos sobre "id".

    Args:
        db (Any): Base de datos de pymongo (o un objeto indexable equivalente).

    Returns:
        int: Número de fotos insertadas.
    """
    batches = (
        (MongoCatalogStore.ALBUMS, albums),
        (MongoCatalogStore.PHOTOS, photos),
        (MongoCatalogStore.USERS, users),
    )
    for name, records in batches:
        collection = db[name]
        collection.delete_many({})
        collection.create_index("id", unique=True)
        if records:
            collection.insert_many([record.model_dump() for record in records])
        logger.info(f"Colección '{name}' cargada con {len(records)} documentos")

    db[MongoCatalogStore.USERS].create_index("username", unique=True)
    return len(photos)

def seed_backend(settings: Settings) -> int:
    """
    Carga los fixtures en el backend configurado en STORAGE_BACKEND.

    Raises:
        ConfigurationError: Si el backend es JSON (ya lee los fixtures directamente).
    """
    fixtures = read_fixtures(settings)

    if settings.STORAGE_BACKEND == StorageBackend.SQL:
        engine = engine_from_settings(settings)
        try:
            return load_into_sql(engine, **fixtures)
        finally:
            engine.dispose()

    if settings.STORAGE_BACKEND == StorageBackend.MONGO:
        store = MongoCatalogStore.from_settings(settings)
        with store:
            return load_into_mongo(store.database, **fixtures)

    raise ConfigurationError(
        message=f"El backend '{settings.STORAGE_BACKEND}' no necesita carga inicial",
        missing_fields=["STORAGE_BACKEND"]
    )

def main() -> int:
    try:
        settings = load_settings()
        CatalogLogger.setup_logging(level=settings.LOG_LEVEL, settings=settings)
        count = seed_backend(settings)
    except CatalogError as e:
        logger.error(f"{e.__class__.__name__}: {e.message} {e.details}")
        return 1
    print(f"Fixtures cargados: {count} fotos")
    return 0

if __name__ == "__main__":
    sys.exit(main())

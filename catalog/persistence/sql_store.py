"""
Backend de almacenamiento relacional con SQLAlchemy.
"""
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from sqlalchemy import Engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload, sessionmaker

from catalog.settings import Settings
from catalog.errors import StorageError
from catalog.schemas import Album, Photo, User
from catalog.database.db_config import build_session_factory, engine_from_settings, init_db
from catalog.database.models import (
    album_photos,
    AlbumDatabaseModel,
    PhotoDatabaseModel,
    UsersDatabaseModel
)
from catalog.persistence.base_store import CatalogStore, EDITABLE_PHOTO_FIELDS

class SqlCatalogStore(CatalogStore):
    """
    Store sobre una base de datos SQL. Cada operación usa su propia sesión;
    la actualización es una transacción sobre la fila existente.
    """
    def __init__(self, engine: Engine, create_tables: bool = True) -> None:
        super().__init__()
        self.engine = engine
        self.create_tables = create_tables
        self._session_factory: Optional[sessionmaker] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "SqlCatalogStore":
        return cls(engine_from_settings(settings))

    # =========== CICLO DE VIDA ===========
    def open(self) -> None:
        if self._session_factory is not None:
            return
        try:
            if self.create_tables:
                init_db(self.engine)
        except SQLAlchemyError as e:
            self.logger.error(f"Error al inicializar la base de datos: {e}")
            raise StorageError(message="Could not initialise the SQL database", details={"error": str(e)}) from e
        self._session_factory = build_session_factory(self.engine)

    def close(self) -> None:
        self._session_factory = None
        self.engine.dispose()
        self.logger.debug("Engine liberado.")

    # =========== MÉTODOS PRIVADOS ===========
    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Sesión de trabajo. Revierte la transacción y lanza StorageError ante
        cualquier error de SQLAlchemy.
        """
        if self._session_factory is None:
            raise StorageError(message="SQL store is not open; call open() first")

        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            self.logger.error(f"SQLAlchemy Error: {e}")
            raise StorageError(message="SQL storage error", details={"error": str(e)}) from e
        finally:
            session.close()

    @staticmethod
    def _to_photo(row: PhotoDatabaseModel) -> Photo:
        return Photo(
            id=row.id,
            filename=row.filename,
            title=row.title,
            description=row.description,
            date=row.date,
            resolution=row.resolution,
            albums=[album.id for album in row.albums],
            tags=list(row.tags or []),
            owner=row.owner_id
        )

    def _photos_query(self):
        return (
            select(PhotoDatabaseModel)
            .options(selectinload(PhotoDatabaseModel.albums))
            .order_by(PhotoDatabaseModel.id)
        )

    # =========== ÁLBUMES ===========
    def list_albums(self) -> List[Album]:
        with self.session() as session:
            rows = session.execute(select(AlbumDatabaseModel).order_by(AlbumDatabaseModel.id)).scalars().all()
            return [Album.model_validate(row) for row in rows]

    def get_album_by_id(self, album_id: int) -> Optional[Album]:
        with self.session() as session:
            row = session.get(AlbumDatabaseModel, album_id)
            return Album.model_validate(row) if row else None

    def get_album_by_name(self, name: str) -> Optional[Album]:
        with self.session() as session:
            stmt = (
                select(AlbumDatabaseModel)
                .where(AlbumDatabaseModel.name == name)
                .order_by(AlbumDatabaseModel.id)
                .limit(1)
            )
            row = session.execute(stmt).scalar_one_or_none()
            return Album.model_validate(row) if row else None

    # =========== FOTOS ===========
    def list_photos(self) -> List[Photo]:
        with self.session() as session:
            rows = session.execute(self._photos_query()).scalars().all()
            return [self._to_photo(row) for row in rows]

    def list_photos_by_album(self, album_id: int) -> List[Photo]:
        with self.session() as session:
            stmt = (
                self._photos_query()
                .join(album_photos, album_photos.c.photo_id == PhotoDatabaseModel.id)
                .where(album_photos.c.album_id == album_id)
            )
            rows = session.execute(stmt).scalars().all()
            return [self._to_photo(row) for row in rows]

    def get_photo_by_id(self, photo_id: int) -> Optional[Photo]:
        with self.session() as session:
            stmt = self._photos_query().where(PhotoDatabaseModel.id == photo_id)
            row = session.execute(stmt).scalar_one_or_none()
            return self._to_photo(row) if row else None

    def update_photo(self, photo: Photo, fields: Sequence[str] = EDITABLE_PHOTO_FIELDS) -> bool:
        editable = self._editable_fields(fields)
        with self.session() as session:
            row = session.get(PhotoDatabaseModel, photo.id)
            if row is None:
                self.logger.warning(f"Foto {photo.id} no encontrada en la base de datos, no se actualiza")
                return False

            for field in editable:
                value = getattr(photo, field)
                setattr(row, field, list(value) if field == "tags" else value)
            session.commit()
            self.logger.info(f"Successfully updated: {row}")
            return True

    # =========== USUARIOS ===========
    def get_user_by_username(self, username: str) -> Optional[User]:
        with self.session() as session:
            stmt = select(UsersDatabaseModel).where(UsersDatabaseModel.username == username)
            row = session.execute(stmt).scalar_one_or_none()
            return User.model_validate(row) if row else None

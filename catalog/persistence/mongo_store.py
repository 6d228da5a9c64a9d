"""
Backend de almacenamiento sobre MongoDB (colecciones albums, photos y users).
"""
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence, Type

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from catalog.settings import Settings
from catalog.errors import StorageError
from catalog.schemas import Album, Photo, User
from catalog.persistence.base_store import CatalogStore, ModelT, EDITABLE_PHOTO_FIELDS

# Nunca devolvemos el _id interno de Mongo: la clave es el campo numérico "id"
PROJECTION: Dict[str, int] = {"_id": 0}

class MongoCatalogStore(CatalogStore):
    """
    Un único cliente por proceso, creado en open() y cerrado en close().
    Las actualizaciones son un $set atómico sobre los campos editables.
    """
    ALBUMS = "albums"
    PHOTOS = "photos"
    USERS = "users"

    def __init__(
            self,
            uri: str,
            db_name: str,
            timeout_ms: int = 5000,
            client: Optional[MongoClient] = None
        ) -> None:
        super().__init__()
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client = client
        self._db = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoCatalogStore":
        """
        Crea el store a partir de la configuración.

        Raises:
            ConfigurationError: Si faltan las credenciales de conexión.
        """
        return cls(
            uri=settings.mongo_connection_uri,
            db_name=settings.MONGO_DB_NAME,
            timeout_ms=settings.MONGO_TIMEOUT_MS
        )

    # =========== CICLO DE VIDA ===========
    def open(self) -> None:
        if self._db is not None:
            return
        with self._guard("open"):
            if self._client is None:
                self._client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
            self._client.admin.command("ping")
            self._db = self._client[self.db_name]
        self.logger.info(f"Conectado a MongoDB, base de datos '{self.db_name}'")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self.logger.info("Conexión a MongoDB cerrada")
        self._client = None
        self._db = None

    @property
    def database(self) -> Any:
        """Base de datos abierta, para la carga inicial de datos."""
        if self._db is None:
            raise StorageError(message="MongoDB store is not open; call open() first")
        return self._db

    # =========== MÉTODOS PRIVADOS ===========
    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        """Traduce los errores del driver a StorageError."""
        try:
            yield
        except PyMongoError as e:
            self.logger.error(f"Error de MongoDB en '{operation}': {e}")
            raise StorageError(
                message=f"MongoDB error during {operation}",
                details={"operation": operation, "error": str(e)}
            ) from e

    def _collection(self, name: str) -> Any:
        return self.database[name]

    def _find(self, name: str, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        with self._guard(f"find {name}"):
            return list(self._collection(name).find(query, PROJECTION))

    def _find_one(self, model: Type[ModelT], name: str, query: Dict[str, Any]) -> Optional[ModelT]:
        """Primer documento que cumple query, o None si no existe o está mal formado."""
        with self._guard(f"find_one {name}"):
            doc = self._collection(name).find_one(query, PROJECTION)
        if doc is None:
            return None
        valid = self._validate_records(model, [doc], name)
        return valid[0] if valid else None

    # =========== ÁLBUMES ===========
    def list_albums(self) -> List[Album]:
        return self._validate_records(Album, self._find(self.ALBUMS, {}), self.ALBUMS)

    def get_album_by_id(self, album_id: int) -> Optional[Album]:
        return self._find_one(Album, self.ALBUMS, {"id": album_id})

    def get_album_by_name(self, name: str) -> Optional[Album]:
        return self._find_one(Album, self.ALBUMS, {"name": name})

    # =========== FOTOS ===========
    def list_photos(self) -> List[Photo]:
        return self._validate_records(Photo, self._find(self.PHOTOS, {}), self.PHOTOS)

    def list_photos_by_album(self, album_id: int) -> List[Photo]:
        # En un campo array, la igualdad significa "contiene"
        docs = self._find(self.PHOTOS, {"albums": album_id})
        return self._validate_records(Photo, docs, self.PHOTOS)

    def get_photo_by_id(self, photo_id: int) -> Optional[Photo]:
        return self._find_one(Photo, self.PHOTOS, {"id": photo_id})

    def update_photo(self, photo: Photo, fields: Sequence[str] = EDITABLE_PHOTO_FIELDS) -> bool:
        # Sólo los campos pedidos; el resto del documento no se toca
        changes = {field: getattr(photo, field) for field in self._editable_fields(fields)}
        if not changes:
            return self.get_photo_by_id(photo.id) is not None
        with self._guard("update photo"):
            result = self._collection(self.PHOTOS).update_one({"id": photo.id}, {"$set": changes})

        if result.matched_count == 0:
            self.logger.warning(f"Foto {photo.id} no encontrada en MongoDB, no se actualiza")
            return False

        self.logger.info(f"Foto {photo.id} actualizada en MongoDB")
        return True

    # =========== USUARIOS ===========
    def get_user_by_username(self, username: str) -> Optional[User]:
        return self._find_one(User, self.USERS, {"username": username})

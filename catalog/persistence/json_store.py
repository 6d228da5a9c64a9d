"""
Backend de almacenamiento sobre archivos JSON planos (albums.json, photos.json, users.json).
"""
import threading
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type

from catalog.errors import StorageError
from catalog.schemas import Album, Photo, User
from catalog.utils.jsonio import read_json, write_json
from catalog.persistence.base_store import CatalogStore, ModelT, EDITABLE_PHOTO_FIELDS

class JsonCatalogStore(CatalogStore):
    """
    Lee las colecciones completas en cada operación y reescribe photos.json
    entero en cada actualización.

    El candado sólo serializa las escrituras dentro de este proceso: dos procesos
    escribiendo a la vez pueden perder actualizaciones (el último en escribir gana).
    """
    def __init__(self, albums_file: Path, photos_file: Path, users_file: Path) -> None:
        super().__init__()
        self.albums_file = Path(albums_file)
        self.photos_file = Path(photos_file)
        self.users_file = Path(users_file)
        self._write_lock = threading.Lock()

    # =========== MÉTODOS PRIVADOS ===========
    def _read_records(self, path: Path) -> List[Any]:
        data = read_json(path)
        if not isinstance(data, list):
            raise StorageError(f"Expected a JSON list in {path}", details={"file": str(path)})
        return data

    def _load(self, model: Type[ModelT], path: Path) -> List[ModelT]:
        return self._validate_records(model, self._read_records(path), path.name)

    @staticmethod
    def _record_id(record: Any) -> Optional[int]:
        if isinstance(record, dict):
            value = record.get("id")
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        return None

    # =========== ÁLBUMES ===========
    def list_albums(self) -> List[Album]:
        return self._load(Album, self.albums_file)

    def get_album_by_id(self, album_id: int) -> Optional[Album]:
        for album in self.list_albums():
            if album.id == album_id:
                return album
        return None

    def get_album_by_name(self, name: str) -> Optional[Album]:
        for album in self.list_albums():
            if album.name == name:
                return album
        return None

    # =========== FOTOS ===========
    def list_photos(self) -> List[Photo]:
        return self._load(Photo, self.photos_file)

    def list_photos_by_album(self, album_id: int) -> List[Photo]:
        return [photo for photo in self.list_photos() if album_id in photo.albums]

    def get_photo_by_id(self, photo_id: int) -> Optional[Photo]:
        for photo in self.list_photos():
            if photo.id == photo_id:
                return photo
        return None

    def update_photo(self, photo: Photo, fields: Sequence[str] = EDITABLE_PHOTO_FIELDS) -> bool:
        editable = self._editable_fields(fields)
        with self._write_lock:
            records = self._read_records(self.photos_file)
            for record in records:
                if self._record_id(record) == photo.id:
                    for field in editable:
                        record[field] = getattr(photo, field)
                    write_json(self.photos_file, records)
                    self.logger.info(f"Foto {photo.id} actualizada en {self.photos_file.name}")
                    return True

        self.logger.warning(f"Foto {photo.id} no encontrada en {self.photos_file.name}, no se actualiza")
        return False

    # =========== USUARIOS ===========
    def list_users(self) -> List[User]:
        return self._load(User, self.users_file)

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self.list_users():
            if user.username == username:
                return user
        return None

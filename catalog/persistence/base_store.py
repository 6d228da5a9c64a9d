"""
Puerto de persistencia: el contrato que la capa de negocio usa para leer y
actualizar el catálogo, sin conocer el backend que hay detrás.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from catalog.schemas import Album, Photo, User

ModelT = TypeVar("ModelT", bound=BaseModel)

# Únicos campos de una foto que la aplicación modifica
EDITABLE_PHOTO_FIELDS = ("title", "description", "tags")

class CatalogStore(ABC):
    """
    Contrato común para todos los backends de almacenamiento.

    Las ausencias se informan con None o listas vacías; sólo los problemas del
    propio almacenamiento (datos corruptos, backend inaccesible) lanzan StorageError.
    """
    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    # =========== CICLO DE VIDA ===========
    def open(self) -> None:
        """Prepara los recursos del backend. Por defecto no hace nada."""

    def close(self) -> None:
        """Libera los recursos del backend. Por defecto no hace nada."""

    def __enter__(self) -> "CatalogStore":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _validate_records(self, model: Type[ModelT], records: Iterable[Any], source: str) -> List[ModelT]:
        """
        Valida cada registro contra su esquema. Los registros mal formados se
        omiten con un aviso en lugar de hacer fallar la lectura.

        Args:
            model (Type[ModelT]): Esquema pydantic del registro.
            records (Iterable[Any]): Registros crudos (dicts).
            source (str): Nombre del origen, para los logs.

        Returns:
            List[ModelT]: Registros válidos en su orden original.
        """
        items: List[ModelT] = []
        for position, record in enumerate(records):
            if not isinstance(record, dict):
                self.logger.warning(f"Registro no válido en {source}[{position}]: se omite")
                continue
            try:
                items.append(model.model_validate(record))
            except ValidationError as e:
                self.logger.warning(f"Registro no válido en {source}[{position}]: {e.error_count()} errores, se omite")
        return items

    @staticmethod
    def _editable_fields(fields: Sequence[str]) -> List[str]:
        """Filtra fields a los campos editables, sin repetir y en orden."""
        return [field for field in EDITABLE_PHOTO_FIELDS if field in fields]

    # =========== ÁLBUMES ===========
    @abstractmethod
    def list_albums(self) -> List[Album]:
        """
        Lista todos los álbumes en el orden del almacenamiento.

        Returns:
            List[Album]: Álbumes almacenados.
        """

    @abstractmethod
    def get_album_by_id(self, album_id: int) -> Optional[Album]:
        """
        Busca un álbum por coincidencia exacta de id.

        Args:
            album_id (int): ID del álbum.

        Returns:
            Optional[Album]: El álbum o None.
        """

    @abstractmethod
    def get_album_by_name(self, name: str) -> Optional[Album]:
        """
        Busca un álbum por nombre exacto, distinguiendo mayúsculas.

        Args:
            name (str): Nombre del álbum.

        Returns:
            Optional[Album]: El álbum o None.
        """

    # =========== FOTOS ===========
    @abstractmethod
    def list_photos(self) -> List[Photo]:
        """Lista todas las fotos."""

    @abstractmethod
    def list_photos_by_album(self, album_id: int) -> List[Photo]:
        """
        Lista las fotos cuyo campo albums contiene album_id.

        Args:
            album_id (int): ID del álbum.

        Returns:
            List[Photo]: Fotos del álbum.
        """

    @abstractmethod
    def get_photo_by_id(self, photo_id: int) -> Optional[Photo]:
        """
        Busca una foto por coincidencia exacta de id.

        Args:
            photo_id (int): ID de la foto.

        Returns:
            Optional[Photo]: La foto o None.
        """

    @abstractmethod
    def update_photo(self, photo: Photo, fields: Sequence[str] = EDITABLE_PHOTO_FIELDS) -> bool:
        """
        Persiste los campos editables indicados de la foto con el mismo id.
        Los campos no editables de fields se ignoran.

        Args:
            photo (Photo): Registro completo con los valores nuevos.
            fields (Sequence[str]): Campos a escribir; por defecto title, description y tags.

        Returns:
            bool: True si existía una foto con ese id, False en caso contrario.
            Nunca crea registros nuevos.
        """

    # =========== USUARIOS ===========
    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        """
        Busca un usuario por nombre exacto.

        Args:
            username (str): Nombre de usuario.

        Returns:
            Optional[User]: El usuario (con su contraseña almacenada) o None.
        """

"""
Módulo de servicio para la consulta y edición de metadatos de fotografías.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from catalog.persistence import CatalogStore
from catalog.settings import Settings, settings as default_settings
from catalog.utils import coerce_id, find_same_key, is_blank
from catalog.schemas import Photo, PhotoDetails, PhotoDetailsResult, OperationResult

NO_TAGS = "None"

class PhotosService:
    """
    Servicio de alto nivel para las fotos: detalle con álbumes resueltos,
    edición de título y descripción, y etiquetas.

    Con enforce_ownership activo, cada operación exige que requester_id sea el
    propietario de la foto antes de leer o modificar nada.
    """
    def __init__(
            self,
            store: CatalogStore,
            settings: Optional[Settings] = None,
            enforce_ownership: bool = False
        ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.store = store
        self.settings = settings or default_settings
        self.enforce_ownership = enforce_ownership
        self.photos_url_prefix = self.settings.PHOTOS_URL_PREFIX

    # =========== MÉTODOS PRIVADOS ===========
    def _is_owner(self, photo: Photo, requester_id: Any) -> bool:
        """
        Verifica que la foto pertenezca al usuario que la solicita.

        Args:
            photo (Photo): Foto ya cargada.
            requester_id (Any): ID del usuario que hace la petición.

        Returns:
            bool: True si el usuario es el propietario.
        """
        requester = coerce_id(requester_id)
        return requester is not None and photo.owner == requester

    def _load_photo(self, photo_id: Any, requester_id: Any = None) -> Tuple[Optional[Photo], Optional[str]]:
        """
        Carga una foto aplicando, si corresponde, la comprobación de propiedad.

        Returns:
            Tuple[Optional[Photo], Optional[str]]: La foto, o None y el motivo del fallo.
        """
        key = coerce_id(photo_id)
        if key is None:
            self.logger.warning(f"ID de foto no válido: {photo_id!r}")
            return None, "Invalid photo id"

        photo = self.store.get_photo_by_id(key)
        if photo is None:
            return None, "Photo not found"

        if self.enforce_ownership and not self._is_owner(photo, requester_id):
            self.logger.warning(f"Acceso denegado a la foto {key} para el usuario {requester_id!r}")
            return None, "Access denied"

        return photo, None

    def _album_names(self, photo: Photo) -> List[str]:
        """Resuelve los IDs de álbum a nombres, omitiendo los que no existen."""
        names_by_id: Dict[int, str] = {}
        for album in self.store.list_albums():
            names_by_id.setdefault(album.id, album.name)
        return [names_by_id[album_id] for album_id in photo.albums if names_by_id.get(album_id)]

    @staticmethod
    def format_tags(photo: Photo) -> str:
        """Etiquetas unidas por ", " en su orden original, o "None" si no hay."""
        return ", ".join(photo.tags) if photo.tags else NO_TAGS

    def _persist(self, photo: Photo, fields: Sequence[str]) -> OperationResult:
        if not self.store.update_photo(photo, fields=fields):
            return OperationResult.failure("Update failed")
        return OperationResult.success()

    # =========== MÉTODOS GET ===========
    def get_photo_details(self, photo_id: Any, requester_id: Any = None) -> PhotoDetailsResult:
        """
        Recupera el detalle de una foto listo para mostrar.

        Args:
            photo_id (Any): ID de la foto; se acepta texto numérico.
            requester_id (Any): ID del usuario, sólo necesario con enforce_ownership.

        Returns:
            PhotoDetailsResult: El detalle, o ok=False con el motivo. Nunca lanza
            por una foto inexistente.
        """
        photo, reason = self._load_photo(photo_id, requester_id)
        if photo is None:
            return PhotoDetailsResult(ok=False, reason=reason)

        details = PhotoDetails(
            id=photo.id,
            title=photo.title,
            description=photo.description,
            filename=photo.filename,
            image_url=f"{self.photos_url_prefix}{photo.filename}",
            date=photo.date,
            albums=self._album_names(photo),
            tags=self.format_tags(photo),
            resolution=photo.resolution
        )
        return PhotoDetailsResult(ok=True, photo=details)

    # =========== MÉTODOS PUT ===========
    def update_photo_details(
            self,
            photo_id: Any,
            title: Optional[str] = None,
            description: Optional[str] = None,
            requester_id: Any = None
        ) -> OperationResult:
        """
        Actualiza título y descripción. Un valor ausente o en blanco conserva el
        valor actual; uno con contenido se guarda tal cual.

        Args:
            photo_id (Any): ID de la foto.
            title (Optional[str]): Nuevo título.
            description (Optional[str]): Nueva descripción.
            requester_id (Any): ID del usuario, sólo necesario con enforce_ownership.

        Returns:
            OperationResult: ok=True si se guardó.
        """
        photo, reason = self._load_photo(photo_id, requester_id)
        if photo is None:
            return OperationResult.failure(reason)

        changes = {}
        if not is_blank(title):
            changes["title"] = title
        if not is_blank(description):
            changes["description"] = description

        if not changes:
            return OperationResult.success()

        result = self._persist(photo.model_copy(update=changes), fields=tuple(changes))
        if result.ok:
            self.logger.info(f"Foto {photo.id} actualizada: {', '.join(changes)}")
        return result

    def add_tag(self, photo_id: Any, tag: str, requester_id: Any = None) -> OperationResult:
        """
        Añade una etiqueta si no existe ya alguna equivalente sin distinguir mayúsculas.

        Args:
            photo_id (Any): ID de la foto.
            tag (str): Etiqueta nueva.
            requester_id (Any): ID del usuario, sólo necesario con enforce_ownership.

        Returns:
            OperationResult: ok=True si se añadió.
        """
        photo, reason = self._load_photo(photo_id, requester_id)
        if photo is None:
            return OperationResult.failure(reason)

        if is_blank(tag):
            return OperationResult.failure("Tag is required")

        new_tag = tag.strip()
        if find_same_key(photo.tags, new_tag) is not None:
            return OperationResult.failure("Tag already exists")

        result = self._persist(photo.model_copy(update={"tags": [*photo.tags, new_tag]}), fields=("tags",))
        if result.ok:
            self.logger.info(f"Etiqueta '{new_tag}' añadida a la foto {photo.id}")
        return result

"""
Módulo de servicio para la consulta de álbumes y sus fotos.
"""
import logging
from typing import Any, List, Optional

from catalog.persistence import CatalogStore
from catalog.utils import coerce_id, is_blank, same_key
from catalog.schemas import Album, AlbumSummary, AlbumPhotos, PhotoSummary, AlbumReportResult

REPORT_HEADER = "filename,resolution,tags"

class AlbumService:
    """
    Servicio de alto nivel de lectura de álbumes. Los álbumes son datos de
    referencia, así que aquí no hay operaciones de escritura.
    """
    def __init__(self, store: CatalogStore):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.store = store

    # =========== MÉTODOS GET ===========
    def list_albums(self) -> List[AlbumSummary]:
        """
        Recupera todos los álbumes en el orden del almacenamiento.

        Returns:
            List[AlbumSummary]: Lista de álbumes (id y nombre).
        """
        return [AlbumSummary(id=album.id, name=album.name) for album in self.store.list_albums()]

    def list_photos_by_album(self, album_id: Any) -> AlbumPhotos:
        """
        Recupera las fotos de un álbum con el nombre del álbum resuelto.

        Args:
            album_id (Any): ID del álbum; se acepta texto numérico.

        Returns:
            AlbumPhotos: Nombre del álbum (vacío si no existe), fotos y total.
        """
        album_key = coerce_id(album_id)
        if album_key is None:
            self.logger.warning(f"ID de álbum no válido: {album_id!r}")
            return AlbumPhotos()

        album = self.store.get_album_by_id(album_key)
        album_name = album.name if album else ""

        photos = [
            PhotoSummary(id=photo.id, title=photo.title or photo.filename)
            for photo in self.store.list_photos_by_album(album_key)
        ]
        return AlbumPhotos(album_name=album_name, photos=photos, count=len(photos))

    def find_album_by_name(self, name: str) -> Optional[Album]:
        """
        Busca un álbum por nombre sin distinguir mayúsculas.

        Args:
            name (str): Nombre buscado.

        Returns:
            Optional[Album]: El primer álbum que coincide, o None.
        """
        # Primero la coincidencia exacta, que el backend puede resolver con un índice
        album = self.store.get_album_by_name(name)
        if album:
            return album

        for candidate in self.store.list_albums():
            if same_key(candidate.name, name):
                return candidate
        return None

    # =========== REPORTES ===========
    def build_album_report(self, album_name: str) -> AlbumReportResult:
        """
        Construye el listado de un álbum: una cabecera fija y una línea por foto
        con nombre de archivo, resolución y etiquetas separadas por ":".

        Args:
            album_name (str): Nombre del álbum, sin distinguir mayúsculas.

        Returns:
            AlbumReportResult: Las líneas del reporte o el motivo del fallo.
        """
        if is_blank(album_name):
            return AlbumReportResult(ok=False, reason="Album name is required")

        album = self.find_album_by_name(album_name.strip())
        if not album:
            return AlbumReportResult(ok=False, reason="Album not found")

        lines = [REPORT_HEADER]
        for photo in self.store.list_photos_by_album(album.id):
            lines.append(f"{photo.filename},{photo.resolution or ''},{':'.join(photo.tags)}")

        self.logger.info(f"Reporte del álbum {album.id} generado con {len(lines) - 1} fotos")
        return AlbumReportResult(ok=True, lines=lines)

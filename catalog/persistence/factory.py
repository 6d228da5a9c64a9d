"""
Selección del backend de almacenamiento según la configuración.
"""
import logging

from catalog.enums import StorageBackend
from catalog.settings import Settings
from catalog.errors import ConfigurationError
from catalog.persistence.base_store import CatalogStore
from catalog.persistence.json_store import JsonCatalogStore
from catalog.persistence.sql_store import SqlCatalogStore
from catalog.persistence.mongo_store import MongoCatalogStore

logger = logging.getLogger("StoreFactory")

def build_store(settings: Settings) -> CatalogStore:
    """
    Construye (sin abrir) el store configurado en STORAGE_BACKEND.

    Args:
        settings (Settings): Configuración de la aplicación.

    Returns:
        CatalogStore: Store listo para open().

    Raises:
        ConfigurationError: Si el backend no existe o le faltan credenciales.
    """
    backend = settings.STORAGE_BACKEND
    logger.info(f"Usando backend de almacenamiento '{backend}'")

    if backend == StorageBackend.JSON:
        return JsonCatalogStore(
            albums_file=settings.albums_file,
            photos_file=settings.photos_file,
            users_file=settings.users_file
        )

    if backend == StorageBackend.MONGO:
        return MongoCatalogStore.from_settings(settings)

    if backend == StorageBackend.SQL:
        return SqlCatalogStore.from_settings(settings)

    raise ConfigurationError(
        message=f"Backend de almacenamiento desconocido: {backend}. Opciones: {', '.join(StorageBackend.get_backends_list())}",
        missing_fields=["STORAGE_BACKEND"]
    )

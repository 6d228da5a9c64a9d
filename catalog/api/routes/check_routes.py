"""
Rutas de comprobación: estado del servicio y del almacenamiento, e
información de la instancia.
"""
import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from catalog.errors import StorageError
from catalog.settings import Settings
from catalog.persistence import CatalogStore
from catalog.api.dependencies import get_settings_instance, get_store

router = APIRouter(prefix="/check", tags=["Check-Health"])
logger = logging.getLogger("CheckRoutes")

@router.get("/health", status_code=status.HTTP_200_OK)
def health_check(store: CatalogStore = Depends(get_store)):
    """
    Comprueba que el backend responde con una lectura de álbumes. Si falla,
    responde 503 sin detalles del error, que quedan en el log.
    """
    try:
        albums = len(store.list_albums())
    except StorageError as e:
        logger.warning(f"Health check con el almacenamiento caído: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "DEGRADED", "storage": "unavailable"}
        )

    return {"status": "OK", "storage": "available", "albums": albums}

@router.get("/server-info", status_code=status.HTTP_200_OK)
def get_server_info(
    settings: Settings = Depends(get_settings_instance),
    store: CatalogStore = Depends(get_store)
):
    return {
        "server_name": settings.APP_NAME,
        "server_version": settings.APP_VERSION,
        "storage_backend": str(settings.STORAGE_BACKEND),
        "store": store.__class__.__name__,
    }

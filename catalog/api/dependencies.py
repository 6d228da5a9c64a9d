"""
Dependencias para inyectar en la API
"""
from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from catalog.settings import Settings
from catalog.persistence import CatalogStore
from catalog.services import AlbumService, PhotosService

# ============ Proveedores de Servicios ============
def get_settings_instance(request: Request) -> Settings:
    """Provee la instancia de Settings con la que se creó la app."""
    return request.app.state.settings

def get_store(request: Request) -> CatalogStore:
    """Provee el store compartido, abierto en el arranque de la aplicación."""
    return request.app.state.store

def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates

def get_albums_service(store: CatalogStore = Depends(get_store)) -> AlbumService:
    """
    Provee AlbumService.

    Args:
        store (CatalogStore): Store de la aplicación.

    Returns:
        AlbumService: Instancia de AlbumService.
    """
    return AlbumService(store)

def get_photos_service(
    store: CatalogStore = Depends(get_store),
    settings: Settings = Depends(get_settings_instance)
) -> PhotosService:
    """
    Provee PhotosService. La interfaz web no tiene inicio de sesión, así que
    no se comprueba la propiedad de las fotos.

    Args:
        store (CatalogStore): Store de la aplicación.
        settings (Settings): Configuración de la aplicación.

    Returns:
        PhotosService: Instancia de PhotosService.
    """
    return PhotosService(store, settings=settings, enforce_ownership=False)

"""
Módulo de rutas JSON para la consulta de álbumes.
"""
from typing import List
from fastapi import APIRouter, Depends

from catalog.services import AlbumService
from catalog.api.dependencies import get_albums_service
from catalog.schemas import AlbumSummary, AlbumPhotos

router = APIRouter(prefix="/albums", tags=["Albums"])

@router.get("/", response_model=List[AlbumSummary])
def get_albums(album_service: AlbumService = Depends(get_albums_service)):
    """Lista todos los álbumes."""
    return album_service.list_albums()

@router.get("/{album_id}/photos", response_model=AlbumPhotos)
def get_album_photos(album_id: str, album_service: AlbumService = Depends(get_albums_service)):
    """
    Lista las fotos de un álbum. Un álbum inexistente devuelve un listado vacío
    con album_name vacío, igual que la página HTML.
    """
    return album_service.list_photos_by_album(album_id)

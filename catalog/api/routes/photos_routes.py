"""
Módulo de rutas JSON para la consulta y edición de fotografías.
"""
from fastapi import APIRouter, Depends

from catalog.services import PhotosService
from catalog.api.dependencies import get_photos_service
from catalog.errors import PermissionDeniedError, ResourceNotFoundError, ValidationError
from catalog.schemas import OperationResult, PhotoDetails, PhotoUpdate

router = APIRouter(prefix="/photos", tags=["Photos"])

NOT_FOUND_REASONS = ("Photo not found", "Invalid photo id")
ACCESS_DENIED = "Access denied"

def raise_for_result(result: OperationResult, photo_id: str) -> None:
    """Convierte un resultado fallido en la excepción que mapea el handler global."""
    if result.ok:
        return
    if result.reason in NOT_FOUND_REASONS:
        raise ResourceNotFoundError(message=result.reason, details={"photo_id": photo_id})
    if result.reason == ACCESS_DENIED:
        raise PermissionDeniedError(message=result.reason, details={"photo_id": photo_id})
    raise ValidationError(message=result.reason or "Update failed", details={"photo_id": photo_id})

@router.get("/{photo_id}", response_model=PhotoDetails)
def get_photo_detail(photo_id: str, photo_service: PhotosService = Depends(get_photos_service)):
    """
    Obtiene el detalle de una fotografía con sus álbumes resueltos.
    """
    result = photo_service.get_photo_details(photo_id)
    raise_for_result(result, photo_id)
    return result.photo

@router.patch("/{photo_id}", response_model=PhotoDetails)
def update_photo(
    photo_id: str,
    photo_update: PhotoUpdate,
    photo_service: PhotosService = Depends(get_photos_service)
):
    """
    Actualiza título y descripción. Los campos ausentes o en blanco se conservan.
    """
    result = photo_service.update_photo_details(
        photo_id,
        title=photo_update.title,
        description=photo_update.description
    )
    raise_for_result(result, photo_id)

    details = photo_service.get_photo_details(photo_id)
    raise_for_result(details, photo_id)
    return details.photo

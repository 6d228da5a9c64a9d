"""
Páginas HTML renderizadas en el servidor: listado de álbumes, fotos de un
álbum, detalle de foto y formulario de edición.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.templating import Jinja2Templates
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from catalog.services import AlbumService, PhotosService
from catalog.api.dependencies import get_albums_service, get_photos_service, get_templates

router = APIRouter(tags=["Pages"], include_in_schema=False)

@router.get("/", response_class=HTMLResponse)
def albums_page(
    request: Request,
    album_service: AlbumService = Depends(get_albums_service),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Portada: lista de álbumes."""
    albums = album_service.list_albums()
    return templates.TemplateResponse(request, "albums.html", {"albums": albums})

@router.get("/album/{album_id}", response_class=HTMLResponse)
def album_details_page(
    album_id: str,
    request: Request,
    album_service: AlbumService = Depends(get_albums_service),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Fotos de un álbum y su total."""
    info = album_service.list_photos_by_album(album_id)
    return templates.TemplateResponse(request, "album_details.html", info.model_dump())

@router.get("/photo-details/{photo_id}", response_class=HTMLResponse)
def photo_details_page(
    photo_id: str,
    request: Request,
    photo_service: PhotosService = Depends(get_photos_service),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Detalle de una foto."""
    result = photo_service.get_photo_details(photo_id)
    if not result.ok:
        return PlainTextResponse("Photo not found", status_code=status.HTTP_404_NOT_FOUND)
    return templates.TemplateResponse(request, "photo_details.html", {"photo": result.photo})

@router.get("/edit-photo", response_class=HTMLResponse)
def edit_photo_form(
    request: Request,
    pid: Optional[str] = None,
    photo_service: PhotosService = Depends(get_photos_service),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Formulario de edición con los valores actuales."""
    result = photo_service.get_photo_details(pid)
    if not result.ok:
        return PlainTextResponse("Photo not found", status_code=status.HTTP_404_NOT_FOUND)
    return templates.TemplateResponse(request, "edit_photo.html", {"photo": result.photo, "error": None})

@router.post("/edit-photo", response_class=HTMLResponse)
def edit_photo_submit(
    request: Request,
    pid: str = Form(""),
    title: str = Form(""),
    description: str = Form(""),
    photo_service: PhotosService = Depends(get_photos_service),
    templates: Jinja2Templates = Depends(get_templates)
):
    """
    Guarda el formulario siguiendo Post/Redirect/Get: si va bien redirige al
    detalle; si falla vuelve a mostrar el formulario con el motivo.
    """
    result = photo_service.update_photo_details(
        pid,
        title=title.strip() or None,
        description=description.strip() or None
    )
    if result.ok:
        return RedirectResponse(f"/photo-details/{pid.strip()}", status_code=status.HTTP_303_SEE_OTHER)

    current = photo_service.get_photo_details(pid)
    photo = current.photo if current.ok else {"id": pid, "title": "", "description": ""}
    return templates.TemplateResponse(
        request,
        "edit_photo.html",
        {"photo": photo, "error": result.reason or "Update failed"},
        status_code=status.HTTP_400_BAD_REQUEST
    )

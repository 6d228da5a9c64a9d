from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

class Photo(BaseModel):
    """
    Registro completo de una foto. Sólo title, description y tags son editables;
    el resto se trata como inmutable.

    Args:
        id (int): ID numérico único.
        filename (str): Nombre del archivo de imagen.
        title (str): Título, puede estar vacío.
        description (str): Descripción, puede estar vacía.
        date (Optional[str]): Fecha en texto libre.
        resolution (Optional[str]): Resolución, ej. "1920x1080".
        albums (List[int]): IDs de los álbumes a los que pertenece.
        tags (List[str]): Etiquetas libres.
        owner (Optional[int]): ID del usuario propietario.
    """
    id: StrictInt
    filename: str = ""
    title: str = ""
    description: str = ""
    date: Optional[str] = None
    resolution: Optional[str] = None
    albums: List[int] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    owner: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("filename", "title", "description", mode="before")
    @classmethod
    def none_as_empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("albums", "tags", mode="before")
    @classmethod
    def none_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

class PhotoSummary(BaseModel):
    """Foto dentro del listado de un álbum: el título cae al nombre de archivo si está vacío."""
    id: int
    title: str

class PhotoDetails(BaseModel):
    """
    Modelo de lectura para la vista de detalle.

    Args:
        id (int): ID de la foto.
        title (str): Título.
        description (str): Descripción.
        filename (str): Nombre de archivo.
        image_url (str): Ruta pública de la imagen.
        date (Optional[str]): Fecha.
        albums (List[str]): Nombres de los álbumes resueltos.
        tags (str): Etiquetas unidas por ", " o "None".
        resolution (Optional[str]): Resolución.
    """
    id: int
    title: str
    description: str
    filename: str
    image_url: str
    date: Optional[str] = None
    albums: List[str] = Field(default_factory=list)
    tags: str = "None"
    resolution: Optional[str] = None

class PhotoUpdate(BaseModel):
    """
    Esquema para actualizar metadatos editables. Un campo ausente o en blanco
    conserva el valor actual.
    """
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Atardecer en la playa",
                "description": "Última tarde de vacaciones"
            }
        }
    )

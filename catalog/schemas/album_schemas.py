from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from catalog.schemas.photos_schemas import PhotoSummary

class Album(BaseModel):
    """
    Registro de álbum tal como vive en el almacenamiento. Es dato de referencia:
    ninguna operación lo crea, renombra o elimina.

    Args:
        id (int): ID numérico, único y asignado externamente.
        name (str): Nombre del álbum.
        description (Optional[str]): Descripción del álbum.
    """
    id: StrictInt
    name: StrictStr
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class AlbumSummary(BaseModel):
    """Proyección mínima de un álbum para listados."""
    id: int
    name: str

class AlbumPhotos(BaseModel):
    """
    Fotos de un álbum con el nombre ya resuelto.

    Args:
        album_name (str): Nombre del álbum, vacío si el álbum no existe.
        photos (List[PhotoSummary]): Fotos que pertenecen al álbum.
        count (int): Cantidad de fotos.
    """
    album_name: str = ""
    photos: List[PhotoSummary] = Field(default_factory=list)
    count: int = 0

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "album_name": "Trip",
                    "photos": [{"id": 5, "title": "a.jpg"}],
                    "count": 1
                }
            ]
        }
    )

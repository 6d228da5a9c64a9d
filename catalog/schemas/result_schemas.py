from typing import List, Optional
from pydantic import BaseModel, Field

from catalog.schemas.photos_schemas import PhotoDetails

class OperationResult(BaseModel):
    """
    Resultado de una operación de negocio. Los casos "no encontrado" y de
    validación se devuelven aquí en lugar de lanzar excepciones.

    Args:
        ok (bool): True si la operación tuvo éxito.
        reason (Optional[str]): Motivo legible del fallo.
    """
    ok: bool
    reason: Optional[str] = None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "OperationResult":
        return cls(ok=False, reason=reason)

class PhotoDetailsResult(OperationResult):
    """Resultado de la consulta de detalle de una foto."""
    photo: Optional[PhotoDetails] = None

class AlbumReportResult(OperationResult):
    """Resultado del reporte de un álbum: una línea de cabecera más una por foto."""
    lines: List[str] = Field(default_factory=list)

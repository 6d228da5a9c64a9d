from typing import Any, Dict, Optional

class CatalogError(Exception):
    """
    Base de los errores del catálogo.

    Los casos "no encontrado" y las validaciones de entrada de los servicios
    no llegan aquí: se devuelven como resultados. Estas excepciones cubren
    las rutas de la API y los fallos de entorno.
    """
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def code(self) -> str:
        return self.__class__.__name__

    def to_payload(self, public_message: Optional[str] = None) -> Dict[str, Any]:
        """
        Cuerpo JSON de error de la API.

        Args:
            public_message (Optional[str]): Mensaje que sustituye al real y oculta
                los detalles, para errores que no deben exponerse.
        """
        return {
            "status": "error",
            "code": self.code,
            "message": public_message or self.message,
            "details": {} if public_message else self.details,
        }

class ValidationError(CatalogError):
    """Petición con datos que el servicio rechaza (ej. una edición fallida)."""

class ResourceNotFoundError(CatalogError):
    """La foto o el álbum pedido por la API no existe."""

class StorageError(CatalogError):
    """El backend falló: archivo ausente o corrupto, servidor inaccesible, error del driver."""

class PermissionDeniedError(CatalogError):
    """El usuario no es el propietario de la foto."""

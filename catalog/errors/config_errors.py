from typing import List, Optional

from catalog.errors.base import CatalogError

class ConfigurationError(CatalogError):
    """Excepción lanzada cuando faltan variables de entorno o la configuración es inválida."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message=message, details={"missing_fields": missing_fields or []})

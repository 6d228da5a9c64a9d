from catalog.errors.base import (
    CatalogError,
    ValidationError,
    ResourceNotFoundError,
    StorageError,
    PermissionDeniedError
)
from catalog.errors.config_errors import ConfigurationError

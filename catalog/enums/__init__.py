from catalog.enums.storage_backend_enum import StorageBackend

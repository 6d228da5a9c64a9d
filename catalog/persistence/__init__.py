from catalog.persistence.base_store import CatalogStore
from catalog.persistence.json_store import JsonCatalogStore
from catalog.persistence.factory import build_store
from catalog.persistence.sql_store import SqlCatalogStore
from catalog.persistence.mongo_store import MongoCatalogStore

from enum import StrEnum
from typing import List

class StorageBackend(StrEnum):
    JSON = "json"
    MONGO = "mongo"
    SQL = "sql"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value

    @staticmethod
    def get_backends_list() -> List[str]:
        return [backend.value for backend in StorageBackend]


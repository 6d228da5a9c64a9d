"""Lectura y escritura de archivos JSON con reemplazo atómico."""
import os
import json
from pathlib import Path
from typing import Any

from catalog.errors import StorageError

def read_json(path: Path) -> Any:
    """
    Lee y decodifica el JSON de path.

    Raises:
        StorageError: Si el archivo no existe o su contenido no es JSON válido.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise StorageError(f"JSON file not found: {path}", details={"file": str(path)}) from exc
    except json.JSONDecodeError as exc:
        raise StorageError(f"Invalid JSON in {path}", details={"file": str(path)}) from exc

def atomic_write_text(path: Path, data: str) -> None:
    """Escribe data en path a través de un temporal, para no dejar archivos a medias."""
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    path.parent.mkdir(parents=True, exist_ok=True)
    with tmp_path.open("w", encoding="utf-8") as handle:
        handle.write(data)
        handle.flush()
        os.fsync(handle.fileno())
    tmp_path.replace(path)

def write_json(path: Path, data: Any) -> None:
    """Serializa data con sangría de 2 espacios y la escribe de forma atómica."""
    try:
        payload = json.dumps(data, ensure_ascii=False, indent=2)
        atomic_write_text(path, payload)
    except OSError as exc:
        raise StorageError(f"Could not write {path}: {exc}", details={"file": str(path)}) from exc

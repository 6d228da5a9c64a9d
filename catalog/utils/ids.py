from typing import Any, Optional

# Rango de un entero con signo de 64 bits, el máximo que admiten SQLite y BSON
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1

def _in_range(value: int) -> Optional[int]:
    return value if MIN_ID <= value <= MAX_ID else None

def coerce_id(value: Any) -> Optional[int]:
    """
    Convierte un ID poco tipado (texto de una URL, de un formulario o de la consola)
    a entero.

    Sólo se aceptan dígitos ASCII con signo opcional: "1_000" o dígitos de otros
    alfabetos no son IDs. Los valores fuera de 64 bits tampoco, porque ningún
    backend puede almacenarlos.

    Args:
        value (Any): Valor recibido.

    Returns:
        Optional[int]: El ID numérico, o None si no es un entero válido.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return _in_range(value)
    if isinstance(value, float):
        return _in_range(int(value)) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not (digits.isascii() and digits.isdigit()):
            return None
        return _in_range(int(text))
    return None

from typing import Iterable, Optional

def casefold_key(value: str) -> str:
    """Clave normalizada para comparar textos sin distinguir mayúsculas."""
    return value.strip().casefold()

def same_key(left: str, right: str) -> bool:
    """True si ambos textos son iguales ignorando mayúsculas y espacios en los extremos."""
    return casefold_key(left) == casefold_key(right)

def find_same_key(candidates: Iterable[str], value: str) -> Optional[str]:
    """Devuelve el primer candidato equivalente a value, o None."""
    for candidate in candidates:
        if same_key(candidate, value):
            return candidate
    return None

def is_blank(value: object) -> bool:
    """True si value no es texto o sólo contiene espacios."""
    return not isinstance(value, str) or not value.strip()

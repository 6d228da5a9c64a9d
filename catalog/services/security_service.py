"""
Módulo de verificación de contraseñas.
"""
from passlib.context import CryptContext

# bcrypt es el esquema por defecto para hashes nuevos; "plaintext" sólo existe
# para aceptar las contraseñas en claro de los datos heredados y queda marcado
# como obsoleto para poder detectarlas.
pwd_context = CryptContext(schemes=["bcrypt", "plaintext"], deprecated=["plaintext"])

class SecurityService:
    """
    Servicio de verificación de credenciales de usuario.
    """
    @staticmethod
    def verify_password(plain_password: str, stored_password: str) -> bool:
        """
        Verifica una contraseña plana contra la contraseña almacenada.

        Args:
            plain_password (str): La contraseña introducida por el usuario.
            stored_password (str): Hash bcrypt o contraseña en claro heredada.

        Returns:
            bool: True si coinciden, False en caso contrario.
        """
        if not stored_password:
            return False
        return pwd_context.verify(plain_password, stored_password)

    @staticmethod
    def get_password_hash(password: str) -> str:
        """
        Hash una contraseña plana utilizando bcrypt.

        Args:
            password (str): La contraseña plana a hashear.

        Returns:
            str: La contraseña hasheada.
        """
        return pwd_context.hash(password)

    @staticmethod
    def is_plaintext(stored_password: str) -> bool:
        """True si la contraseña almacenada no está hasheada."""
        return pwd_context.needs_update(stored_password)

"""
Módulo de servicio para la autenticación de los usuarios.
"""
import logging
from typing import Optional

from catalog.schemas import UserLogin, UserPublic
from catalog.persistence import CatalogStore
from catalog.services.security_service import SecurityService

class UserService:
    """
    Servicio de alto nivel para la lógica de negocio de los usuarios.
    Los usuarios son de sólo lectura: no hay registro ni sesiones.
    """
    def __init__(self, store: CatalogStore):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.store = store
        self.security_service = SecurityService()

    def authenticate_user(self, login_credentials: UserLogin) -> Optional[UserPublic]:
        """
        Autenticación de usuario a partir de credenciales de inicio de sesión.
        Usuario inexistente y contraseña incorrecta dan el mismo resultado.

        Args:
            login_credentials (UserLogin): Credenciales de inicio de sesión.

        Returns:
            Optional[UserPublic]: Usuario autenticado sin contraseña, o None si falla.
        """
        username = login_credentials.username.strip()
        if not username:
            return None

        user = self.store.get_user_by_username(username)
        if not user:
            self.logger.info("Intento de inicio de sesión fallido")
            return None

        if not self.security_service.verify_password(login_credentials.password, user.password):
            self.logger.info("Intento de inicio de sesión fallido")
            return None

        if self.security_service.is_plaintext(user.password):
            self.logger.warning(f"El usuario {user.id} tiene la contraseña almacenada en texto plano")

        self.logger.info(f"Usuario {user.id} autenticado")
        return user.to_public()

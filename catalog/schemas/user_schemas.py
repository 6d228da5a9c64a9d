from pydantic import BaseModel, ConfigDict, Field, StrictInt

class UserPublic(BaseModel):
    """
    Esquema de respuesta seguro: sin contraseñas.

    Args:
        id (int): Identificador único.
        username (str): Nombre de usuario.
    """
    id: StrictInt
    username: str

    model_config = ConfigDict(from_attributes=True)

class User(UserPublic):
    """
    Registro de usuario tal como está almacenado. El campo password puede ser
    texto plano (fixtures heredados) o un hash bcrypt.
    """
    password: str = Field(..., repr=False)

    def to_public(self) -> UserPublic:
        return UserPublic(id=self.id, username=self.username)

class UserLogin(BaseModel):
    """Credenciales de inicio de sesión."""
    username: str
    password: str

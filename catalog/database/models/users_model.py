from typing import TYPE_CHECKING
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database.db_base import Base
if TYPE_CHECKING:
    from catalog.database.models.photos_model import PhotoDatabaseModel

class UsersDatabaseModel(Base):
    """Modelo de tabla de usuarios."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    username: Mapped[str] = mapped_column(String(50), unique=True)
    # Texto plano heredado o hash bcrypt, ver SecurityService
    password: Mapped[str] = mapped_column(String(255))

    # Relación 1:N con las fotos
    photos: Mapped[list["PhotoDatabaseModel"]] = relationship(back_populates="owner")

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"

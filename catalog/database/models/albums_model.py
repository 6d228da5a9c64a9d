from typing import TYPE_CHECKING
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database.db_base import Base
from catalog.database.models.associations import album_photos
if TYPE_CHECKING:
    from catalog.database.models.photos_model import PhotoDatabaseModel

class AlbumDatabaseModel(Base):
    """Modelo de tabla para álbumes."""
    __tablename__ = "albums"

    # El id viene de los datos de origen, no se autogenera
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    description: Mapped[str] = mapped_column(String, nullable=True)

    # Relación N:N con las fotos
    photos: Mapped[list["PhotoDatabaseModel"]] = relationship(secondary=album_photos, back_populates="albums")

    def __repr__(self) -> str:
        return f"<Album id={self.id} name={self.name!r}>"

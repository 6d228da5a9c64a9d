from typing import TYPE_CHECKING, List, Optional
from sqlalchemy import JSON, Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database.db_base import Base
from catalog.database.models.associations import album_photos
if TYPE_CHECKING:
    from catalog.database.models.users_model import UsersDatabaseModel
    from catalog.database.models.albums_model import AlbumDatabaseModel

class PhotoDatabaseModel(Base):
    """Modelo de tabla para fotos."""
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    filename: Mapped[str] = mapped_column(String, nullable=False, default="")
    title: Mapped[str] = mapped_column(String, nullable=False, default="")
    description: Mapped[str] = mapped_column(String, nullable=False, default="")
    date: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    resolution: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    owner_id: Mapped[Optional[int]] = mapped_column(ForeignKey("users.id"), nullable=True)

    # Relación con User
    owner: Mapped[Optional["UsersDatabaseModel"]] = relationship(back_populates="photos")

    # Relación N:N con los albums usando la tabla importada
    albums: Mapped[list["AlbumDatabaseModel"]] = relationship(
        secondary=album_photos,
        back_populates="photos",
        order_by="AlbumDatabaseModel.id"
    )

    def __repr__(self) -> str:
        return f"<Photo id={self.id} filename={self.filename!r}>"

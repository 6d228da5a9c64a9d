from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """Base declarativa de todos los modelos de tabla."""
    pass

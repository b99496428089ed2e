"""Series SQLAlchemy model."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import String, Integer, DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class SeriesModel(Base):
    """SQLAlchemy model for stored series."""
    
    __tablename__ = "series"
    
    # Primary key
    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4
    )
    
    # Unique constraints back up the validators against concurrent writers
    code: Mapped[str] = mapped_column(
        String(10),
        unique=True,
        index=True,
        nullable=False
    )
    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False
    )
    
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    expansions: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    
    def __repr__(self) -> str:
        return f"<SeriesModel(id={self.id}, code={self.code})>"

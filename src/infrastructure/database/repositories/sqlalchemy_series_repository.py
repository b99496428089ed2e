"""SQLAlchemy implementation of series repository."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import SeriesRecord
from domain.repositories import ISeriesRepository
from domain.value_objects import Page
from infrastructure.database.models import SeriesModel


class SQLAlchemySeriesRepository(ISeriesRepository):
    """Concrete implementation of ISeriesRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def exists_by_id(self, series_id: UUID) -> bool:
        """Check if a series with this identifier is stored."""
        stmt = select(SeriesModel.id).where(SeriesModel.id == series_id).limit(1)
        return await self.session.scalar(stmt) is not None
    
    async def exists_by_code(self, code: str, exclude_id: Optional[UUID] = None) -> bool:
        """Check if a series other than `exclude_id` holds this code."""
        stmt = select(SeriesModel.id).where(SeriesModel.code == code)
        if exclude_id is not None:
            stmt = stmt.where(SeriesModel.id != exclude_id)
        return await self.session.scalar(stmt.limit(1)) is not None
    
    async def exists_by_name(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        """Check if a series other than `exclude_id` holds this name."""
        stmt = select(SeriesModel.id).where(SeriesModel.name == name)
        if exclude_id is not None:
            stmt = stmt.where(SeriesModel.id != exclude_id)
        return await self.session.scalar(stmt.limit(1)) is not None
    
    async def find_by_id(self, series_id: UUID) -> Optional[SeriesRecord]:
        """Retrieve a stored series by identifier."""
        model = await self.session.get(SeriesModel, series_id)
        
        if model is None:
            return None
        
        return self._model_to_record(model)
    
    async def find_by_code(self, code: str) -> Optional[SeriesRecord]:
        """Retrieve a stored series by code."""
        stmt = select(SeriesModel).where(SeriesModel.code == code)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_record(model)
    
    async def find_all(self, page: int, page_size: int) -> Page[SeriesRecord]:
        """Retrieve one zero-based page of stored series, oldest first."""
        total = await self.session.scalar(select(func.count()).select_from(SeriesModel))
        
        stmt = (
            select(SeriesModel)
            .order_by(SeriesModel.created_at, SeriesModel.code)
            .offset(page * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        
        return Page(
            items=[self._model_to_record(model) for model in result.scalars()],
            page=page,
            page_size=page_size,
            total_items=total or 0,
        )
    
    async def save(self, record: SeriesRecord) -> SeriesRecord:
        """Insert a new series or upsert an existing one by identifier."""
        model = None
        if record.id is not None:
            model = await self.session.get(SeriesModel, record.id)
        
        if model is None:
            model = self._record_to_model(record)
            self.session.add(model)
        else:
            self._update_model_from_record(model, record)
        
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_record(model)
    
    async def delete_by_id(self, series_id: UUID) -> None:
        """Delete a stored series; a missing one is ignored."""
        model = await self.session.get(SeriesModel, series_id)

        if model is None:
            return

        await self.session.delete(model)
        await self.session.flush()
    
    def _record_to_model(self, record: SeriesRecord) -> SeriesModel:
        """Convert stored record to a new ORM model."""
        now = _utc_now()
        return SeriesModel(
            id=record.id or uuid4(),
            code=record.code,
            name=record.name,
            release_year=record.release_year,
            image_url=record.image_url,
            expansions=record.expansions,
            created_at=record.created_at or now,
            updated_at=record.updated_at or now,
        )
    
    def _update_model_from_record(self, model: SeriesModel, record: SeriesRecord) -> None:
        """Update ORM model from record; created_at is never touched."""
        model.code = record.code
        model.name = record.name
        model.release_year = record.release_year
        model.image_url = record.image_url
        model.expansions = record.expansions
        model.updated_at = record.updated_at or _utc_now()
    
    def _model_to_record(self, model: SeriesModel) -> SeriesRecord:
        """Convert ORM model to stored record."""
        return SeriesRecord(
            id=model.id,
            code=model.code,
            name=model.name,
            release_year=model.release_year,
            image_url=model.image_url,
            expansions=model.expansions,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


def _utc_now() -> datetime:
    # Naive UTC, matching the DateTime columns
    return datetime.now(timezone.utc).replace(tzinfo=None)

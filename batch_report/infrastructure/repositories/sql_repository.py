"""SQLAlchemy-backed repository over the ``batch_record`` table."""
from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Sequence

from sqlalchemy import Date, DateTime, Engine, Integer, String, create_engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from batch_report.domain.models import LoadedRecord
from batch_report.domain.repositories import BatchRecordRepository
from batch_report.errors import RecordSourceError


class Base(DeclarativeBase):
    pass


class BatchRecordRow(Base):
    __tablename__ = "batch_record"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    asset_class: Mapped[str] = mapped_column(String(255), nullable=False)
    product: Mapped[str] = mapped_column(String(255), nullable=False)
    entity: Mapped[str] = mapped_column(String(255), nullable=False)
    scenario: Mapped[str] = mapped_column(String(255), nullable=False)
    batch_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    # Ingestion time; NULL for rows written before the column existed.
    loaded_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    def to_record(self) -> LoadedRecord:
        return LoadedRecord(
            asset_class=self.asset_class,
            product=self.product,
            entity=self.entity,
            scenario=self.scenario,
            batch_date=self.batch_date,
            loaded_at=self.loaded_at,
        )


class SqlBatchRecordRepository(BatchRecordRepository):
    def __init__(self, engine: Engine | str) -> None:
        self._engine = create_engine(engine) if isinstance(engine, str) else engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_schema(self) -> None:
        try:
            Base.metadata.create_all(self._engine)
        except SQLAlchemyError as exc:
            raise RecordSourceError(f"Could not create the batch_record table at {self._engine.url!r}: {exc}") from exc

    def add_records(self, records: Iterable[LoadedRecord], loaded_at: datetime | None = None) -> int:
        """Insert records; ``loaded_at`` stamps rows that carry no ingestion time."""
        rows = [
            BatchRecordRow(
                asset_class=record.asset_class,
                product=record.product,
                entity=record.entity,
                scenario=record.scenario,
                batch_date=record.batch_date,
                loaded_at=record.loaded_at or loaded_at,
            )
            for record in records
        ]
        with Session(self._engine) as session, session.begin():
            session.add_all(rows)
        return len(rows)

    def find_by_batch_date(self, batch_date: date) -> Sequence[LoadedRecord]:
        stmt = select(BatchRecordRow).where(BatchRecordRow.batch_date == batch_date).order_by(BatchRecordRow.id)
        return self._fetch(stmt)

    def find_by_batch_date_range(self, start: date, end: date) -> Sequence[LoadedRecord]:
        stmt = (
            select(BatchRecordRow)
            .where(BatchRecordRow.batch_date.between(start, end))
            .order_by(BatchRecordRow.batch_date, BatchRecordRow.id)
        )
        return self._fetch(stmt)

    def _fetch(self, stmt) -> list[LoadedRecord]:
        try:
            with Session(self._engine) as session:
                return [row.to_record() for row in session.scalars(stmt)]
        except SQLAlchemyError as exc:
            raise RecordSourceError(f"Could not read batch records from {self._engine.url!r}: {exc}") from exc

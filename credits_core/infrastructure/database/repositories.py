"""Data access layer for credit applications"""

from typing import List, Optional
from sqlalchemy.orm import Session
from credits_core.infrastructure.database.models import CreditApplicationRecord
from credits_core.domain.models import CreditApplication
from credits_core.domain.store import ApplicationStore


def to_domain(record: CreditApplicationRecord) -> CreditApplication:
    return CreditApplication(
        id=record.id,
        customer_name=record.customer_name,
        amount=record.amount,
        type=record.type,
        status=record.status,
        created_at=record.created_at,
    )


class SqlAlchemyApplicationStore(ApplicationStore):
    """ApplicationStore backed by a SQLAlchemy session.

    Writes are flushed, never committed; the request's transaction scope
    decides whether they stick.
    """

    def __init__(self, db: Session):
        self.db = db

    def save(self, application: CreditApplication) -> CreditApplication:
        """Insert or update, leaving created_at to the database"""
        if application.id is None:
            record = CreditApplicationRecord(
                customer_name=application.customer_name,
                amount=application.amount,
                type=application.type,
                status=application.status,
            )
            self.db.add(record)
        else:
            record = self.db.get(CreditApplicationRecord, application.id)
            if record is None:
                raise LookupError(f"Cannot update missing credit application {application.id}")
            record.customer_name = application.customer_name
            record.amount = application.amount
            record.type = application.type
            record.status = application.status

        self.db.flush()  # Get ID without committing
        self.db.refresh(record)  # Load server-generated created_at
        return to_domain(record)

    def find_by_id(self, application_id: int) -> Optional[CreditApplication]:
        record = self.db.get(CreditApplicationRecord, application_id)
        return to_domain(record) if record is not None else None

    def find_all(self) -> List[CreditApplication]:
        records = self.db.query(CreditApplicationRecord).order_by(CreditApplicationRecord.id).all()
        return [to_domain(r) for r in records]

    def exists_by_id(self, application_id: int) -> bool:
        return (
            self.db.query(CreditApplicationRecord.id)
            .filter(CreditApplicationRecord.id == application_id)
            .first()
            is not None
        )

    def delete_by_id(self, application_id: int) -> None:
        self.db.query(CreditApplicationRecord).filter(CreditApplicationRecord.id == application_id).delete(
            synchronize_session="fetch"
        )
        self.db.flush()

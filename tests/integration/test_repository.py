"""Integration tests for the SQLAlchemy application store and the service on top of it"""

import pytest
from decimal import Decimal
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from credits_core.domain.exceptions import CreditApplicationNotFoundError
from credits_core.domain.models import CreditApplication, CreditRequest, CreditStatus, CreditType
from credits_core.domain.service import CreditApplicationService
from credits_core.infrastructure.database.models import CreditApplicationRecord
from credits_core.infrastructure.database.repositories import SqlAlchemyApplicationStore
from credits_core.infrastructure.database.session import transaction


@pytest.fixture
def store(db: Session) -> SqlAlchemyApplicationStore:
    return SqlAlchemyApplicationStore(db)


@pytest.fixture
def service(store: SqlAlchemyApplicationStore) -> CreditApplicationService:
    return CreditApplicationService(store, Decimal("50000.00"))


def test_save_assigns_id_and_created_at(store: SqlAlchemyApplicationStore):
    """Test insert populates store-owned fields"""
    application = CreditApplication(
        customer_name="Juan B",
        amount=Decimal("4500.00"),
        type=CreditType.PERSONAL,
        status=CreditStatus.APPROVED,
    )

    saved = store.save(application)

    assert saved.id is not None
    assert saved.created_at is not None
    assert saved.amount == Decimal("4500.00")
    assert saved.type is CreditType.PERSONAL
    assert saved.status is CreditStatus.APPROVED


def test_save_existing_keeps_created_at(store: SqlAlchemyApplicationStore):
    """Test update leaves the creation timestamp alone"""
    saved = store.save(
        CreditApplication("Old Name", Decimal("60000.00"), CreditType.PERSONAL, CreditStatus.REJECTED)
    )

    updated = store.save(
        CreditApplication(
            "New Name",
            Decimal("25000.00"),
            CreditType.BUSINESS,
            CreditStatus.APPROVED,
            id=saved.id,
            created_at=None,
        )
    )

    assert updated.id == saved.id
    assert updated.created_at == saved.created_at
    assert updated.customer_name == "New Name"
    assert store.find_by_id(saved.id) == updated


def test_exists_and_delete(store: SqlAlchemyApplicationStore):
    """Test existence check tracks deletion"""
    saved = store.save(CreditApplication("Juan B", Decimal("100.00"), CreditType.PERSONAL, CreditStatus.APPROVED))

    assert store.exists_by_id(saved.id) is True
    store.delete_by_id(saved.id)

    assert store.exists_by_id(saved.id) is False
    assert store.find_by_id(saved.id) is None


def test_find_all_empty(store: SqlAlchemyApplicationStore):
    """Test empty store returns empty list"""
    assert store.find_all() == []


def test_service_lifecycle(service: CreditApplicationService, db: Session):
    """Test create, re-evaluate on update, and terminal delete against a real database"""
    with transaction(db):
        created = service.create(CreditRequest("Juan B", Decimal("60000.00"), CreditType.PERSONAL))
    assert created.status is CreditStatus.REJECTED

    with transaction(db):
        updated = service.update(created.id, CreditRequest("Juan B", Decimal("25000.00"), CreditType.PERSONAL))
    assert updated.status is CreditStatus.APPROVED
    assert service.find_by_id(created.id) == service.find_by_id(created.id) == updated

    with transaction(db):
        service.delete(created.id)

    with pytest.raises(CreditApplicationNotFoundError):
        service.find_by_id(created.id)
    with pytest.raises(CreditApplicationNotFoundError):
        service.delete(created.id)


def test_failed_transaction_rolls_back(service: CreditApplicationService, db: Session):
    """Test an error inside the transaction scope leaves nothing behind"""
    with pytest.raises(RuntimeError):
        with transaction(db):
            service.create(CreditRequest("Juan B", Decimal("4500.00"), CreditType.PERSONAL))
            raise RuntimeError("abort")

    assert service.find_all() == []


def test_primary_key_is_64_bit():
    """Test ID column is BIGINT on PostgreSQL and rowid-backed INTEGER on SQLite"""
    id_type = CreditApplicationRecord.__table__.c.id.type

    assert id_type.compile(dialect=postgresql.dialect()) == "BIGINT"
    assert id_type.compile(dialect=sqlite.dialect()) == "INTEGER"


def test_store_handles_largest_id(store: SqlAlchemyApplicationStore):
    """Test lookups at the top of the key range miss cleanly"""
    largest = 2**63 - 1

    assert store.find_by_id(largest) is None
    assert store.exists_by_id(largest) is False

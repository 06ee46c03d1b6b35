"""Pytest fixtures for testing"""

import os

# Point the application engine at SQLite before the app module is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from credits_core.api.main import create_app
from credits_core.infrastructure.database.models import Base
from credits_core.infrastructure.database.session import get_db
from credits_core.domain.models import CreditRequest, CreditType


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

MAX_AUTO_AMOUNT = Decimal("50000.00")


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def personal_request() -> CreditRequest:
    """Small personal credit well inside the limit"""
    return CreditRequest(customer_name="Juan B", amount=Decimal("4500.00"), type=CreditType.PERSONAL)


@pytest.fixture
def business_request() -> CreditRequest:
    """Business credit one cent over the limit"""
    return CreditRequest(customer_name="Empresa Cambridge", amount=Decimal("50000.01"), type=CreditType.BUSINESS)

"""SQLAlchemy ORM models for credit applications"""

from sqlalchemy import BigInteger, Column, DateTime, Enum, Integer, Numeric, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

from credits_core.domain.models import CreditStatus, CreditType

Base = declarative_base()


class CreditApplicationRecord(Base):
    """Persisted credit application"""

    __tablename__ = "credits_applications"

    # SQLite only autoincrements INTEGER PRIMARY KEY
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    customer_name = Column(Text, nullable=False)
    amount = Column(Numeric(19, 2), nullable=False)
    type = Column(Enum(CreditType, name="credit_type", native_enum=False, length=16), nullable=False)
    status = Column(Enum(CreditStatus, name="credit_status", native_enum=False, length=16), nullable=False)
    # Set by the database on insert, never part of an UPDATE
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from credits_core.domain.models import (
    CUSTOMER_NAME_MAX_LENGTH,
    CUSTOMER_NAME_MIN_LENGTH,
    MIN_AMOUNT,
    CreditApplication,
    CreditRequest,
    CreditStatus,
    CreditType,
)


class CreditRequestSchema(BaseModel):
    """Request body for POST /api/credits and PUT /api/credits/{application_id}"""

    customer_name: str = Field(
        ...,
        min_length=CUSTOMER_NAME_MIN_LENGTH,
        max_length=CUSTOMER_NAME_MAX_LENGTH,
        description="Customer full name",
    )
    amount: Decimal = Field(
        ...,
        ge=MIN_AMOUNT,
        max_digits=19,
        decimal_places=2,
        description="Requested amount in currency units",
    )
    type: CreditType = Field(..., description="Credit category")

    @field_validator("customer_name")
    @classmethod
    def customer_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("customer name must not be blank")
        return value

    def to_domain(self) -> CreditRequest:
        return CreditRequest(customer_name=self.customer_name, amount=self.amount, type=self.type)


class CreditResponseSchema(BaseModel):
    """Credit application as returned by every read and write endpoint"""

    id: int
    customer_name: str
    amount: Decimal
    type: CreditType
    status: CreditStatus
    created_at: datetime

    @classmethod
    def from_domain(cls, application: CreditApplication) -> "CreditResponseSchema":
        return cls(
            id=application.id,
            customer_name=application.customer_name,
            amount=application.amount,
            type=application.type,
            status=application.status,
            created_at=application.created_at,
        )

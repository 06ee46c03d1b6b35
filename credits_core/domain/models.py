"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

# Request constraints shared by the API schema and the service guard
MIN_AMOUNT = Decimal("100.00")
AMOUNT_PLACES = Decimal("0.01")
CUSTOMER_NAME_MIN_LENGTH = 3
CUSTOMER_NAME_MAX_LENGTH = 100


class CreditType(str, Enum):
    """Credit category. Classification only, never affects evaluation."""

    PERSONAL = "PERSONAL"
    BUSINESS = "BUSINESS"


class CreditStatus(str, Enum):
    """Decision status of a credit application"""

    PENDING = "PENDING"  # pre-evaluation only, never persisted or returned
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class CreditRequest:
    """Validated input for creating or replacing an application"""

    customer_name: str
    amount: Decimal
    type: CreditType


@dataclass
class CreditApplication:
    """Credit application record.

    ``id`` and ``created_at`` are assigned by the store on first save.
    """

    customer_name: str
    amount: Decimal
    type: CreditType
    status: CreditStatus
    id: Optional[int] = None
    created_at: Optional[datetime] = None

"""Eligibility evaluation - core business rule for credit decisions"""

from decimal import Decimal

from credits_core.domain.exceptions import InvalidCreditApplicationError
from credits_core.domain.models import (
    AMOUNT_PLACES,
    CUSTOMER_NAME_MAX_LENGTH,
    CUSTOMER_NAME_MIN_LENGTH,
    MIN_AMOUNT,
    CreditRequest,
    CreditStatus,
)


def evaluate(amount: Decimal, limit: Decimal) -> CreditStatus:
    """
    Decide a credit application against the auto-evaluation limit.

    Exact decimal comparison, inclusive at the boundary:
    - amount <= limit: APPROVED
    - amount >  limit: REJECTED

    Example (limit $50,000.00):
        $50,000.00 -> APPROVED
        $50,000.01 -> REJECTED
    """
    return CreditStatus.APPROVED if amount <= limit else CreditStatus.REJECTED


def check_request(request: CreditRequest) -> Decimal:
    """
    Verify a request can produce a valid record and return its amount at
    storage precision (2 decimal places).

    Raises:
        InvalidCreditApplicationError: If any field breaks the record invariants
    """
    name = request.customer_name
    if not name or not name.strip():
        raise InvalidCreditApplicationError("Customer name must not be blank")
    if not CUSTOMER_NAME_MIN_LENGTH <= len(name) <= CUSTOMER_NAME_MAX_LENGTH:
        raise InvalidCreditApplicationError(
            f"Customer name must be between {CUSTOMER_NAME_MIN_LENGTH} "
            f"and {CUSTOMER_NAME_MAX_LENGTH} characters"
        )

    amount = request.amount
    if not isinstance(amount, Decimal) or not amount.is_finite():
        raise InvalidCreditApplicationError(f"Amount must be a finite decimal, got {amount!r}")
    if amount < MIN_AMOUNT:
        raise InvalidCreditApplicationError(f"Amount must be at least {MIN_AMOUNT}")

    # Reject, never round
    quantized = amount.quantize(AMOUNT_PLACES)
    if quantized != amount:
        raise InvalidCreditApplicationError(f"Amount must have at most 2 decimal places, got {amount}")

    if request.type is None:
        raise InvalidCreditApplicationError("Credit type is required")

    return quantized

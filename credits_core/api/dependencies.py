"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from credits_core.config import settings
from credits_core.domain.service import CreditApplicationService
from credits_core.infrastructure.database.repositories import SqlAlchemyApplicationStore
from credits_core.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_credit_service(db: Session = Depends(get_db)) -> CreditApplicationService:
    """Provide lifecycle service bound to the request's session and the configured limit"""
    return CreditApplicationService(
        store=SqlAlchemyApplicationStore(db),
        max_auto_eval_amount=settings.credit_auto_eval_max_amount,
    )

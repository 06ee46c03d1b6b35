"""/api/credits - credit application intake, retrieval, amendment and removal"""

import time
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from credits_core.api.v1.schemas import CreditRequestSchema, CreditResponseSchema
from credits_core.api.dependencies import get_credit_service, get_request_id
from credits_core.infrastructure.database.session import get_db, transaction
from credits_core.domain.service import CreditApplicationService
from credits_core.domain.exceptions import CreditApplicationNotFoundError, InvalidCreditApplicationError
from credits_core.infrastructure.observability.metrics import record_evaluation, operation_counter, not_found_counter
from credits_core.infrastructure.observability.logging import log_operation

router = APIRouter()

# BIGINT primary key range
MAX_APPLICATION_ID = 2**63 - 1


def _to_http_error(operation: str, request_id: str, e: Exception) -> HTTPException:
    """Translate a failed lifecycle call into the matching HTTP error"""
    if isinstance(e, CreditApplicationNotFoundError):
        not_found_counter.labels(operation=operation).inc()
        logging.warning(str(e), extra={"request_id": request_id})
        return HTTPException(status_code=404, detail=str(e))

    if isinstance(e, InvalidCreditApplicationError):
        logging.warning(f"Invalid credit application: {e}", extra={"request_id": request_id})
        return HTTPException(status_code=422, detail=str(e))

    if isinstance(e, SQLAlchemyError):
        logging.error(f"Database error: {e}", extra={"request_id": request_id})
        return HTTPException(status_code=500, detail="Internal server error")

    logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
    return HTTPException(status_code=500, detail="Internal server error")


@router.post("/credits", response_model=CreditResponseSchema, status_code=status.HTTP_201_CREATED)
def create_credit(
    request_body: CreditRequestSchema,
    request: Request,
    db: Session = Depends(get_db),
    service: CreditApplicationService = Depends(get_credit_service),
):
    """
    Register a credit application and evaluate it immediately.

    Flow:
    1. Evaluate requested amount against the auto-evaluation limit
    2. Persist the application with its APPROVED/REJECTED status
    3. Return the stored application (ID and creation timestamp assigned)
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        with transaction(db):
            application = service.create(request_body.to_domain())
    except Exception as e:
        raise _to_http_error("create", request_id, e) from e

    duration_ms = (time.time() - start_time) * 1000
    record_evaluation(application.status, application.amount)
    operation_counter.labels(operation="create").inc()
    log_operation(request_id, "create", application.id, application.status.value, duration_ms)

    return CreditResponseSchema.from_domain(application)


@router.get("/credits", response_model=List[CreditResponseSchema])
def list_credits(service: CreditApplicationService = Depends(get_credit_service)):
    """Retrieve every credit application"""
    return [CreditResponseSchema.from_domain(a) for a in service.find_all()]


@router.get("/credits/{application_id}", response_model=CreditResponseSchema)
def get_credit(
    request: Request,
    application_id: int = Path(..., ge=1, le=MAX_APPLICATION_ID, description="Credit application ID"),
    service: CreditApplicationService = Depends(get_credit_service),
):
    """
    Retrieve a single credit application.

    Returns:
        404 when no application has the given ID
    """
    try:
        application = service.find_by_id(application_id)
    except Exception as e:
        raise _to_http_error("read", get_request_id(request), e) from e

    return CreditResponseSchema.from_domain(application)


@router.put("/credits/{application_id}", response_model=CreditResponseSchema)
def update_credit(
    request_body: CreditRequestSchema,
    request: Request,
    application_id: int = Path(..., ge=1, le=MAX_APPLICATION_ID, description="Credit application ID"),
    db: Session = Depends(get_db),
    service: CreditApplicationService = Depends(get_credit_service),
):
    """
    Replace a credit application's name, amount and type, then re-evaluate.

    The status is recomputed from the new amount, so an APPROVED application
    can become REJECTED and vice versa.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        with transaction(db):
            application = service.update(application_id, request_body.to_domain())
    except Exception as e:
        raise _to_http_error("update", request_id, e) from e

    duration_ms = (time.time() - start_time) * 1000
    record_evaluation(application.status, application.amount)
    operation_counter.labels(operation="update").inc()
    log_operation(request_id, "update", application.id, application.status.value, duration_ms)

    return CreditResponseSchema.from_domain(application)


@router.delete("/credits/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_credit(
    request: Request,
    application_id: int = Path(..., ge=1, le=MAX_APPLICATION_ID, description="Credit application ID"),
    db: Session = Depends(get_db),
    service: CreditApplicationService = Depends(get_credit_service),
):
    """Remove a credit application. 404 if it does not exist."""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        with transaction(db):
            service.delete(application_id)
    except Exception as e:
        raise _to_http_error("delete", request_id, e) from e

    duration_ms = (time.time() - start_time) * 1000
    operation_counter.labels(operation="delete").inc()
    log_operation(request_id, "delete", application_id, None, duration_ms)

    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Credit application lifecycle - create, read, update and delete with inline evaluation"""

import logging
from decimal import Decimal
from typing import List

from credits_core.domain.evaluation import check_request, evaluate
from credits_core.domain.exceptions import CreditApplicationNotFoundError
from credits_core.domain.models import CreditApplication, CreditRequest
from credits_core.domain.store import ApplicationStore


class CreditApplicationService:
    """
    Orchestrates the credit application lifecycle.

    Every create and update re-derives the status from the requested amount,
    so a returned or stored record is always APPROVED or REJECTED. Commit and
    rollback belong to the caller's transaction scope.
    """

    def __init__(self, store: ApplicationStore, max_auto_eval_amount: Decimal):
        self.store = store
        self.max_auto_eval_amount = max_auto_eval_amount

    def create(self, request: CreditRequest) -> CreditApplication:
        logging.info(
            "Processing credit application",
            extra={"customer_name": request.customer_name},
        )
        application = self._evaluated(request)

        saved = self.store.save(application)

        logging.info(
            "Credit application processed",
            extra={
                "application_id": saved.id,
                "amount": str(saved.amount),
                "status": saved.status.value,
            },
        )
        return saved

    def find_all(self) -> List[CreditApplication]:
        logging.debug("Fetching all credit applications")
        return list(self.store.find_all())

    def find_by_id(self, application_id: int) -> CreditApplication:
        logging.debug("Fetching credit application", extra={"application_id": application_id})
        application = self.store.find_by_id(application_id)
        if application is None:
            raise self._not_found(application_id)
        return application

    def update(self, application_id: int, request: CreditRequest) -> CreditApplication:
        """Replace name, amount and type wholesale and re-evaluate the status"""
        logging.info("Updating credit application", extra={"application_id": application_id})

        existing = self.store.find_by_id(application_id)
        if existing is None:
            raise self._not_found(application_id)

        replacement = self._evaluated(request)
        replacement.id = existing.id
        replacement.created_at = existing.created_at

        updated = self.store.save(replacement)

        logging.info(
            "Credit application updated",
            extra={
                "application_id": application_id,
                "previous_status": existing.status.value,
                "status": updated.status.value,
            },
        )
        return updated

    def delete(self, application_id: int) -> None:
        logging.info("Deleting credit application", extra={"application_id": application_id})

        # Check first: deleting a missing ID must fail
        if not self.store.exists_by_id(application_id):
            raise self._not_found(application_id)

        self.store.delete_by_id(application_id)
        logging.info("Credit application deleted", extra={"application_id": application_id})

    def _evaluated(self, request: CreditRequest) -> CreditApplication:
        """Build a record with its terminal status already decided"""
        amount = check_request(request)
        status = evaluate(amount, self.max_auto_eval_amount)
        logging.debug(
            "Credit evaluation",
            extra={
                "amount": str(amount),
                "limit": str(self.max_auto_eval_amount),
                "status": status.value,
            },
        )

        return CreditApplication(
            customer_name=request.customer_name,
            amount=amount,
            type=request.type,
            status=status,
        )

    @staticmethod
    def _not_found(application_id: int) -> CreditApplicationNotFoundError:
        logging.error("Credit application not found", extra={"application_id": application_id})
        return CreditApplicationNotFoundError(application_id)

"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CreditApplicationNotFoundError(DomainException):
    """No credit application exists with the given ID"""

    def __init__(self, application_id: int):
        self.application_id = application_id
        super().__init__(f"Credit application not found with ID: {application_id}")


class InvalidCreditApplicationError(DomainException):
    """Request or record would violate application invariants"""

    pass

from enum import StrEnum


class PurchaseRejection(StrEnum):
    TICKET_COUNT_OUT_OF_RANGE = "ticket count out of range"
    ADULT_REQUIRED = "adult required"


class DomainError(Exception):
    """Base class for business rule violations."""


class InvalidPurchaseRequestError(DomainError):
    def __init__(self, reason: PurchaseRejection) -> None:
        super().__init__(str(reason))
        self.reason = reason

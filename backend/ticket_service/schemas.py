from typing import List

from pydantic import BaseModel, Field

from .models import TicketPurchaseRequest, TicketType, TicketTypeRequest
from .usecases.purchases import PurchaseReceipt


class TicketLine(BaseModel):
    ticket_type: TicketType
    # Negative counts are accepted here and handled by the purchase rules.
    no_of_tickets: int


class PurchaseCreate(BaseModel):
    account_id: int
    tickets: List[TicketLine] = Field(default_factory=list)

    def to_domain(self) -> TicketPurchaseRequest:
        return TicketPurchaseRequest(
            account_id=self.account_id,
            ticket_type_requests=tuple(
                TicketTypeRequest(ticket_type=line.ticket_type, no_of_tickets=line.no_of_tickets)
                for line in self.tickets
            ),
        )


class PurchaseRead(BaseModel):
    account_id: int
    total_tickets: int
    seats_reserved: int
    amount_paid: int

    @classmethod
    def from_receipt(cls, receipt: PurchaseReceipt) -> "PurchaseRead":
        return cls(
            account_id=receipt.account_id,
            total_tickets=receipt.division.total,
            seats_reserved=receipt.seats_reserved,
            amount_paid=receipt.amount_paid,
        )

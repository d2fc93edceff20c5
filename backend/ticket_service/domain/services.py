from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from ..models import TicketType, TicketTypeRequest
from .errors import InvalidPurchaseRequestError, PurchaseRejection

MAX_TICKETS_PER_PURCHASE = 20

TICKET_PRICES: Mapping[TicketType, int] = MappingProxyType(
    {
        TicketType.ADULT: 20,
        TicketType.CHILD: 10,
        TicketType.INFANT: 0,
    }
)


@dataclass(frozen=True)
class SeatDivision:
    total: int = 0
    adult: int = 0
    child: int = 0
    infant: int = 0

    @property
    def seats_to_book(self) -> int:
        # Infants sit on an adult's lap.
        return self.total - self.infant


def compute_seat_division(line_items: Iterable[TicketTypeRequest] | None) -> SeatDivision:
    """
    Count tickets per category. A single negative line item zeroes the whole
    division, so such a request always fails the range check.
    """
    counts = {ticket_type: 0 for ticket_type in TicketType}
    for item in line_items or ():
        if item.no_of_tickets < 0:
            return SeatDivision()
        counts[item.ticket_type] += item.no_of_tickets

    return SeatDivision(
        total=sum(counts.values()),
        adult=counts[TicketType.ADULT],
        child=counts[TicketType.CHILD],
        infant=counts[TicketType.INFANT],
    )


def validate_purchase(division: SeatDivision) -> None:
    """
    Pure validation: between 1 and MAX_TICKETS_PER_PURCHASE tickets, and child or
    infant tickets only alongside at least one adult. Raises domain errors otherwise.
    """
    if division.total <= 0 or division.total > MAX_TICKETS_PER_PURCHASE:
        raise InvalidPurchaseRequestError(PurchaseRejection.TICKET_COUNT_OUT_OF_RANGE)
    if division.total > division.adult and division.adult == 0:
        raise InvalidPurchaseRequestError(PurchaseRejection.ADULT_REQUIRED)


def total_cost(division: SeatDivision) -> int:
    return (
        division.adult * TICKET_PRICES[TicketType.ADULT]
        + division.child * TICKET_PRICES[TicketType.CHILD]
        + division.infant * TICKET_PRICES[TicketType.INFANT]
    )

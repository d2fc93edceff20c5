from dataclasses import dataclass

from ..domain.gateways import SeatReservationService, TicketPaymentService
from ..domain.services import SeatDivision, compute_seat_division, total_cost, validate_purchase
from ..models import TicketPurchaseRequest


@dataclass(frozen=True)
class PurchaseReceipt:
    account_id: int
    division: SeatDivision
    seats_reserved: int
    amount_paid: int


def purchase_tickets(
    payment_service: TicketPaymentService,
    seat_reservation_service: SeatReservationService,
    *,
    request: TicketPurchaseRequest | None,
) -> PurchaseReceipt:
    division = compute_seat_division(request.ticket_type_requests if request is not None else None)
    validate_purchase(division)
    # A valid division implies a request was given.
    assert request is not None

    seats = division.seats_to_book
    seat_reservation_service.reserve_seat(request.account_id, seats)
    amount = total_cost(division)
    # No compensation: seats stay reserved if payment raises.
    payment_service.make_payment(request.account_id, amount)

    return PurchaseReceipt(
        account_id=request.account_id,
        division=division,
        seats_reserved=seats,
        amount_paid=amount,
    )

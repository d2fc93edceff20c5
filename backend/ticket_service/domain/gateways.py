from typing import Protocol


class SeatReservationService(Protocol):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None: ...


class TicketPaymentService(Protocol):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None: ...

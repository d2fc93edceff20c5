from __future__ import annotations

import logging

import httpx

from ..domain.gateways import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class HttpSeatReservationService(SeatReservationService):
    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        response = self.client.post(
            "/reservations",
            json={"account_id": account_id, "seat_count": total_seats_to_allocate},
        )
        response.raise_for_status()
        logger.info("reserved %s seats for account %s", total_seats_to_allocate, account_id)


class HttpTicketPaymentService(TicketPaymentService):
    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        response = self.client.post(
            "/payments",
            json={"account_id": account_id, "amount": total_amount_to_pay},
        )
        response.raise_for_status()
        logger.info("took payment of %s from account %s", total_amount_to_pay, account_id)


class LoggingSeatReservationService(SeatReservationService):
    """Stand-in used when no seat reservation URL is configured."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info("[local] reserve %s seats for account %s", total_seats_to_allocate, account_id)


class LoggingTicketPaymentService(TicketPaymentService):
    """Stand-in used when no payment gateway URL is configured."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info("[local] charge %s to account %s", total_amount_to_pay, account_id)

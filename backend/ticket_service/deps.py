from typing import Iterator

import httpx
from fastapi import Depends

from .config import Settings, get_settings
from .domain.gateways import SeatReservationService, TicketPaymentService
from .infrastructure.gateways import (
    HttpSeatReservationService,
    HttpTicketPaymentService,
    LoggingSeatReservationService,
    LoggingTicketPaymentService,
)


def get_payment_service(settings: Settings = Depends(get_settings)) -> Iterator[TicketPaymentService]:
    if settings.payment_gateway_url is None:
        yield LoggingTicketPaymentService()
        return
    with httpx.Client(base_url=settings.payment_gateway_url, timeout=settings.gateway_timeout_seconds) as client:
        yield HttpTicketPaymentService(client)


def get_seat_reservation_service(
    settings: Settings = Depends(get_settings),
) -> Iterator[SeatReservationService]:
    if settings.seat_reservation_url is None:
        yield LoggingSeatReservationService()
        return
    with httpx.Client(base_url=settings.seat_reservation_url, timeout=settings.gateway_timeout_seconds) as client:
        yield HttpSeatReservationService(client)

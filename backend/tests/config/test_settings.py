from typing import Iterator

import pytest
from ticket_service.config import Settings, get_settings
from ticket_service.deps import get_payment_service, get_seat_reservation_service
from ticket_service.infrastructure.gateways import (
    HttpSeatReservationService,
    HttpTicketPaymentService,
    LoggingSeatReservationService,
    LoggingTicketPaymentService,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_default_to_local_collaborators(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PAYMENT_GATEWAY_URL", raising=False)
    monkeypatch.delenv("SEAT_RESERVATION_URL", raising=False)
    monkeypatch.delenv("GATEWAY_TIMEOUT_SECONDS", raising=False)

    settings = get_settings()

    assert settings.payment_gateway_url is None
    assert settings.seat_reservation_url is None
    assert settings.gateway_timeout_seconds == 5.0


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAYMENT_GATEWAY_URL", "http://payments.local")
    monkeypatch.setenv("SEAT_RESERVATION_URL", "http://seats.local")
    monkeypatch.setenv("GATEWAY_TIMEOUT_SECONDS", "1.5")

    settings = get_settings()

    assert settings.payment_gateway_url == "http://payments.local"
    assert settings.seat_reservation_url == "http://seats.local"
    assert settings.gateway_timeout_seconds == 1.5


def test_deps_pick_logging_services_without_urls() -> None:
    settings = Settings()
    assert isinstance(next(get_payment_service(settings)), LoggingTicketPaymentService)
    assert isinstance(next(get_seat_reservation_service(settings)), LoggingSeatReservationService)


def test_deps_pick_http_services_with_urls() -> None:
    settings = Settings(payment_gateway_url="http://payments.local", seat_reservation_url="http://seats.local")

    payment_gen = get_payment_service(settings)
    payment = next(payment_gen)
    assert isinstance(payment, HttpTicketPaymentService)
    assert str(payment.client.base_url).startswith("http://payments.local")
    payment_gen.close()
    assert payment.client.is_closed

    seat_gen = get_seat_reservation_service(settings)
    assert isinstance(next(seat_gen), HttpSeatReservationService)
    seat_gen.close()

from functools import lru_cache
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    payment_gateway_url: str | None = Field(default=None)
    seat_reservation_url: str | None = Field(default=None)
    gateway_timeout_seconds: float = Field(default=5.0, gt=0)


@lru_cache
def get_settings() -> Settings:
    return Settings(
        payment_gateway_url=os.getenv("PAYMENT_GATEWAY_URL") or None,
        seat_reservation_url=os.getenv("SEAT_RESERVATION_URL") or None,
        gateway_timeout_seconds=float(
            os.getenv("GATEWAY_TIMEOUT_SECONDS", Settings.model_fields["gateway_timeout_seconds"].default)
        ),
    )

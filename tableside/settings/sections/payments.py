from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class PaymentGatewaySettings(BaseSettings):
    """
    Mock payment gateway settings.
    Loaded from .env file with the PAYMENT_ prefix.
    """

    success_rate: float = Field(default=0.9)
    min_delay_ms: int = Field(default=100, ge=0)
    max_delay_ms: int = Field(default=500, ge=0)
    timeout_seconds: Optional[float] = Field(default=10.0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "PAYMENT_",
        "extra": "ignore",
    }

    @field_validator("success_rate")
    @classmethod
    def clamp_success_rate(cls, value: float) -> float:
        return min(max(value, 0.0), 1.0)

    @model_validator(mode="after")
    def check_delay_range(self) -> "PaymentGatewaySettings":
        if self.max_delay_ms < self.min_delay_ms:
            raise ValueError("PAYMENT_MAX_DELAY_MS must be >= PAYMENT_MIN_DELAY_MS")
        return self

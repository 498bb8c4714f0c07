"""
Immutable settings values handed to consumers.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EmailSettings(BaseModel):
    """Where to send mail by default and how hard to try."""

    model_config = ConfigDict(frozen=True)

    default_email_address: str = Field(..., description="Fallback recipient address")
    number_of_retries: int = Field(..., ge=0, description="Delivery attempts before giving up")

    @field_validator("default_email_address")
    @classmethod
    def validate_default_email_address(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("default_email_address must not be blank")
        return v


class FluxCapacitorSettings(BaseModel):
    """Operating point of the flux capacitor."""

    model_config = ConfigDict(frozen=True)

    required_speed_in_mph: int = Field(..., description="Speed at which time travel engages")
    required_gigawatts: float = Field(..., description="Power draw in gigawatts")

from pydantic import BaseModel, field_serializer, field_validator
from typing import Any, Optional
from datetime import datetime, timezone


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive values are taken as UTC; aware values are converted to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ============================================================
# Request body
# ============================================================
class InvoiceIn(BaseModel):
    """
    Create/replace payload.

    Fields are optional here so presence is judged by the service with the
    messages clients expect. ``paid`` stays untyped: pydantic would coerce
    ``1`` or ``"true"`` to a bool, and only real JSON booleans are allowed.
    """
    comp_code: Optional[str] = None
    amt: Optional[float] = None
    paid: Any = None
    add_date: Optional[datetime] = None
    paid_date: Optional[datetime] = None

    # Stored as UTC so the instant survives columns that drop the offset
    @field_validator("add_date", "paid_date")
    @classmethod
    def _timestamps_to_utc(cls, value):
        return as_utc(value)


# ============================================================
# OUT Schema
# ============================================================
class InvoiceOut(BaseModel):
    comp_code: str
    amt: float
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None

    class Config:
        from_attributes = True

    # SQLite hands timestamps back naive; they were written as UTC
    @field_validator("add_date", "paid_date")
    @classmethod
    def _timestamps_are_utc(cls, value):
        return as_utc(value)

    # 200.0 goes out as 200, matching what the client sent
    @field_serializer("amt")
    def _serialize_amt(self, amt: float):
        return int(amt) if float(amt).is_integer() else amt


class InvoiceEnvelope(BaseModel):
    invoice: InvoiceOut

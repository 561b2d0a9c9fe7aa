from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    Integer,
    String,
)
from biztime.api.core.db import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Company code; not constrained so unknown codes are accepted
    comp_code = Column(String, nullable=False, index=True)

    amt = Column(Float, nullable=False)
    paid = Column(Boolean, nullable=False, default=False)

    # --- Timestamps (UTC) ---
    add_date = Column(DateTime(timezone=True), nullable=False)
    paid_date = Column(DateTime(timezone=True), nullable=True)

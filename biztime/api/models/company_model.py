from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from biztime.api.core.db import Base
from biztime.api.models.invoice_model import Invoice  # noqa: F401 (relationship target)

class Company(Base):
    __tablename__ = "companies"

    code = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)

    # Read-only one-to-many (companies → invoices). No FK constraint:
    # invoices may reference codes that do not exist.
    invoices = relationship(
        "Invoice",
        primaryjoin="Company.code == foreign(Invoice.comp_code)",
        order_by="Invoice.id",
        viewonly=True,
    )

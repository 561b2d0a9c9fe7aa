from pydantic import BaseModel
from typing import List, Optional

from biztime.api.schemas.invoice_schema import InvoiceOut


# Request body: every field optional so the service can report what is missing
class CompanyIn(BaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class CompanyOut(BaseModel):
    code: str
    name: str
    description: str

    class Config:
        from_attributes = True


class CompanyDetail(CompanyOut):
    invoices: List[InvoiceOut] = []


class CompanyEnvelope(BaseModel):
    company: CompanyOut

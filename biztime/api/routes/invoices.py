from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from biztime.api.core.db import get_db
from biztime.api.schemas.invoice_schema import InvoiceEnvelope, InvoiceIn, InvoiceOut
from biztime.api.services.invoice_service import invoice_service

router = APIRouter()


@router.get("", response_model=list[InvoiceOut])
def list_invoices(db: Session = Depends(get_db)):
    return invoice_service.get_all_invoices(db)


@router.get("/{invoice_id}", response_model=InvoiceOut)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return invoice_service.get_invoice(db, invoice_id)


@router.post("", response_model=InvoiceEnvelope)
def create_invoice(payload: InvoiceIn, db: Session = Depends(get_db)):
    return {"invoice": invoice_service.create_invoice(db, payload)}


@router.put("/{invoice_id}", response_model=InvoiceOut)
def update_invoice(invoice_id: int, payload: InvoiceIn, db: Session = Depends(get_db)):
    return invoice_service.update_invoice(db, invoice_id, payload)


@router.delete("/{invoice_id}")
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    invoice_service.delete_invoice(db, invoice_id)
    return {"status": "deleted"}

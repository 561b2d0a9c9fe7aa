import logging
from typing import List

from sqlalchemy.orm import Session

from biztime.api.core.errors import NotFoundError, ValidationError
from biztime.api.models.invoice_model import Invoice
from biztime.api.schemas.invoice_schema import InvoiceIn

logger = logging.getLogger(__name__)

MISSING_ON_CREATE = "Not enough data to add item."
MISSING_ON_UPDATE = (
    "You must update every field to update item. "
    "Use same values on other columns if necessary"
)
PAID_NOT_BOOLEAN = "Paid column must be true or false."


class InvoiceService:
    """
    Data-access layer for invoices.

    Creates and updates are full-row writes: every column must be supplied,
    and ``paid`` must be a real boolean.
    """

    # ------------------------------------------------------------
    # Validation shared by create and replace
    # ------------------------------------------------------------
    @staticmethod
    def validate(payload: InvoiceIn, missing_message: str) -> None:
        # paid_date may be null, but the caller has to say so explicitly
        if (
            not payload.comp_code
            or not payload.amt
            or not payload.add_date
            or "paid_date" not in payload.model_fields_set
        ):
            raise ValidationError(missing_message)

        # bool only: 0/1 and "true"/"false" are rejected
        if not isinstance(payload.paid, bool):
            raise ValidationError(PAID_NOT_BOOLEAN)

    # ------------------------------------------------------------
    # Fetch all invoices
    # ------------------------------------------------------------
    def get_all_invoices(self, db: Session) -> List[Invoice]:
        return db.query(Invoice).order_by(Invoice.id).all()

    # ------------------------------------------------------------
    # Fetch single invoice by ID
    # ------------------------------------------------------------
    def get_invoice(self, db: Session, invoice_id: int) -> Invoice:
        invoice = db.query(Invoice).filter(Invoice.id == invoice_id).first()
        if invoice is None:
            raise NotFoundError("Invoice not found.")
        return invoice

    # ------------------------------------------------------------
    # Create
    # ------------------------------------------------------------
    def create_invoice(self, db: Session, payload: InvoiceIn) -> Invoice:
        self.validate(payload, MISSING_ON_CREATE)

        invoice = Invoice(
            comp_code=payload.comp_code,
            amt=payload.amt,
            paid=payload.paid,
            add_date=payload.add_date,
            paid_date=payload.paid_date,
        )
        db.add(invoice)
        db.commit()
        db.refresh(invoice)
        logger.info("Created invoice %s for %s", invoice.id, invoice.comp_code)
        return invoice

    # ------------------------------------------------------------
    # Full replacement
    # ------------------------------------------------------------
    def update_invoice(self, db: Session, invoice_id: int, payload: InvoiceIn) -> Invoice:
        self.validate(payload, MISSING_ON_UPDATE)

        invoice = db.query(Invoice).filter(Invoice.id == invoice_id).first()
        if invoice is None:
            raise NotFoundError("Invoice not found.")

        invoice.comp_code = payload.comp_code
        invoice.amt = payload.amt
        invoice.paid = payload.paid
        invoice.add_date = payload.add_date
        invoice.paid_date = payload.paid_date

        db.commit()
        db.refresh(invoice)
        logger.info("Updated invoice %s", invoice.id)
        return invoice

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, db: Session, invoice_id: int) -> None:
        invoice = db.query(Invoice).filter(Invoice.id == invoice_id).first()
        if invoice is None:
            raise NotFoundError("Invoice not found.")

        db.delete(invoice)
        db.commit()
        logger.info("Deleted invoice %s", invoice_id)


invoice_service = InvoiceService()

import logging

from sqlalchemy.orm import Session
from biztime.api.core.errors import NotFoundError, ValidationError
from biztime.api.models.company_model import Company
from biztime.api.schemas.company_schema import CompanyIn

logger = logging.getLogger(__name__)


def _has_all_fields(payload: CompanyIn) -> bool:
    return bool(payload.code and payload.name and payload.description)


def _commit(db: Session) -> None:
    # Duplicate codes fail here; leave the session usable for the caller
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def list_companies(db: Session):
    companies = db.query(Company).order_by(Company.code).all()
    # An empty table is reported as a bad request, unlike invoices/industries
    if not companies:
        raise NotFoundError("No company data found.", status_code=400)
    return companies


def get_company(db: Session, code: str) -> Company:
    company = db.query(Company).filter(Company.code == code).first()
    if company is None:
        raise NotFoundError("Not Found")
    return company


def create_company(db: Session, payload: CompanyIn) -> Company:
    if not _has_all_fields(payload):
        raise ValidationError("Not enough data to add company.")

    company = Company(code=payload.code, name=payload.name, description=payload.description)
    db.add(company)
    _commit(db)
    db.refresh(company)
    logger.info("Created company %s", company.code)
    return company


def update_company(db: Session, code: str, payload: CompanyIn) -> Company:
    """
    Replace every column of the company at ``code``. The body's code may
    differ from the path code, which renames the company.
    """
    if not _has_all_fields(payload):
        raise ValidationError("Not enough data.")

    company = db.query(Company).filter(Company.code == code).first()
    if company is None:
        raise NotFoundError("No rows found.")

    company.code = payload.code
    company.name = payload.name
    company.description = payload.description
    _commit(db)
    db.refresh(company)
    logger.info("Updated company %s (was %s)", company.code, code)
    return company


def delete_company(db: Session, code: str) -> None:
    company = db.query(Company).filter(Company.code == code).first()
    if company is None:
        raise NotFoundError("Company not found.")

    db.delete(company)
    _commit(db)
    logger.info("Deleted company %s", code)

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from biztime.api.core.errors import ValidationError
from biztime.api.models.company_model import Company
from biztime.api.models.industry_model import CompanyIndustry, Industry
from biztime.api.schemas.industry_schema import IndustryIn, IndustryLinkIn

logger = logging.getLogger(__name__)


def codes_for_industry(db: Session, industry: str) -> List[str]:
    """
    Codes stored on the industry rows named ``industry``. An unknown
    name yields an empty list.
    """
    rows = (
        db.query(Industry.code)
        .filter(Industry.industry == industry)
        .order_by(Industry.id)
        .all()
    )
    return [row.code for row in rows]


def link_company(db: Session, payload: IndustryLinkIn, path_code: Optional[str] = None) -> CompanyIndustry:
    """
    Insert a companyindustries row as given. Neither the company nor the
    industry is checked; store constraint failures propagate.
    """
    link = CompanyIndustry(company_code=payload.code or path_code, industry_id=payload.id)
    db.add(link)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Linked company %s to industry %s", link.company_code, link.industry_id)
    return link


def create_industry(db: Session, payload: IndustryIn) -> Industry:
    """
    Add an industry. When a company already uses the same code, the
    company is linked to the new industry in the same transaction.
    """
    if not payload.code or not payload.industry:
        raise ValidationError("Not enough data to add new industry.")

    industry = Industry(code=payload.code, industry=payload.industry)
    try:
        db.add(industry)
        db.flush()  # assigns industry.id

        company = db.query(Company.code).filter(Company.code == payload.code).first()
        if company is not None:
            db.add(CompanyIndustry(company_code=payload.code, industry_id=industry.id))

        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(industry)
    logger.info(
        "Created industry %s (%s)%s",
        industry.id,
        industry.industry,
        f", linked to company {payload.code}" if company is not None else "",
    )
    return industry

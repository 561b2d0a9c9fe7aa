from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from biztime.api.core.db import get_db
from biztime.api.schemas.industry_schema import (
    IndustryAddedEnvelope,
    IndustryIn,
    IndustryLinkEnvelope,
    IndustryLinkIn,
)
from biztime.api.services import industry_service

router = APIRouter()


@router.get("/{industry}", response_model=list[str])
def get_industry_codes(industry: str, db: Session = Depends(get_db)):
    return industry_service.codes_for_industry(db, industry)


@router.post("", response_model=IndustryAddedEnvelope)
def create_industry(payload: IndustryIn, db: Session = Depends(get_db)):
    industry = industry_service.create_industry(db, payload)
    return {"added": {"code": industry.code, "industry": industry.industry}}


@router.post("/{code}", response_model=IndustryLinkEnvelope)
def link_company_to_industry(code: str, payload: IndustryLinkIn, db: Session = Depends(get_db)):
    link = industry_service.link_company(db, payload, path_code=code)
    return {"added": {"code": link.company_code, "id": link.industry_id}}

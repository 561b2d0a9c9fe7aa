from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from biztime.api.core.db import get_db
from biztime.api.schemas.company_schema import CompanyDetail, CompanyEnvelope, CompanyIn, CompanyOut
from biztime.api.services import company_service

router = APIRouter()


@router.get("", response_model=list[CompanyOut])
def list_companies_route(db: Session = Depends(get_db)):
    return company_service.list_companies(db)


@router.get("/{code}", response_model=CompanyDetail)
def get_company_route(code: str, db: Session = Depends(get_db)):
    return company_service.get_company(db, code)


@router.post("", response_model=CompanyEnvelope, status_code=status.HTTP_201_CREATED)
def create_company_route(payload: CompanyIn, db: Session = Depends(get_db)):
    return {"company": company_service.create_company(db, payload)}


@router.put("/{code}", response_model=CompanyEnvelope)
def update_company_route(code: str, payload: CompanyIn, db: Session = Depends(get_db)):
    return {"company": company_service.update_company(db, code, payload)}


@router.delete("/{code}")
def delete_company_route(code: str, db: Session = Depends(get_db)):
    company_service.delete_company(db, code)
    return {"status": "deleted"}

from sqlalchemy import Column, Integer, String
from biztime.api.core.db import Base


class Industry(Base):
    __tablename__ = "industries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, nullable=False)
    industry = Column(String, nullable=False, index=True)


class CompanyIndustry(Base):
    """Join row linking a company code to an industry id."""

    __tablename__ = "companyindustries"

    company_code = Column(String, primary_key=True)
    industry_id = Column(Integer, primary_key=True, autoincrement=False)

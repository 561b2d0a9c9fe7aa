from pydantic import BaseModel
from typing import Optional


class IndustryIn(BaseModel):
    code: Optional[str] = None
    industry: Optional[str] = None


class IndustryLinkIn(BaseModel):
    code: Optional[str] = None
    id: Optional[int] = None


class IndustryAdded(BaseModel):
    code: str
    industry: str


class IndustryLinkAdded(BaseModel):
    code: str
    id: int


class IndustryAddedEnvelope(BaseModel):
    added: IndustryAdded


class IndustryLinkEnvelope(BaseModel):
    added: IndustryLinkAdded

"""
Shared fixtures: a fresh in-memory database per test, seeded with the
``apple`` company, one unpaid invoice and the ``Computers`` industry.
"""

from __future__ import annotations

import os
from datetime import datetime

# Must be set before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from biztime.api.core.db import build_engine, get_db, init_db
from biztime.api.main import app
from biztime.api.models.company_model import Company
from biztime.api.models.industry_model import Industry
from biztime.api.models.invoice_model import Invoice

ADD_DATE = datetime(2021, 9, 18, 18, 47, 52)


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def seeded(session_factory):
    """Insert the baseline rows and return their values as plain dicts."""

    with session_factory() as session:
        session.add(
            Company(
                code="apple",
                name="Apple",
                description="Big Tech Company. Makes iPhones and Macs.",
            )
        )
        invoice = Invoice(comp_code="apple", amt=500, paid=False, add_date=ADD_DATE, paid_date=None)
        industry = Industry(code="apple", industry="Computers")
        session.add_all([invoice, industry])
        session.commit()

        return {
            "company": {
                "code": "apple",
                "name": "Apple",
                "description": "Big Tech Company. Makes iPhones and Macs.",
            },
            "invoice_id": invoice.id,
            "invoice": {
                "comp_code": "apple",
                "amt": 500,
                "paid": False,
                "add_date": "2021-09-18T18:47:52Z",
                "paid_date": None,
            },
            "industry_id": industry.id,
        }


def _override_db(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture()
def client(session_factory):
    app.dependency_overrides[get_db] = _override_db(session_factory)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def lenient_client(session_factory):
    """Client that returns 500 responses instead of re-raising server errors."""

    app.dependency_overrides[get_db] = _override_db(session_factory)
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()

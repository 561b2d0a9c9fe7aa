from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biztime.api.core.config import settings
from biztime.api.core.db import init_db
from biztime.api.core.errors import register_error_handlers
from biztime.api.core.logging_config import setup_logging

# Routers
from biztime.api.routes import companies, industries, invoices

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE, settings.LIBRARY_LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="BizTime API",
    version="1.0.0",
)

# ==========================
# CORS
# ==========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==========================
# Error envelope
# ==========================
register_error_handlers(app)

# ==========================
# Startup Event
# ==========================
@app.on_event("startup")
def startup_event():
    init_db()
    logger.info("BizTime API is running")

# ==========================
# Routers
# ==========================
app.include_router(companies.router, prefix="/companies", tags=["companies"])
app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
app.include_router(industries.router, prefix="/industries", tags=["industries"])

# ==========================
# Root Endpoint
# ==========================
@app.get("/")
def root():
    return {
        "service": "biztime-api",
        "status": "running",
        "endpoints": {
            "companies": "/companies/",
            "invoices": "/invoices/",
            "industries": "/industries/",
        },
    }

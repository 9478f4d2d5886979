"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import settings
from src.api.routes import analysis, budget

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title=settings.app_name,
    description="Rental cash flow and profit timer calculator",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis.router)
app.include_router(budget.router)


@app.get("/health")
async def health():
    return {"status": "ok"}

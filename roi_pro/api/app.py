"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roi_pro.config import settings
from roi_pro.api.routes import projection, comparison, scenarios

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Real estate purchase projection: amortization, cash flow, equity and returns",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(projection.router)
app.include_router(comparison.router)
app.include_router(scenarios.router)


@app.get("/health")
async def health():
    return {"status": "ok"}

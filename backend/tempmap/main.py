"""
TempMap — FastAPI application entry point.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tempmap.api.router import router
from tempmap.config import CORS_ORIGINS

logger = logging.getLogger(__name__)

app = FastAPI(
    title="TempMap API",
    description="NYC temperature lookup by NY-local date and hour",
    version="0.1.0",
)

# CORS — allow local frontend dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(FileNotFoundError)
async def dataset_missing_handler(request: Request, exc: FileNotFoundError):
    logger.warning("Dataset unavailable: %s", exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "tempmap"}

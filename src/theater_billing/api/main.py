import logging
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from starlette.responses import JSONResponse

from ..config.settings import get_settings
from ..engine import (
    BillingError,
    Invoice,
    Performance,
    PlayNotFoundError,
    PricingEngine,
    UnknownGenreError,
)
from ..report import render_text, usd
from .plays_api import router as plays_router
from .state import get_engine

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Theater Billing API",
    description="Statement generation for theater invoices",
    version="1.0.0"
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(plays_router)


class PerformanceIn(BaseModel):
    play_id: str
    audience: int = Field(ge=0)


class StatementRequest(BaseModel):
    customer: str
    performances: List[PerformanceIn]


@app.exception_handler(PlayNotFoundError)
async def play_not_found_handler(request: Request, exc: PlayNotFoundError):
    return JSONResponse(
        status_code=404,
        content={"code": exc.code.value, "detail": exc.message, "play_id": exc.play_id},
    )


@app.exception_handler(UnknownGenreError)
async def unknown_genre_handler(request: Request, exc: UnknownGenreError):
    return JSONResponse(
        status_code=422,
        content={"code": exc.code.value, "detail": exc.message, "genre": exc.genre, "play_id": exc.play_id},
    )


@app.exception_handler(BillingError)
async def billing_error_handler(request: Request, exc: BillingError):
    logger.warning("Billing error: %s", exc)
    return JSONResponse(
        status_code=400,
        content={"code": exc.code.value, "detail": exc.message},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return JSONResponse(
        status_code=500,
        content={"code": "INTERNAL_ERROR", "detail": "An internal error occurred"},
    )


@app.get("/")
async def root():
    return {"status": "online", "message": "Theater Billing API Active"}


@app.post("/statement")
async def create_statement(req: StatementRequest, engine: PricingEngine = Depends(get_engine)):
    invoice = Invoice(
        customer=req.customer,
        performances=tuple(Performance(play_id=p.play_id, audience=p.audience) for p in req.performances),
    )
    statement = engine.calculate(invoice)
    body = statement.to_dict()
    body["total_amount_display"] = usd(statement.total_amount)
    body["text"] = render_text(statement)
    return body


@app.get("/system/status")
async def get_status(engine: PricingEngine = Depends(get_engine)):
    settings = get_settings()
    return {
        "engine_active": True,
        "plays_count": len(engine.plays),
        "plays_file": str(settings.plays_file),
        "invoices_file": str(settings.invoices_file),
    }

"""FastAPI app factory and server runner for input resolution."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

import uvicorn
from fastapi import Body, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from equity_input.game.errors import ValidationError
from equity_input.game.inputs import parse_input
from equity_input.game.normalization import normalize_input
from equity_input.game.validation import validate_input
from equity_input.interfaces.api.models import HealthResponse, ValidationErrorResponse
from equity_input.shared.config import Config
from equity_input.shared.config_loader import get_config

logger = logging.getLogger(__name__)


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI app exposing input validation and normalization."""
    app = FastAPI(title="Equity Input API", version="1.0.0")

    def _defaults():
        return (config or get_config()).defaults

    @app.exception_handler(ValidationError)
    async def invalid_input(_request: Request, exc: ValidationError) -> JSONResponse:
        body = ValidationErrorResponse(
            field=exc.field, value=jsonable_encoder(exc.value), detail=str(exc)
        )
        return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=body.model_dump())

    @app.get("/health", response_model=HealthResponse)
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/resolve")
    def resolve(payload: Any = Body(...)) -> dict[str, Any]:
        defaults = _defaults()
        raw = parse_input(payload)
        validate_input(raw, defaults)
        resolved = normalize_input(raw, defaults)
        logger.info(f"Resolved input for {resolved.num_players} players")
        return resolved.to_dict()

    return app


def serve(config: Config | None = None) -> None:
    """Run the API with uvicorn on the configured host and port (blocking)."""
    config = config or get_config()
    uvicorn.run(
        create_app(config),
        host=config.api.host,
        port=config.api.port,
        log_level=config.system.log_level.lower(),
    )

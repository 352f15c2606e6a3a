"""HTTP API for the duration converter."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from .durations import (
    MAX_INPUT_LENGTH,
    format_duration,
    format_duration_auto,
    format_duration_auto_long,
    parse_duration,
)
from .errors import DurationError
from .units import unit_table


def _client_error(exc: DurationError, logger: Optional[logging.Logger]) -> HTTPException:
    if logger is not None:
        logger.warning(f"[reject] {exc.kind}: {exc.message}")
    return HTTPException(status_code=400, detail=exc.to_dict())


def create_app(
    max_length: Optional[int] = MAX_INPUT_LENGTH,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    app = FastAPI(title="ms-converter Web API")
    app.state.max_length = max_length
    app.state.logger = logger

    @app.get("/api/parse")
    async def api_parse(value: str) -> JSONResponse:
        try:
            milliseconds = parse_duration(value, max_length=app.state.max_length)
        except DurationError as exc:
            raise _client_error(exc, app.state.logger) from exc
        payload: Dict[str, Any] = {"input": value, "milliseconds": milliseconds}
        return JSONResponse(payload)

    @app.get("/api/format")
    async def api_format(
        milliseconds: int, suffix: Optional[str] = None, long: bool = False
    ) -> JSONResponse:
        try:
            if suffix is not None:
                text = format_duration(milliseconds, suffix)
            elif long:
                text = format_duration_auto_long(milliseconds)
            else:
                text = format_duration_auto(milliseconds)
        except DurationError as exc:
            raise _client_error(exc, app.state.logger) from exc
        return JSONResponse({"milliseconds": milliseconds, "text": text})

    @app.get("/api/units")
    async def api_units() -> JSONResponse:
        return JSONResponse(unit_table())

    return app

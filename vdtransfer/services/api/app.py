from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vdtransfer.common.logging import get_logger
from vdtransfer.common.settings import get_settings
from vdtransfer.domain.errors import NormalizationError, ProbeError
from vdtransfer.services.api.routers import compat, health

logger = get_logger(__name__)


async def _normalization_error(request: Request, exc: NormalizationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc), "path": exc.path})


async def _probe_error(request: Request, exc: ProbeError) -> JSONResponse:
    logger.error("probe failed: %s (rc=%s)", exc.message, exc.returncode)
    return JSONResponse(status_code=502, content={"detail": exc.message, "stderr": exc.stderr})


def create_app() -> FastAPI:
    cfg = get_settings()
    app = FastAPI(
        title="vdtransfer API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    dev = cfg.app_env.lower() == "development"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if dev else cfg.api.cors_allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    app.add_exception_handler(NormalizationError, _normalization_error)
    app.add_exception_handler(ProbeError, _probe_error)

    app.include_router(health.router)
    app.include_router(compat.router)
    return app

app = create_app()

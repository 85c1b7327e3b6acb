import logging
from time import perf_counter

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog import router as catalog_router
from core.config import Settings, load_settings
from core.db import QueryExecutor
from core.errors import ConnectorError, InternalError
from data import router as data_router
from items import router as items_router
from provision import router as provision_router
from query import router as query_router

logger = logging.getLogger("connector.http")


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ConnectorError)
    async def _connector_error(request: Request, exc: ConnectorError) -> JSONResponse:
        if isinstance(exc, InternalError):
            logger.error("internal_error path=%s detail=%s", request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": "Invalid request."})

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error path=%s", request.url.path)
        return JSONResponse(status_code=500, content={"error": InternalError.default_message})


def _install_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def _request_logging_middleware(request: Request, call_next):
        started_at = perf_counter()
        response = await call_next(request)
        duration_ms = (perf_counter() - started_at) * 1000.0
        logger.info(
            "%s %s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the connector app. Settings come from the environment when omitted.
    """
    settings = settings or load_settings()

    app = FastAPI(title="MySQL external collections connector")
    app.state.settings = settings
    app.state.executor = QueryExecutor(settings)

    _install_error_handlers(app)
    _install_request_logging(app)

    app.include_router(provision_router.router, tags=["provision"])
    app.include_router(query_router.router, tags=["query"])
    app.include_router(catalog_router.router, tags=["schemas"])
    app.include_router(items_router.router, tags=["items"])
    app.include_router(data_router.router, tags=["data"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()

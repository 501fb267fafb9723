from contextlib import asynccontextmanager
from logging import Logger, getLogger
from typing import Any, Callable, Dict, Final, Optional

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, status
from fastapi.responses import ORJSONResponse

from lightbnb.db import connect_to_db, disconnect_from_db
from lightbnb.errors import QueryExecutionError
from lightbnb.middleware.request_log_middleware import RequestLogMiddleware
from lightbnb.routes.properties import add_routes as add_properties_routes
from lightbnb.routes.users import add_routes as add_users_routes
from lightbnb.settings import get_settings

_logger: Final[Logger] = getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    connect_to_db(app)
    yield
    disconnect_from_db(app)


def fastapi_factory() -> FastAPI:
    fapi_args: Dict[str, Any] = {
        "title": "LightBnB",
        "docs_url": "/api.html",
        "default_response_class": ORJSONResponse,
        "lifespan": lifespan,
    }
    root_path = get_settings().deployment_root_path
    if root_path is not None:
        fapi_args["root_path"] = root_path
    _logger.info(f"configuring FastAPI with {fapi_args}")
    return FastAPI(**fapi_args)


app = fastapi_factory()
app.add_middleware(RequestLogMiddleware)
app.add_middleware(CorrelationIdMiddleware)
add_properties_routes(app)
add_users_routes(app)


@app.exception_handler(QueryExecutionError)
async def query_execution_error_handler(
    _request: Request, exc: QueryExecutionError
) -> ORJSONResponse:
    _logger.error(f"query execution error: {exc.cause}")
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "The database rejected the query."},
    )


@app.get("/_mgmt/ping")
async def ping() -> Dict[str, str]:
    return {"message": "PONG"}


def run() -> None:
    """Serve the API with uvicorn; installed as the ``lightbnb`` console script."""
    try:
        import uvicorn
    except ImportError as e:
        raise RuntimeError(
            "uvicorn is required to serve LightBnB, install the 'server' extra"
        ) from e
    settings = get_settings()
    log_level = settings.log_level.lower()
    _logger.info(f"serving LightBnB on {settings.app_host}:{settings.app_port}")
    uvicorn.run(
        "lightbnb.app:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=log_level if log_level in uvicorn.config.LOG_LEVELS else "info",
        reload=settings.reload,
    )


def create_handler(app: FastAPI) -> Optional[Callable]:
    """Wrap the API for AWS Lambda when the 'lambda' extra is installed."""
    try:
        from mangum import Mangum
    except ImportError:
        return None
    return Mangum(app, text_mime_types=["text/", "application/json"])


handler = create_handler(app)


if __name__ == "__main__":
    run()

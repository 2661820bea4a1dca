import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import Settings, settings as default_settings
from .core.logging_setup import setup_logging
from .db.session import init_db, make_engine
from .api.v1 import health, tasks

logger = logging.getLogger(__name__)

async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))

async def validation_error(request: Request, exc: RequestValidationError):
    message = tasks.FAILURES.get(request.scope.get("endpoint"))
    if message is None:
        return JSONResponse({"error": "Invalid request payload."}, status_code=422)
    logger.error("%s Unusable request body: %s", message, exc.errors())
    return JSONResponse({"error": message}, status_code=500)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    engine = make_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
        init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine

    app.include_router(health.router, prefix=settings.API_V1_PREFIX)
    app.include_router(tasks.router,  prefix=settings.API_V1_PREFIX)

    app.add_exception_handler(StarletteHTTPException, http_error)
    app.add_exception_handler(RequestValidationError, validation_error)
    return app

app = create_app()

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel
from starlette.middleware.cors import CORSMiddleware

import settings
from checkoutsessions import api_logger
from checkoutsessions import dependencies
from checkoutsessions.routers import main_router
from checkoutsessions.service.exception_handlers.exception_handlers import (
    custom_exception_handler,
)
from checkoutsessions.service.exception_handlers.exception_handlers import (
    validation_exception_handler,
)
from checkoutsessions.service.middleware.main_middleware import MainMiddleware

logger = api_logger.get()


@asynccontextmanager
async def lifespan(_: FastAPI):
    dependencies.init_globals()
    logger.info(f"Started, environment={settings.ENVIRONMENT}")
    yield
    logger.info("Shutdown Signal received.")


app = FastAPI(lifespan=lifespan)

app.include_router(
    main_router.router,
)


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=API_TITLE,
        version="1.0.0",
        description=API_DESCRIPTION,
        routes=app.routes,
        servers=_get_servers(),
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema


def _get_servers():
    base_url = settings.API_BASE_URL.rstrip("/")
    if settings.is_production():
        return [{"url": base_url}]
    return [{"url": f"{base_url}:{settings.API_PORT}"}]


app.openapi = custom_openapi

# order of middleware matters! first middleware called is the last one added
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MainMiddleware)

# exception handlers run AFTER the middlewares!
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, custom_exception_handler)

API_TITLE = "Checkout sessions"
API_DESCRIPTION = "Creates hosted checkout sessions for one-time payments and subscriptions"


class ApiInfo(BaseModel):
    title: str
    description: str

    class Config:
        json_schema_extra = {
            "example": {
                "title": API_TITLE,
                "description": API_DESCRIPTION,
            }
        }


def get_api_info() -> ApiInfo:
    return ApiInfo(title=API_TITLE, description=API_DESCRIPTION)


@app.get(
    "/",
    summary="Returns API information",
    description="Returns API information",
    response_description="API information with title and description.",
    response_model=ApiInfo,
)
def root():
    return get_api_info()

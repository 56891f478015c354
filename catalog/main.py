from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.config import PROD_URI
from catalog.database.db import sessionmanager
from catalog.routing.author import router as author_routing, author_tag_metadata
from catalog.routing.book import router as book_routing, book_tag_metadata
from catalog.routing.catalog import router as catalog_routing, catalog_tag_metadata
from catalog.utils.exceptions import BadRequestException, NotFoundException, DBException, \
    DBDuplicateException, ValidationException
from catalog.utils.loggers import logger


def init_app(dsn: str, tests: bool = False):
    sessionmanager.init(dsn, tests)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info('APP START')
        yield
        logger.info('APP SHUTDOWN')
        await sessionmanager.close()

    tags_metadata = [
        catalog_tag_metadata,
        author_tag_metadata,
        book_tag_metadata,
    ]

    app = FastAPI(
        title="Catalog API",
        lifespan=lifespan,
        openapi_tags=tags_metadata,
        docs_url="/doc",
        redoc_url=None,
        openapi_url="/openapi.json",
        swagger_ui_parameters={
            "defaultModelsExpandDepth": -1,
            "defaultModelExpandDepth": 4
        }
    )

    app.include_router(catalog_routing)
    app.include_router(author_routing)
    app.include_router(book_routing)

    @app.exception_handler(BadRequestException)
    async def bad_request_exception_handler(request: Request, exc: BadRequestException):
        return JSONResponse(
            status_code=400,
            content={"message": exc.message},
        )

    @app.exception_handler(NotFoundException)
    async def not_found_exception_handler(request: Request, exc: NotFoundException):
        return JSONResponse(
            status_code=404,
            content={"message": exc.message},
        )

    @app.exception_handler(DBException)
    async def db_exception_handler(request: Request, exc: DBException):
        return JSONResponse(
            status_code=400,
            content={"message": exc.message},
        )

    @app.exception_handler(DBDuplicateException)
    async def db_duplicate_exception_handler(request: Request, exc: DBDuplicateException):
        return JSONResponse(
            status_code=400,
            content={"message": exc.message},
        )

    @app.exception_handler(ValidationException)
    async def validation_exception_handler(request: Request, exc: ValidationException):
        return JSONResponse(
            status_code=422,
            content={"message": exc.message, "errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
        # Приводим к единому формату {поле: описание нарушения}
        return await validation_exception_handler(request, ValidationException.from_error_list(exc.errors()))

    return app


app = init_app(PROD_URI)

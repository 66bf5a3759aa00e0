import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from survey_backend.core import config
from survey_backend.database import Database
from survey_backend.routes import response_routes, template_routes, user_routes

logger = logging.getLogger(__name__)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies and query strings are client errors like any missing field.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': 'Invalid request.', 'errors': jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {'loc': list(error.get('loc', ())), 'msg': error.get('msg', '')}
        for error in exc.errors()
    ]


def create_app(database: Database | None = None) -> FastAPI:
    app = FastAPI(title='Survey Template API')

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials='*' not in config.CORS_ALLOW_ORIGINS,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    @app.on_event('startup')
    def initialize_database() -> None:
        try:
            app.state.database = database or Database(config.DATABASE_URL, echo=config.DATABASE_ECHO)
            app.state.database.create_schema()
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')

    @app.on_event('shutdown')
    def close_database() -> None:
        storage = getattr(app.state, 'database', None)
        if storage is not None:
            storage.close()

    @app.get('/')
    def root():
        return {'status': 'Survey Template API Running'}

    app.include_router(user_routes.router)
    app.include_router(template_routes.router)
    app.include_router(response_routes.router)

    return app


app = create_app()

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pymongo.database import Database
from starlette.exceptions import HTTPException as StarletteHTTPException

from rinha.api.errors import body_parse_exception_handler, validation_exception_handler
from rinha.api.middleware.request_id_middleware import request_id_middleware
from rinha.api.routes.health_routes import router as health_router
from rinha.api.routes.people_routes import router as people_router


def create_app(database: Database) -> FastAPI:
    app = FastAPI(title="Rinha Pessoas API", version="1.0.0",
                  description="CRUD de pessoas sobre MongoDB.")

    # handle compartido por todas las requests; el driver maneja el pool
    app.state.database = database

    app.middleware("http")(request_id_middleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, body_parse_exception_handler)

    app.include_router(health_router)
    app.include_router(people_router)
    return app

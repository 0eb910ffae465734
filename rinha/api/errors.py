from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# errores en query o path son del cliente (400); el body malformado es 422
BAD_REQUEST_LOCATIONS = ("query", "path")

# detalle que usa FastAPI cuando no puede decodificar el body (p.ej. UTF-8 inválido)
BODY_PARSE_ERROR = "There was an error parsing the body"


def validation_status_code(errors) -> int:
    for err in errors:
        loc = err.get("loc") or ()
        if loc and loc[0] in BAD_REQUEST_LOCATIONS:
            return 400
    return 422


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    return JSONResponse(
        status_code=validation_status_code(errors),
        content={"detail": jsonable_encoder(errors)},
    )


async def body_parse_exception_handler(request: Request, exc: StarletteHTTPException):
    """Un body que no se puede decodificar es un body malformado: 422, no 400."""
    if exc.status_code == 400 and exc.detail == BODY_PARSE_ERROR:
        return JSONResponse(status_code=422, content={"detail": exc.detail})
    return await http_exception_handler(request, exc)

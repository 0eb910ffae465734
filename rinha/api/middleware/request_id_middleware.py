import logging
import time
import uuid

from fastapi import Request

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"

# rutas que no pasan por el trazado
UNTRACED_PATHS = ("/health-check",)


async def request_id_middleware(request: Request, call_next):
    """
    Middleware HTTP que asigna un X-Request-Id a cada request.
    - Reutiliza el header entrante si viene, si no genera un uuid4
    - Lo deja en request.state.request_id y lo devuelve en la respuesta
    - Loguea método, path, status y duración
    """
    if request.url.path in UNTRACED_PATHS:
        return await call_next(request)

    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = request_id

    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({elapsed_ms:.1f} ms) request_id={request_id}"
    )
    return response
